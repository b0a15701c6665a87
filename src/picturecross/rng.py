import math
import re
import secrets
from dataclasses import dataclass
from typing import Optional

# Fresh seeds are drawn below this bound (fits a signed 32-bit int).
MAX_FRESH_SEED = 2_000_000_000
# Typed numeric seeds wrap into the 32-bit range.
SEED_MODULUS = 2 ** 32
# Longer digit strings are hashed like text.
MAX_SEED_DIGITS = 10

_DIGITS = re.compile(r"[0-9]+")


def sin_fraction(counter: int) -> float:
    """Fractional part of sin(counter) * 10000, always in [0, 1)."""
    x = math.sin(counter) * 10000
    return x - math.floor(x)


@dataclass
class SeededRandom:
    counter: int

    def next(self) -> float:
        value = sin_fraction(self.counter)
        self.counter += 1
        return value

    def range(self, lo: int, hi: int) -> int:
        # inclusive on both ends
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def bool(self, chance: float = 0.5) -> bool:
        return self.next() < chance


def _to_int32(x: int) -> int:
    x &= 0xFFFFFFFF
    return x - 0x100000000 if (x & 0x80000000) else x


def seed_from_text(text: str) -> int:
    """
    Rolling 31x hash over the UTF-16 code units of `text`, wrapped like a
    signed 32-bit int, returned as its absolute value.
    """
    # surrogatepass: lone surrogates hash as their own code unit
    raw = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(raw), 2):
        unit = raw[i] | (raw[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    return abs(_to_int32(h))


def fresh_seed(limit: int = MAX_FRESH_SEED) -> int:
    return secrets.randbelow(limit)


def resolve_seed(text: Optional[str] = None, limit: int = MAX_FRESH_SEED) -> int:
    """
    Turn the seed box contents into a seed:
      - only ASCII digits -> parsed, wrapped to 32 bits (over 10 digits: hashed)
      - any other non-blank text -> seed_from_text
      - blank or None -> fresh_seed (not reproducible)
    """
    if text is None or not text.strip():
        return fresh_seed(limit)
    if _DIGITS.fullmatch(text) and len(text) <= MAX_SEED_DIGITS:
        return int(text, 10) % SEED_MODULUS
    return seed_from_text(text)
