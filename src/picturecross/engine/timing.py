# src/picturecross/engine/timing.py
# Win animation cadence: a wave of delays rolling out from one corner.

from __future__ import annotations

from enum import IntEnum

# One-way duration of the win pulse on a filled cell.
WIN_ANIMATION_DURATION_MS = 1000
# Added per unit of Manhattan distance from the wave's corner.
WIN_WAVE_STEP_MS = 50


class Corner(IntEnum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


def corner_distance(r: int, c: int, size: int, corner: int) -> int:
    s = size - 1
    corner = Corner(corner)
    if corner == Corner.TOP_LEFT:
        return r + c
    if corner == Corner.TOP_RIGHT:
        return r + (s - c)
    if corner == Corner.BOTTOM_LEFT:
        return (s - r) + c
    return (s - r) + (s - c)


def win_wave_delay_ms(r: int, c: int, size: int, corner: int) -> int:
    return corner_distance(r, c, size, corner) * WIN_WAVE_STEP_MS


def win_pulse_level(elapsed_ms: int, delay_ms: int, duration_ms: int = WIN_ANIMATION_DURATION_MS) -> float:
    """
    Pulse strength in [0, 1] for a cell whose wave starts at delay_ms.
    Ramps up over one duration, back down over the next, and repeats.
    """
    t = elapsed_ms - delay_ms
    if t <= 0 or duration_ms <= 0:
        return 0.0
    phase = t % (2 * duration_ms)
    if phase > duration_ms:
        phase = 2 * duration_ms - phase
    return phase / duration_ms
