# tests/test_timing.py
import pytest

from picturecross.engine.timing import (
    WIN_ANIMATION_DURATION_MS, WIN_WAVE_STEP_MS, Corner, corner_distance, win_pulse_level, win_wave_delay_ms,
)

def test_constants():
    assert WIN_ANIMATION_DURATION_MS == 1000
    assert WIN_WAVE_STEP_MS == 50

def test_wave_starts_at_corner():
    size = 5
    assert win_wave_delay_ms(0, 0, size, Corner.TOP_LEFT) == 0
    assert win_wave_delay_ms(0, 4, size, Corner.TOP_RIGHT) == 0
    assert win_wave_delay_ms(4, 0, size, Corner.BOTTOM_LEFT) == 0
    assert win_wave_delay_ms(4, 4, size, Corner.BOTTOM_RIGHT) == 0
    assert win_wave_delay_ms(4, 4, size, Corner.TOP_LEFT) == 8 * 50
    assert win_wave_delay_ms(1, 3, size, 1) == (1 + 1) * 50
    assert win_wave_delay_ms(1, 3, size, 2) == (3 + 3) * 50

def test_opposite_corner_is_last():
    for corner in Corner:
        worst = max(corner_distance(r, c, 7, corner) for r in range(7) for c in range(7))
        assert worst == 12

def test_pulse_waits_for_delay_then_ramps():
    assert win_pulse_level(0, 0) == 0.0
    assert win_pulse_level(100, 200) == 0.0
    assert win_pulse_level(200 + 500, 200) == pytest.approx(0.5)
    assert win_pulse_level(200 + 1000, 200) == pytest.approx(1.0)
    # one-way duration: back down over the next second, then repeats
    assert win_pulse_level(200 + 1500, 200) == pytest.approx(0.5)
    assert win_pulse_level(200 + 2000, 200) == pytest.approx(0.0)
    assert win_pulse_level(200 + 2250, 200) == pytest.approx(0.25)
    assert win_pulse_level(250, 0, duration_ms=100) == pytest.approx(0.5)

def test_bad_corner_rejected():
    with pytest.raises(ValueError):
        win_wave_delay_ms(0, 0, 5, 4)
