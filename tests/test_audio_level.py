import pytest

from rtcbits.audio_level import UPDATE_FREQUENCY, AudioLevel, max_abs_value_w16


def test_max_abs_value_picks_largest_magnitude():
    assert max_abs_value_w16([3, -7, 5]) == 7


def test_max_abs_value_saturates_min_int16():
    assert max_abs_value_w16([-32768, 10]) == 32767


def test_max_abs_value_empty_is_zero():
    assert max_abs_value_w16([]) == max_abs_value_w16([0, 0])
    assert max_abs_value_w16([]) == max_abs_value_w16([-0])


def test_level_not_published_before_update():
    level = AudioLevel()
    for _ in range(UPDATE_FREQUENCY):
        level.compute_level([1000, -2000], 0.01)
    assert level.level_full_range == 0


def test_level_published_on_eleventh_call():
    level = AudioLevel()
    for _ in range(UPDATE_FREQUENCY + 1):
        level.compute_level([1000, -2000], 0.01)
    assert level.level_full_range == 2000


def test_level_decays_by_four_after_update():
    level = AudioLevel()
    for _ in range(UPDATE_FREQUENCY + 1):
        level.compute_level([32767], 0.01)
    assert level.level_full_range == 32767
    for _ in range(UPDATE_FREQUENCY + 1):
        level.compute_level([0], 0.01)
    assert level.level_full_range == 32767 >> 2


def test_total_duration_accumulates():
    level = AudioLevel()
    for _ in range(4):
        level.compute_level([100], 0.25)
    assert level.total_duration == pytest.approx(1.0)


def test_energy_zero_until_level_published():
    level = AudioLevel()
    for _ in range(UPDATE_FREQUENCY):
        level.compute_level([32767], 0.5)
    assert level.total_energy == 0.0


def test_full_scale_energy_equals_duration():
    level = AudioLevel()
    for _ in range(UPDATE_FREQUENCY):
        level.compute_level([32767], 0.5)
    level.compute_level([32767], 0.5)
    assert level.total_energy == pytest.approx(0.5)


def test_clear_resets_level_but_keeps_totals():
    level = AudioLevel()
    for _ in range(UPDATE_FREQUENCY + 1):
        level.compute_level([32767], 0.5)
    energy = level.total_energy
    duration = level.total_duration
    level.clear()
    assert level.level_full_range == 0
    assert level.total_energy == energy
    assert level.total_duration == duration
    for _ in range(UPDATE_FREQUENCY):
        level.compute_level([0], 0.5)
    assert level.total_energy == energy