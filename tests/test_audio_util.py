import pytest

from rtcbits.audio_util import (
    MIN_DBFS,
    db_to_ratio,
    dbfs_to_float_s16,
    deinterleave,
    downmix_interleaved_to_mono,
    downmix_to_mono,
    float_s16_to_dbfs,
    float_s16_to_float,
    float_s16_to_s16,
    float_to_float_s16,
    float_to_s16,
    interleave,
    s16_to_float,
    upmix_mono_to_interleaved,
)


@pytest.mark.parametrize(
    "value, expected",
    [(1.0, 32767), (2.0, 32767), (-1.0, -32768), (-3.0, -32768)],
)
def test_float_to_s16_saturates(value, expected):
    assert float_to_s16(value) == expected


@pytest.mark.parametrize("sample", [-32768, -12345, -1, 0, 1, 100, 20000, 32767])
def test_s16_float_round_trip(sample):
    assert float_to_s16(s16_to_float(sample)) == sample


def test_s16_to_float_extremes():
    assert s16_to_float(32767) == pytest.approx(1.0, rel=1e-6)
    assert s16_to_float(-32768) == pytest.approx(-1.0, rel=1e-6)


def test_float_s16_to_s16_saturates():
    assert float_s16_to_s16(40000.0) == 32767
    assert float_s16_to_s16(-40000.0) == -32768


@pytest.mark.parametrize("sample", [-32768, -500, 0, 7, 32767])
def test_float_s16_to_s16_keeps_integers(sample):
    assert float_s16_to_s16(float(sample)) == sample


def test_float_s16_to_s16_rounds_half_away_from_zero():
    assert float_s16_to_s16(2.5) == 3
    assert float_s16_to_s16(-2.5) == -3


@pytest.mark.parametrize("value", [-1.0, -0.25, 0.0, 0.5, 1.0])
def test_float_float_s16_round_trip(value):
    assert float_s16_to_float(float_to_float_s16(value)) == pytest.approx(
        value, abs=1e-6
    )


def test_float_to_float_s16_extremes():
    assert float_to_float_s16(1.0) == 32767
    assert float_to_float_s16(-1.0) == -32768


def test_db_to_ratio_zero_db_is_unity():
    assert db_to_ratio(0.0) == pytest.approx(1.0)


def test_dbfs_full_scale():
    assert dbfs_to_float_s16(0.0) == pytest.approx(32768.0)


def test_float_s16_to_dbfs_floor():
    assert float_s16_to_dbfs(1.0) == pytest.approx(MIN_DBFS, rel=1e-6)
    assert float_s16_to_dbfs(0.0) == pytest.approx(MIN_DBFS, rel=1e-6)


@pytest.mark.parametrize("level", [-60.0, -20.0, -6.0])
def test_dbfs_round_trip(level):
    assert float_s16_to_dbfs(dbfs_to_float_s16(level)) == pytest.approx(
        level, abs=1e-3
    )


def test_deinterleave_splits_channels():
    assert deinterleave([1, 2, 3, 4, 5, 6], 3, 2) == [[1, 3, 5], [2, 4, 6]]


def test_deinterleave_too_short():
    with pytest.raises(ValueError):
        deinterleave([1, 2, 3], 2, 2)


def test_interleave_round_trip():
    channels = [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
    assert deinterleave(interleave(channels), 3, 3) == channels


def test_interleave_unequal_lengths():
    with pytest.raises(ValueError):
        interleave([[1, 2], [3]])


def test_upmix_mono_to_interleaved():
    assert upmix_mono_to_interleaved([1, 2], 3) == [1, 1, 1, 2, 2, 2]


def test_downmix_of_upmix_is_identity():
    mono = [5, -7, 32767, -32768]
    assert downmix_interleaved_to_mono(upmix_mono_to_interleaved(mono, 2), 2) == mono


def test_downmix_identical_channels():
    channel = [0.5, -0.25, 1.0]
    assert downmix_to_mono([channel, channel, channel]) == channel


def test_downmix_integer_truncates_toward_zero():
    assert downmix_to_mono([[-3], [0]]) == [-1]


def test_downmix_layouts_agree():
    channels = [[10, -20, 31], [3, 4, -5], [100, 0, 7]]
    assert downmix_interleaved_to_mono(interleave(channels), 3) == downmix_to_mono(
        channels
    )


def test_downmix_interleaved_rejects_partial_frame():
    with pytest.raises(ValueError):
        downmix_interleaved_to_mono([1, 2, 3], 2)


def test_downmix_interleaved_rejects_zero_channels():
    with pytest.raises(ValueError):
        downmix_interleaved_to_mono([1, 2], 0)