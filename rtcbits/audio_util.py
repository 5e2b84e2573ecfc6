"""Sample format conversions and channel layout helpers for 16-bit audio.

Naming convention:
    S16       integer samples in [-32768, 32767]
    Float     float samples in [-1.0, 1.0]
    FloatS16  float samples in [-32768.0, 32767.0]
    Dbfs      float in [-20*log10(32768), 0] = [-90.3, 0]
"""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from typing import TypeVar

INT16_MAX = 32767
INT16_MIN = -32768

T = TypeVar("T")

_FLOAT32 = struct.Struct("f")


def _f32(x: float) -> float:
    """Round a Python float to single precision."""
    return _FLOAT32.unpack(_FLOAT32.pack(x))[0]


_MAX_INT16_INVERSE = _f32(1.0 / INT16_MAX)
_MIN_INT16_INVERSE = _f32(1.0 / INT16_MIN)
_MAX_ROUND = _f32(INT16_MAX - 0.5)
_MIN_ROUND = _f32(INT16_MIN + 0.5)
_MAXIMUM_ABS_FLOAT_S16 = float(-INT16_MIN)
# Equal to -20.0 * log10(-INT16_MIN).
MIN_DBFS = -90.30899869919436


def float_to_s16(v: float) -> int:
    """Convert a sample in [-1.0, 1.0] to a saturated 16-bit integer."""
    v = _f32(v)
    if v > 0:
        if v >= 1:
            return INT16_MAX
        return int(_f32(_f32(v * INT16_MAX) + 0.5))
    if v <= -1:
        return INT16_MIN
    return int(_f32(_f32(-v * INT16_MIN) - 0.5))


def s16_to_float(v: int) -> float:
    """Convert a 16-bit integer sample to a float in [-1.0, 1.0]."""
    scale = _MAX_INT16_INVERSE if v > 0 else -_MIN_INT16_INVERSE
    return _f32(v * scale)


def float_s16_to_s16(v: float) -> int:
    """Round a float in 16-bit range to a saturated 16-bit integer."""
    v = _f32(v)
    if v > 0:
        if v >= _MAX_ROUND:
            return INT16_MAX
        return int(_f32(v + 0.5))
    if v <= _MIN_ROUND:
        return INT16_MIN
    return int(_f32(v - 0.5))


def float_to_float_s16(v: float) -> float:
    """Scale a sample in [-1.0, 1.0] to the 16-bit float range."""
    v = _f32(v)
    return _f32(v * (INT16_MAX if v > 0 else -INT16_MIN))


def float_s16_to_float(v: float) -> float:
    """Scale a sample in the 16-bit float range to [-1.0, 1.0]."""
    v = _f32(v)
    scale = _MAX_INT16_INVERSE if v > 0 else -_MIN_INT16_INVERSE
    return _f32(v * scale)


def db_to_ratio(v: float) -> float:
    """Convert decibels to a linear amplitude ratio."""
    return _f32(10.0 ** (_f32(v) / 20.0))


def dbfs_to_float_s16(v: float) -> float:
    """Convert a dBFS level to a sample magnitude in the 16-bit float range."""
    return _f32(db_to_ratio(v) * _MAXIMUM_ABS_FLOAT_S16)


def float_s16_to_dbfs(v: float) -> float:
    """Convert a sample magnitude in the 16-bit float range to dBFS."""
    v = _f32(v)
    if v <= 1.0:
        return _f32(MIN_DBFS)
    return _f32(20.0 * math.log10(v) + MIN_DBFS)


def deinterleave(
    interleaved: Sequence[T], samples_per_channel: int, num_channels: int
) -> list[list[T]]:
    """Split interleaved samples into one list per channel."""
    if num_channels <= 0:
        raise ValueError("num_channels must be positive")
    needed = samples_per_channel * num_channels
    if samples_per_channel < 0 or len(interleaved) < needed:
        raise ValueError(
            f"need {needed} interleaved samples, got {len(interleaved)}"
        )
    frames = interleaved[:needed]
    return [list(frames[channel::num_channels]) for channel in range(num_channels)]


def interleave(channels: Sequence[Sequence[T]]) -> list[T]:
    """Merge equally long channel buffers into one interleaved list."""
    return [sample for frame in zip(*channels, strict=True) for sample in frame]


def upmix_mono_to_interleaved(mono: Sequence[T], num_channels: int) -> list[T]:
    """Copy each mono sample into every channel of an interleaved list."""
    if num_channels <= 0:
        raise ValueError("num_channels must be positive")
    return [sample for sample in mono for _ in range(num_channels)]


def _average(values: Sequence, count: int):
    total = sum(values)
    if isinstance(total, int):
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return total / count


def downmix_to_mono(channels: Sequence[Sequence[T]]) -> list[T]:
    """Average channel buffers into a single channel.

    Integer samples are divided with truncation toward zero.
    """
    if not channels:
        raise ValueError("at least one channel is required")
    count = len(channels)
    return [_average(frame, count) for frame in zip(*channels, strict=True)]


def downmix_interleaved_to_mono(
    interleaved: Sequence[T], num_channels: int
) -> list[T]:
    """Average each frame of an interleaved signal into a single channel."""
    if num_channels <= 0:
        raise ValueError("num_channels must be positive")
    if len(interleaved) % num_channels:
        raise ValueError("sample count is not a whole number of frames")
    return [
        _average(interleaved[start : start + num_channels], num_channels)
        for start in range(0, len(interleaved), num_channels)
    ]