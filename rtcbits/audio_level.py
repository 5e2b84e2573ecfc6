"""Peak audio level tracking with slow decay and accumulated energy."""

from __future__ import annotations

from collections.abc import Iterable

INT16_MAX = 32767

# The reported level is refreshed once every this many calls plus one.
UPDATE_FREQUENCY = 10


def max_abs_value_w16(samples: Iterable[int]) -> int:
    """Return the largest absolute sample value, saturated to 32767."""
    maximum = max((abs(sample) for sample in samples), default=0)
    return min(maximum, INT16_MAX)


class AudioLevel:
    """Tracks the peak level of 16-bit audio and its total energy."""

    def __init__(self) -> None:
        self._abs_max = 0
        self._count = 0
        self._current_level_full_range = 0
        self._total_energy = 0.0
        self._total_duration = 0.0

    @property
    def level_full_range(self) -> int:
        """The most recently published peak level, 0..32767."""
        return self._current_level_full_range

    @property
    def total_energy(self) -> float:
        """Accumulated squared normalised level multiplied by duration."""
        return self._total_energy

    @property
    def total_duration(self) -> float:
        """Accumulated duration of all processed audio."""
        return self._total_duration

    def clear(self) -> None:
        """Reset the peak tracking; energy and duration totals are kept."""
        self._abs_max = 0
        self._count = 0
        self._current_level_full_range = 0

    def compute_level(self, samples: Iterable[int], duration: float) -> None:
        """Process one block of samples lasting ``duration`` seconds."""
        abs_value = max_abs_value_w16(samples)
        if abs_value > self._abs_max:
            self._abs_max = abs_value

        previous = self._count
        self._count += 1
        if previous == UPDATE_FREQUENCY:
            self._current_level_full_range = self._abs_max
            self._count = 0
            # Decay the absolute maximum by a factor of four.
            self._abs_max >>= 2

        normalised = self._current_level_full_range / INT16_MAX
        self._total_energy += normalised * normalised * duration
        self._total_duration += duration