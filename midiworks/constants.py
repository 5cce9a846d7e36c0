"""Timing, channel and note-duration constants shared across the editor."""

from __future__ import annotations

from dataclasses import dataclass

# Timing
TICKS_PER_QUARTER = 960  # pulses per quarter note
MAX_TICK_VALUE = 100_000_000  # guards against wrap-around of negative positions
NOTE_SEPARATION_TICKS = 10  # minimum gap that keeps adjacent notes from overlapping

# MIDI specification
CHANNEL_COUNT = 15  # user channels; the sixteenth is kept for the metronome
METRONOME_CHANNEL = 15
TOTAL_CHANNELS = 16
MIDI_NOTE_COUNT = 128
MAX_MIDI_NOTE = 127
PROGRAM_COUNT = 128
NOTES_PER_OCTAVE = 12

# Initial values (may change at runtime)
DEFAULT_TEMPO = 120.0
DEFAULT_TIME_SIGNATURE_NUMERATOR = 4
DEFAULT_TIME_SIGNATURE_DENOMINATOR = 4
DEFAULT_VOLUME = 100
DEFAULT_VELOCITY = 100

NUMERATOR_LIST: tuple[str, ...] = tuple(str(n) for n in range(1, 22))
DENOMINATOR_LIST: tuple[str, ...] = ("2", "4", "8", "16", "32")

# Four bars of 4/4
DEFAULT_LOOP_END = TICKS_PER_QUARTER * 4 * 4


@dataclass(frozen=True)
class NoteDuration:
    """A note length with its display label and length in ticks."""

    label: str
    ticks: int


NOTE_DURATIONS: tuple[NoteDuration, ...] = (
    NoteDuration("Whole Note", 3840),
    NoteDuration("Half Note", 1920),
    NoteDuration("Quarter Note", 960),
    NoteDuration("Quarter Triplet", 640),
    NoteDuration("Eighth Note", 480),
    NoteDuration("Eighth Triplet", 320),
    NoteDuration("Sixteenth Note", 240),
    NoteDuration("Sixteenth Triplet", 160),
    NoteDuration("Custom", 0),  # 0 means the length comes from a custom value
)

DEFAULT_DURATION_INDEX = 2  # quarter note


def round_to_grid(tick: int, grid_size: int) -> int:
    """Round ``tick`` to the nearest multiple of ``grid_size`` (halves round up)."""
    if grid_size <= 0:
        raise ValueError(f"grid size must be positive, got {grid_size}")
    return ((tick + grid_size // 2) // grid_size) * grid_size


def grid_size_to_name(grid_size: int) -> str:
    """Return a plural, human-readable name for a grid size in ticks."""
    for duration in NOTE_DURATIONS:
        if duration.ticks == grid_size:
            return f"{duration.label}s"
    return f"{grid_size} ticks"