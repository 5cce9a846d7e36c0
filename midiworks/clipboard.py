"""Clipboard for copied notes, stored relative to the earliest one."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .notes import NoteLocation


@dataclass(frozen=True)
class ClipboardNote:
    """A copied note, positioned relative to the first note of the copy."""

    relative_start_tick: int
    duration: int
    pitch: int
    velocity: int
    track_index: int


class Clipboard:
    """Holds the most recently copied notes."""

    def __init__(self) -> None:
        self._notes: tuple[ClipboardNote, ...] = ()

    def copy_notes(self, notes: Sequence[NoteLocation]) -> None:
        """Replace the clipboard with ``notes``; an empty copy leaves it unchanged."""
        if not notes:
            return
        earliest = min(note.start_tick for note in notes)
        self._notes = tuple(
            ClipboardNote(
                relative_start_tick=note.start_tick - earliest,
                duration=note.end_tick - note.start_tick,
                pitch=note.pitch,
                velocity=note.velocity,
                track_index=note.track_index,
            )
            for note in notes
        )

    def notes(self) -> tuple[ClipboardNote, ...]:
        return self._notes

    def has_data(self) -> bool:
        return bool(self._notes)

    def clear(self) -> None:
        self._notes = ()