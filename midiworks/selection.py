"""The set of notes currently selected in the editor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from .notes import NoteLocation


class Selection:
    """Ordered collection of selected notes, without duplicates."""

    def __init__(self) -> None:
        self._notes: list[NoteLocation] = []

    def select_note(self, note: NoteLocation) -> None:
        """Add a note unless it is already selected."""
        if note not in self._notes:
            self._notes.append(replace(note))

    def select_notes(self, notes: Iterable[NoteLocation]) -> None:
        """Replace the whole selection with ``notes``."""
        self._notes = [replace(note) for note in notes]

    def deselect_note(self, note: NoteLocation) -> None:
        """Remove a note from the selection if present."""
        try:
            self._notes.remove(note)
        except ValueError:
            pass

    def clear(self) -> None:
        self._notes.clear()

    def contains(self, note: NoteLocation) -> bool:
        return note in self._notes

    def is_empty(self) -> bool:
        return not self._notes

    def notes(self) -> tuple[NoteLocation, ...]:
        """The selected notes in selection order."""
        return tuple(self._notes)

    def update_velocity(self, track_index: int, note_on_index: int, velocity: int) -> None:
        """Set the velocity of the first selected note matching the indices."""
        for note in self._notes:
            if note.track_index == track_index and note.note_on_index == note_on_index:
                note.velocity = velocity
                break

    def __contains__(self, note: object) -> bool:
        return note in self._notes

    def __iter__(self) -> Iterator[NoteLocation]:
        return iter(tuple(self._notes))

    def __len__(self) -> int:
        return len(self._notes)