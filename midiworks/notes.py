"""Location of a note inside a track."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class NoteLocation:
    """A note found in a track, identified by its track and event indices."""

    found: bool = False
    track_index: int = -1
    note_on_index: int = 0
    note_off_index: int = 0
    start_tick: int = 0
    end_tick: int = 0
    pitch: int = 0
    velocity: int = 0

    def _key(self) -> tuple[int, int, int]:
        return (self.track_index, self.note_on_index, self.note_off_index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteLocation):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def duration(self) -> int:
        """Length of the note in ticks."""
        return self.end_tick - self.start_tick