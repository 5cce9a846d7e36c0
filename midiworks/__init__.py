"""Editing model and piano-roll geometry for a MIDI sequencer: notes, selection,
clipboard, undo/redo, metronome set-up, grid snapping, viewport and velocity editing."""

__version__ = "1.0.0"