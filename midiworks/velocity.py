"""Geometry of the velocity editor and drag targets for note edits."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .canvas_style import MIN_NOTE_DURATION_TICKS
from .constants import MAX_MIDI_NOTE
from .notes import NoteLocation
from .viewport import Viewport

VELOCITY_EDITOR_FRACTION = 0.75  # the editor occupies the bottom quarter of the canvas
CONTROLS_PADDING = 10
CONTROL_RADIUS = 8
CONTROL_HIT_TOLERANCE = 5
MAX_VELOCITY = 127
MIN_EDITED_VELOCITY = 1  # velocity 0 would act as a note-off


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _controls_geometry(height: int) -> tuple[int, int]:
    """Top and height, in pixels, of the area the velocity handles move in."""
    controls_top = int(velocity_editor_top(height) + CONTROLS_PADDING)
    controls_height = height - CONTROLS_PADDING - controls_top
    return controls_top, controls_height


def velocity_editor_top(height: int) -> float:
    """Screen y at which the velocity editor begins."""
    return VELOCITY_EDITOR_FRACTION * height


def velocity_control_y(height: int, velocity: int) -> int:
    """Screen y of the handle that shows ``velocity``; louder is higher."""
    if not 0 <= velocity <= MAX_VELOCITY:
        raise ValueError(f"velocity out of range: {velocity}")
    controls_top, controls_height = _controls_geometry(height)
    return controls_top + _tdiv((MAX_VELOCITY - velocity) * controls_height, MAX_VELOCITY)


def velocity_at_y(height: int, screen_y: int) -> int:
    """The velocity a handle dragged to ``screen_y`` sets, within 1..127."""
    controls_top, controls_height = _controls_geometry(height)
    if controls_height == 0:
        raise ValueError(f"canvas height {height} leaves no room for velocity handles")
    relative_y = screen_y - controls_top
    velocity = MAX_VELOCITY - _tdiv(relative_y * MAX_VELOCITY, controls_height)
    return max(MIN_EDITED_VELOCITY, min(velocity, MAX_VELOCITY))


def find_velocity_control(
    viewport: Viewport,
    screen_x: int,
    screen_y: int,
    notes: Iterable[NoteLocation],
) -> NoteLocation | None:
    """The first of ``notes`` whose velocity handle lies under the point, or None."""
    if screen_y < velocity_editor_top(viewport.height):
        return None
    reach = CONTROL_RADIUS + CONTROL_HIT_TOLERANCE
    for note in notes:
        dx = screen_x - viewport.tick_to_screen_x(note.start_tick)
        dy = screen_y - velocity_control_y(viewport.height, note.velocity)
        if int(math.sqrt(dx * dx + dy * dy)) <= reach:
            return note
    return None


def note_move_target(note: NoteLocation, tick_delta: int, pitch_delta: int) -> tuple[int, int]:
    """Start tick and pitch of ``note`` moved by the deltas, kept within range."""
    tick = max(0, note.start_tick + tick_delta)
    pitch = max(0, min(note.pitch + pitch_delta, MAX_MIDI_NOTE))
    return tick, pitch


def resize_end_tick(start_tick: int, new_end_tick: int) -> int:
    """End tick for a resize; an end at or before the start gets the minimum length."""
    if new_end_tick <= start_tick:
        return start_tick + MIN_NOTE_DURATION_TICKS
    return new_end_tick