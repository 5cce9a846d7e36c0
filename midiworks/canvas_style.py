"""Colours, sizes and layout values used when drawing the piano roll."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_MIDI_NOTE, NOTES_PER_OCTAVE


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component out of range: {value}")

    def with_alpha(self, alpha: int) -> Color:
        """The same colour with a different alpha."""
        return Color(self.red, self.green, self.blue, alpha)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)

# One colour per user track; the sixteenth channel belongs to the metronome.
TRACK_COLORS: tuple[Color, ...] = (
    Color(255, 100, 100),  # red
    Color(100, 255, 100),  # green
    Color(100, 100, 255),  # blue
    Color(255, 255, 100),  # yellow
    Color(255, 100, 255),  # magenta
    Color(100, 255, 255),  # cyan
    Color(255, 150, 100),  # orange
    Color(150, 100, 255),  # purple
    Color(255, 200, 100),  # light orange
    Color(100, 255, 200),  # mint
    Color(200, 100, 255),  # violet
    Color(255, 100, 200),  # pink
    Color(200, 255, 100),  # lime
    Color(100, 200, 255),  # sky blue
    Color(255, 255, 200),  # light yellow
)

# Grid
GRID_BEAT_LINE = Color(220, 220, 220)
GRID_MEASURE_LINE = Color(180, 180, 180)
GRID_NOTE_LINE = Color(240, 240, 240)
GRID_OCTAVE_LINE = Color(200, 200, 200)

# Loop region
LOOP_ENABLED = Color(100, 150, 255, 60)
LOOP_DISABLED = Color(128, 128, 128, 30)

# Notes
RECORDING_BUFFER = Color(255, 100, 50, 180)
NOTE_ADD_PREVIEW = Color(100, 255, 100, 180)
NOTE_EDIT_PREVIEW_ALPHA = 180

# Selection and hover
SELECTION_BORDER = Color(255, 255, 0)
SELECTION_BORDER_WIDTH = 3
HOVER_BORDER = WHITE
HOVER_BORDER_WIDTH = 2
PREVIEW_BORDER = WHITE
PREVIEW_BORDER_WIDTH = 2

# Selection rectangle
SELECTION_RECT_FILL = Color(100, 150, 255, 60)
SELECTION_RECT_BORDER = Color(100, 150, 255)
SELECTION_RECT_BORDER_WIDTH = 2

# Playhead
PLAYHEAD = RED
PLAYHEAD_WIDTH = 2

# Layout
CONTROL_BAR_HEIGHT = 40
NOTE_RESIZE_LEFT_PIXELS = 5
NOTE_RESIZE_RIGHT_PIXELS = 2
LOOP_EDGE_DETECTION_PIXELS = 5
MIN_NOTE_DURATION_TICKS = 100

# The playhead is held at this fraction of the width while the transport moves.
AUTOSCROLL_TARGET_POSITION = 0.2

# Zoom
DEFAULT_NOTE_HEIGHT_PIXELS = 5
MAX_NOTE_HEIGHT_PIXELS = 50
MIN_NOTE_HEIGHT_PIXELS = 1
DEFAULT_TICKS_PER_PIXEL = 30

# Editing
MAX_EDITABLE_PITCH = 120  # clicks above this pitch start a rectangle selection
USER_TRACK_COUNT = 15

# Debug event display
MIDI_EVENT_CIRCLE_RADIUS = 4
MIDI_EVENT_NOTE_ON = Color(0, 255, 0, 200)
MIDI_EVENT_NOTE_OFF = Color(255, 0, 0, 200)
MIDI_EVENT_OTHER = Color(100, 150, 255, 200)
MIDI_EVENT_HOVER_DISTANCE = 8

# Piano keyboard
KEYBOARD_WIDTH_FRACTION = 0.15
BLACK_KEY_WIDTH_FRACTION = 0.6
WHITE_KEY_BORDER = Color(180, 180, 180)
BLACK_KEY_BORDER = Color(50, 50, 50)
KEYBOARD_BACKGROUND = Color(240, 240, 240)
KEYBOARD_PREVIEW_HIGHLIGHT = Color(100, 255, 100, 180)
KEYBOARD_RECORDING_HIGHLIGHT = Color(255, 150, 100, 180)

# Velocity editor
VELOCITY_EDITOR_BACKGROUND = Color(45, 45, 48)
VELOCITY_HANDLE = Color(120, 180, 255)
VELOCITY_HANDLE_LINE = Color(120, 120, 125)
VELOCITY_HANDLE_ACTIVE = Color(255, 200, 100)
VELOCITY_HANDLE_ACTIVE_LINE = Color(255, 150, 50)

# Custom note length
MAX_CUSTOM_TICKS = 10_000

_BLACK_KEYS_IN_OCTAVE = frozenset({1, 3, 6, 8, 10})


def _check_pitch(pitch: int) -> None:
    if not 0 <= pitch <= MAX_MIDI_NOTE:
        raise ValueError(f"pitch out of range: {pitch}")


def track_color(track_index: int) -> Color:
    """The drawing colour of a user track."""
    if not 0 <= track_index < USER_TRACK_COUNT:
        raise ValueError(f"track index out of range: {track_index}")
    return TRACK_COLORS[track_index]


def is_black_key(pitch: int) -> bool:
    """Whether ``pitch`` falls on a black key of the piano."""
    _check_pitch(pitch)
    return pitch % NOTES_PER_OCTAVE in _BLACK_KEYS_IN_OCTAVE


def octave_label(pitch: int) -> str | None:
    """The keyboard label of a C note, such as ``C4``; None for other pitches."""
    _check_pitch(pitch)
    if pitch % NOTES_PER_OCTAVE:
        return None
    return f"C{pitch // NOTES_PER_OCTAVE}"