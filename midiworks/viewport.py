"""Zoom, scroll and coordinate mapping of the piano-roll canvas."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .canvas_style import (
    AUTOSCROLL_TARGET_POSITION,
    DEFAULT_NOTE_HEIGHT_PIXELS,
    DEFAULT_TICKS_PER_PIXEL,
    LOOP_EDGE_DETECTION_PIXELS,
    MAX_NOTE_HEIGHT_PIXELS,
    MIN_NOTE_HEIGHT_PIXELS,
    NOTE_RESIZE_LEFT_PIXELS,
    NOTE_RESIZE_RIGHT_PIXELS,
)
from .constants import MAX_MIDI_NOTE, MAX_TICK_VALUE, MIDI_NOTE_COUNT
from .notes import NoteLocation

# Large enough that clamping always brings tick 0 back to the playhead position.
_UNCLAMPED_OFFSET_X = 2**31 - 1

Point = tuple[int, int]


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class Region:
    """A range of ticks and pitches, both ends included."""

    min_tick: int
    max_tick: int
    min_pitch: int
    max_pitch: int


@dataclass(frozen=True)
class GridLine:
    """A vertical beat line of the grid."""

    tick: int
    x: int
    is_measure: bool


class Viewport:
    """Maps ticks and pitches to canvas pixels and back.

    Ticks run left to right, scaled by ``ticks_per_pixel`` and shifted by
    ``offset_x``; pitches run bottom to top, ``note_height`` pixels each and
    shifted by ``offset_y``.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = 0
        self.height = 0
        self.note_height = DEFAULT_NOTE_HEIGHT_PIXELS
        self.min_note_height = MIN_NOTE_HEIGHT_PIXELS
        self.ticks_per_pixel = DEFAULT_TICKS_PER_PIXEL
        self.offset_x = 0
        self.offset_y = 0
        self.resize(width, height)

    @property
    def target_playhead_x(self) -> int:
        """Screen x at which the playhead is held while the transport moves."""
        return int(self.width * AUTOSCROLL_TARGET_POSITION)

    # Coordinate conversion

    def flip_y(self, y: int) -> int:
        return self.height - y

    def screen_x_to_tick(self, screen_x: int) -> int:
        """The tick under ``screen_x``; 0 left of tick 0 or past the tick limit."""
        x = screen_x - self.offset_x
        if x < 0:
            return 0
        tick = x * self.ticks_per_pixel
        if tick > MAX_TICK_VALUE:
            return 0
        return tick

    def screen_y_to_pitch(self, screen_y: int) -> int:
        """The pitch under ``screen_y``, clamped to the MIDI range."""
        flipped = self.flip_y(screen_y - self.offset_y)
        pitch = _tdiv(flipped, self.note_height) + 1
        return max(0, min(pitch, MAX_MIDI_NOTE))

    def tick_to_screen_x(self, tick: int) -> int:
        return tick // self.ticks_per_pixel + self.offset_x

    def pitch_to_screen_y(self, pitch: int) -> int:
        """Top edge of the row drawn for ``pitch``."""
        return self.flip_y(pitch * self.note_height) + self.offset_y

    def ticks_to_width(self, ticks: int) -> int:
        return ticks // self.ticks_per_pixel

    # View management

    def clamp_offset(self) -> None:
        """Keep the scroll offsets within the tick and pitch ranges."""
        min_offset_x = self.width - MAX_TICK_VALUE // self.ticks_per_pixel
        max_offset_x = self.target_playhead_x
        self.offset_x = max(min_offset_x, min(self.offset_x, max_offset_x))

        total_height = MIDI_NOTE_COUNT * self.note_height
        if total_height <= self.height:
            self.offset_y = 0
        else:
            max_offset_y = MAX_MIDI_NOTE * self.note_height - self.height
            self.offset_y = max(0, min(self.offset_y, max_offset_y))

    def resize(self, width: int, height: int) -> None:
        """Adopt a new canvas size and reset zoom and scroll for it."""
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.min_note_height = max(MIN_NOTE_HEIGHT_PIXELS, height // MIDI_NOTE_COUNT)
        self.note_height = self.min_note_height * 3
        self.offset_x = _UNCLAMPED_OFFSET_X
        self.offset_y = int((MAX_MIDI_NOTE * self.note_height - height) * 0.5)
        self.clamp_offset()

    def zoom(self, lines: int, vertical: bool = False) -> None:
        """Zoom by wheel ``lines``; positive zooms in.

        Vertical zoom changes the note height, horizontal zoom the ticks per pixel.
        """
        if vertical:
            if lines > 0:
                self.note_height = min(MAX_NOTE_HEIGHT_PIXELS, self.note_height + lines)
            elif lines < 0:
                self.note_height = max(self.min_note_height, self.note_height + lines)
        else:
            if lines > 0:
                self.ticks_per_pixel = max(1, self.ticks_per_pixel - lines)
            elif lines < 0:
                self.ticks_per_pixel -= lines
        self.clamp_offset()

    def pan(self, dx: int, dy: int) -> None:
        """Scroll by a pixel delta."""
        self.offset_x += dx
        self.offset_y += dy
        self.clamp_offset()

    def follow_playhead(self, tick: int) -> None:
        """Scroll so that ``tick`` sits at the fixed playhead position."""
        self.offset_x = self.target_playhead_x - tick // self.ticks_per_pixel
        self.clamp_offset()

    # Hit testing

    def rectangle_region(self, start: Point, end: Point) -> Region | None:
        """The ticks and pitches covered by a dragged rectangle.

        Returns None when the rectangle spans no ticks.
        """
        min_x, max_x = sorted((start[0], end[0]))
        min_y, max_y = sorted((start[1], end[1]))
        min_tick = self.screen_x_to_tick(min_x)
        max_tick = self.screen_x_to_tick(max_x)
        if min_tick == max_tick:
            return None
        return Region(
            min_tick=min_tick,
            max_tick=max_tick,
            min_pitch=self.screen_y_to_pitch(max_y),
            max_pitch=self.screen_y_to_pitch(min_y),
        )

    def is_on_resize_edge(self, screen_x: int, note: NoteLocation) -> bool:
        """Whether ``screen_x`` is on the right edge of ``note``."""
        if not note.found:
            return False
        end_x = self.tick_to_screen_x(note.end_tick)
        return end_x - NOTE_RESIZE_LEFT_PIXELS <= screen_x <= end_x + NOTE_RESIZE_RIGHT_PIXELS

    def is_near_tick(self, screen_x: int, tick: int) -> bool:
        """Whether ``screen_x`` is close enough to ``tick`` to grab it."""
        tick_x = self.tick_to_screen_x(tick)
        return tick_x - LOOP_EDGE_DETECTION_PIXELS <= screen_x <= tick_x + LOOP_EDGE_DETECTION_PIXELS

    def beat_lines(self, ticks_per_beat: int, ticks_per_measure: int) -> Iterator[GridLine]:
        """The visible beat lines, left to right."""
        if ticks_per_beat <= 0 or ticks_per_measure <= 0:
            raise ValueError("ticks per beat and per measure must be positive")
        start_tick = -self.offset_x * self.ticks_per_pixel
        end_tick = start_tick + self.width * self.ticks_per_pixel
        start_tick = _tdiv(start_tick, ticks_per_beat) * ticks_per_beat
        for tick in range(start_tick, end_tick + 1, ticks_per_beat):
            if tick < 0:
                continue
            x = self.tick_to_screen_x(tick)
            if x < 0 or x > self.width:
                continue
            yield GridLine(tick=tick, x=x, is_measure=tick % ticks_per_measure == 0)