"""Note-length selection and snapping of ticks to the grid."""

from __future__ import annotations

from .canvas_style import MAX_CUSTOM_TICKS
from .constants import DEFAULT_DURATION_INDEX, NOTE_DURATIONS, TICKS_PER_QUARTER


class DurationSelector:
    """The chosen note length, an optional custom length and the snap switch.

    ``index`` points into :data:`~midiworks.constants.NOTE_DURATIONS`; None means
    nothing is chosen, in which case a quarter note is used.
    """

    def __init__(
        self,
        index: int | None = DEFAULT_DURATION_INDEX,
        custom_ticks: int = TICKS_PER_QUARTER,
        snap: bool = True,
    ) -> None:
        self.index = index
        self.custom_ticks = custom_ticks
        self.snap = snap

    @property
    def index(self) -> int | None:
        return self._index

    @index.setter
    def index(self, value: int | None) -> None:
        if value is not None and not 0 <= value < len(NOTE_DURATIONS):
            raise ValueError(f"duration index out of range: {value}")
        self._index = value

    @property
    def custom_ticks(self) -> int:
        return self._custom_ticks

    @custom_ticks.setter
    def custom_ticks(self, value: int) -> None:
        if not 1 <= value <= MAX_CUSTOM_TICKS:
            raise ValueError(f"custom ticks must be 1..{MAX_CUSTOM_TICKS}, got {value}")
        self._custom_ticks = value

    def labels(self) -> list[str]:
        """Display labels for every choice, with the tick length appended."""
        return [
            f"{d.label} ({d.ticks})" if d.ticks > 0 else d.label
            for d in NOTE_DURATIONS
        ]

    def is_custom(self) -> bool:
        """Whether the custom length is chosen."""
        return self._index is not None and NOTE_DURATIONS[self._index].ticks == 0

    def selected_duration(self) -> int:
        """The chosen note length in ticks."""
        if self._index is None:
            return TICKS_PER_QUARTER
        ticks = NOTE_DURATIONS[self._index].ticks
        return self._custom_ticks if ticks == 0 else ticks

    @property
    def grid_size(self) -> int:
        """The length used for quantising notes."""
        return self.selected_duration()

    def apply_grid_snap(self, tick: int) -> int:
        """Round ``tick`` down to the grid when snapping is on."""
        if not self.snap:
            return tick
        duration = self.selected_duration()
        return (tick // duration) * duration