import pytest
from hypothesis import given
from hypothesis import strategies as st

from midiworks.canvas_style import MAX_CUSTOM_TICKS
from midiworks.constants import NOTE_DURATIONS, TICKS_PER_QUARTER
from midiworks.grid import DurationSelector

CUSTOM_INDEX = len(NOTE_DURATIONS) - 1
ticks = st.integers(min_value=0, max_value=100_000_000)


def test_default_is_quarter_note_with_snap():
    selector = DurationSelector()
    assert selector.selected_duration() == TICKS_PER_QUARTER
    assert selector.snap is True
    assert selector.is_custom() is False


def test_labels_carry_tick_values():
    labels = DurationSelector().labels()
    assert labels[2] == "Quarter Note (960)"
    assert labels[-1] == "Custom"
    assert len(labels) == len(NOTE_DURATIONS)


@pytest.mark.parametrize("index", range(len(NOTE_DURATIONS) - 1))
def test_fixed_durations(index):
    selector = DurationSelector(index=index)
    assert selector.selected_duration() == NOTE_DURATIONS[index].ticks
    assert selector.grid_size == NOTE_DURATIONS[index].ticks


@given(st.integers(min_value=1, max_value=MAX_CUSTOM_TICKS))
def test_custom_duration_uses_custom_ticks(custom):
    selector = DurationSelector(index=CUSTOM_INDEX, custom_ticks=custom)
    assert selector.is_custom() is True
    assert selector.selected_duration() == custom


def test_no_selection_falls_back_to_quarter():
    selector = DurationSelector(index=None, custom_ticks=5)
    assert selector.selected_duration() == TICKS_PER_QUARTER
    assert selector.is_custom() is False


@pytest.mark.parametrize("index", [-1, len(NOTE_DURATIONS)])
def test_bad_index_rejected(index):
    with pytest.raises(ValueError):
        DurationSelector(index=index)


@pytest.mark.parametrize("custom", [0, MAX_CUSTOM_TICKS + 1])
def test_bad_custom_ticks_rejected(custom):
    with pytest.raises(ValueError):
        DurationSelector(custom_ticks=custom)


def test_setting_bad_index_later_rejected():
    selector = DurationSelector()
    with pytest.raises(ValueError):
        selector.index = len(NOTE_DURATIONS)
    assert selector.index == 2


@given(ticks, st.integers(min_value=0, max_value=CUSTOM_INDEX))
def test_snap_rounds_down_to_multiple(tick, index):
    selector = DurationSelector(index=index, custom_ticks=333)
    duration = selector.selected_duration()
    snapped = selector.apply_grid_snap(tick)
    assert snapped <= tick
    assert snapped % duration == 0
    assert tick - snapped < duration


@given(ticks)
def test_snap_is_idempotent(tick):
    selector = DurationSelector()
    once = selector.apply_grid_snap(tick)
    assert selector.apply_grid_snap(once) == once


@given(ticks)
def test_snap_off_leaves_tick(tick):
    assert DurationSelector(snap=False).apply_grid_snap(tick) == tick


def test_snap_just_below_beat_stays_on_previous_beat():
    selector = DurationSelector()
    assert selector.apply_grid_snap(TICKS_PER_QUARTER * 2 - 1) == TICKS_PER_QUARTER