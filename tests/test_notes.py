from hypothesis import given, strategies as st

from midiworks.notes import NoteLocation


def test_default_location_is_not_found():
    note = NoteLocation()
    assert note.found is False
    assert note.track_index == -1


def test_equality_uses_track_and_event_indices_only():
    a = NoteLocation(True, 2, 5, 6, start_tick=0, end_tick=10, pitch=60, velocity=90)
    b = NoteLocation(False, 2, 5, 6, start_tick=500, end_tick=900, pitch=12, velocity=1)
    assert a == b
    assert hash(a) == hash(b)


def test_different_note_on_index_is_unequal():
    a = NoteLocation(True, 2, 5, 6)
    b = NoteLocation(True, 2, 7, 6)
    assert not (a == b)


def test_different_track_is_unequal():
    assert not (NoteLocation(True, 1, 5, 6) == NoteLocation(True, 3, 5, 6))


@given(st.integers(min_value=0, max_value=10**8), st.integers(min_value=0, max_value=10**6))
def test_duration_spans_start_to_end(start, length):
    note = NoteLocation(start_tick=start, end_tick=start + length)
    assert note.duration() == length