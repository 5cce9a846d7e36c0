from midiworks.notes import NoteLocation
from midiworks.selection import Selection


def make(track, on, off, velocity=64):
    return NoteLocation(True, track, on, off, start_tick=on * 10, end_tick=off * 10, pitch=60, velocity=velocity)


def test_new_selection_is_empty():
    selection = Selection()
    assert selection.is_empty()
    assert selection.notes() == ()


def test_select_note_ignores_duplicates():
    selection = Selection()
    selection.select_note(make(0, 1, 2))
    selection.select_note(make(0, 1, 2))
    assert len(selection.notes()) == 1


def test_contains_after_select():
    selection = Selection()
    note = make(1, 3, 4)
    selection.select_note(note)
    assert selection.contains(note)
    assert not selection.contains(make(1, 5, 6))


def test_deselect_removes_only_that_note():
    selection = Selection()
    a, b = make(0, 1, 2), make(0, 3, 4)
    selection.select_notes([a, b])
    selection.deselect_note(a)
    assert selection.notes() == (b,)


def test_deselect_missing_note_leaves_selection():
    selection = Selection()
    a = make(0, 1, 2)
    selection.select_note(a)
    selection.deselect_note(make(2, 9, 10))
    assert selection.notes() == (a,)


def test_select_notes_replaces():
    selection = Selection()
    selection.select_note(make(0, 1, 2))
    replacement = [make(3, 7, 8), make(4, 9, 10)]
    selection.select_notes(replacement)
    assert list(selection.notes()) == replacement


def test_clear_empties():
    selection = Selection()
    selection.select_notes([make(0, 1, 2), make(0, 3, 4)])
    selection.clear()
    assert selection.is_empty()


def test_update_velocity_changes_matching_note():
    selection = Selection()
    selection.select_notes([make(0, 1, 2, velocity=50), make(0, 3, 4, velocity=50)])
    selection.update_velocity(0, 3, 110)
    velocities = [n.velocity for n in selection.notes()]
    assert velocities == [50, 110]


def test_selection_holds_copies():
    selection = Selection()
    note = make(0, 1, 2, velocity=40)
    selection.select_note(note)
    note.velocity = 99
    assert selection.notes()[0].velocity == 40