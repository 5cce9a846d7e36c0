# midiworks

midiworks holds the editing model and piano-roll geometry of a MIDI sequencer as plain Python. It has no GUI and needs no MIDI device, so you can drive it from any front end or use it in tests. It has no dependencies beyond the standard library.

## Modules

- `midiworks.constants`: timing and MIDI constants, for example `TICKS_PER_QUARTER` (960), `MAX_TICK_VALUE`, `METRONOME_CHANNEL` (15) and `DEFAULT_LOOP_END`. It also holds the `NOTE_DURATIONS` table of `NoteDuration` entries and two functions:
  - `round_to_grid(tick, grid_size)` rounds to the nearest grid line. Halves round up. A grid size that is not positive raises `ValueError`.
  - `grid_size_to_name(grid_size)` returns a plural name such as `"Eighth Notes"`, or `"<n> ticks"` when the size is not in the table.
- `midiworks.notes`: `NoteLocation`, which points to one note in a track. Two locations are equal, and hash the same, when their track, note-on and note-off indices match. `duration()` returns `end_tick - start_tick`.
- `midiworks.selection`: `Selection`, an ordered set of selected notes with no duplicates. Its methods are `select_note`, `select_notes` (which replaces the whole selection), `deselect_note`, `clear`, `contains`, `is_empty`, `notes` and `update_velocity`. It also supports `in`, `len()` and iteration.
- `midiworks.clipboard`: `Clipboard` and `ClipboardNote`. `copy_notes` stores each note with its start relative to the earliest copied note. Copying an empty sequence leaves the clipboard unchanged.
- `midiworks.undo`: the abstract `Command` class, with `execute` and `undo`, and `UndoRedoManager`.
  - Executing a command clears the redo stack and calls the optional `on_command_executed` callback.
  - The undo history keeps at most 50 commands.
  - `undo()` and `redo()` return the command they acted on, or `None` when there was nothing to undo or redo.
- `midiworks.metronome`: `program_change(program, channel)` builds a two-byte program-change message and raises `ValueError` when the program or channel is out of range. `MetronomeService(output, enabled=True)` keeps the `enabled` flag. Its `initialize()` sends the woodblock program (115) on the metronome channel to any object that has a `send_message(bytes)` method.
- `midiworks.canvas_style`: `Color`, an RGBA value that checks its ranges and has `with_alpha`. The module also holds the colours, sizes and zoom limits used when drawing, plus three functions:
  - `track_color(track_index)`, for tracks 0–14.
  - `is_black_key(pitch)`.
  - `octave_label(pitch)`, which returns `"C4"` for pitch 48 and `None` for any pitch that is not a C.
- `midiworks.grid`: `DurationSelector`, which chooses the note length from `NOTE_DURATIONS`.
  - The choices include a custom length of 1–10000 ticks. Setting an index or custom length out of range raises `ValueError`.
  - `apply_grid_snap` rounds a tick down to the grid when snapping is on.
- `midiworks.viewport`: `Viewport(width, height)`. It converts between screen x/y and tick/pitch. It also handles:
  - zoom (`zoom`), scrolling (`pan`) and keeping the playhead at 20% of the width (`follow_playhead`);
  - resetting the zoom for a new canvas size (`resize`) and keeping the offsets in range (`clamp_offset`);
  - hit tests (`rectangle_region`, `is_on_resize_edge`, `is_near_tick`);
  - the visible beat lines (`beat_lines`, which yields `GridLine` values).
- `midiworks.velocity`: geometry of the velocity editor, which takes up the bottom quarter of the canvas:
  - `velocity_editor_top`, `velocity_control_y` and `velocity_at_y`; the last clamps to 1..127;
  - `find_velocity_control`, which finds the velocity handle under a point;
  - `note_move_target` and `resize_end_tick`, which give the target position or end tick of a note being moved or resized.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Example

```python
from midiworks.constants import round_to_grid, grid_size_to_name
from midiworks.notes import NoteLocation
from midiworks.selection import Selection
from midiworks.clipboard import Clipboard
from midiworks.grid import DurationSelector
from midiworks.viewport import Viewport

round_to_grid(1000, 960)        # 960
grid_size_to_name(480)          # "Eighth Notes"

note = NoteLocation(found=True, track_index=0, note_on_index=0, note_off_index=1,
                    start_tick=960, end_tick=1920, pitch=60, velocity=100)
note.duration()                 # 960

selection = Selection()
selection.select_note(note)
clipboard = Clipboard()
clipboard.copy_notes(selection.notes())
clipboard.notes()[0].relative_start_tick   # 0

DurationSelector().apply_grid_snap(1000)   # 960 (quarter-note grid)

view = Viewport(800, 640)
view.tick_to_screen_x(960)      # 192
view.screen_x_to_tick(192)      # 960
```

## What it does not do

midiworks does not draw anything, and it does not open MIDI ports or play sound. It has no transport, no recording and no track storage, and it cannot load or save MIDI files. `MetronomeService` only hands a message to whatever output object you give it. Finding which notes lie in a `Region`, and applying moves, resizes or velocity changes to tracks, are left to the caller. The caller can wrap those edits as `Command` subclasses for `UndoRedoManager`.

## Tests

```
pytest
```