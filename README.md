# gravity

A small game engine skeleton built on pygame. It opens a window whose
background colour slowly drifts, calls a program's `update` and `draw` hooks
every frame, and routes keyboard, mouse, cursor and scroll input to
registered callbacks.

## Installing

    pip install .

To run the tests as well:

    pip install .[test]
    pytest

## Running

    gravity

This opens a 600×400 window titled `Gravity_` and runs the `Gravity`
program. Press Escape or close the window to quit. On start-up the program
registers two named file roots: `write` (the current directory) and `base`
(`../../Source/Resources/Files` under the current directory).

## Modules

### `gravity.callback`

- `EventType`: `PRESS_TAP`, `PINCH_TAP`, `RELEASE_TAP`, `PRESS_KEY`,
  `PINCH_KEY`, `RELEASE_KEY`, `MOVE`, `SCROLL`.
- `EventData`: a frozen snapshot handed to every handler, with `cursor_pos`
  (a `CursorPos` with `x` and `y`), `key`, `mouse_button` and
  `scroll_offset`.
- `VirtualKey` and `VirtualTap`: key and mouse button codes. Key codes are
  narrowed to a signed 8-bit value, and `VirtualKey` holds the narrowed
  values, so `VirtualKey.ESCAPE` compares equal to the key of an Escape
  press.
- `EventDispatcher`: takes raw input through `on_key(event_type, key)`,
  `on_mouse_button(event_type, button)`, `on_cursor_pos(x, y)` and
  `on_scroll(offset)`, and passes it on with `dispatch(event_type,
  event_data)`. It keeps track of the keys and buttons that are held down
  (`pinched_keys`, `pinched_buttons`). `update()` sends a `PINCH_KEY` or
  `PINCH_TAP` event for each of them. A handler added during a dispatch is
  first called on the next event. A handler removed during a dispatch is
  skipped.
- `Callback`: a set of handlers owned by one object. `add(event_type, fun)`
  returns an id. `remove(fun_id, event_type=None)` drops that handler from
  one event type, or from all of them. `clear()` stops all event delivery to
  the object. `key_pressed(key)` and `mouse_button_pressed(button)` check
  whether a key or button is held. A `Callback` also works as a context
  manager, which calls `clear()` on exit. Callbacks made without a dispatcher
  share the one returned by `globals_dispatcher()`.

### `gravity.file_manager`

- `FileManager(name, relative_path=None)` has its `root` at the current
  directory, or at `relative_path` under it.
  - `read_file(file_path, typecode=None)` returns the file's bytes. With a
    typecode it returns an `array.array` of that type in native byte order
    instead. It raises `FileNotFoundError` for a missing file, and
    `ValueError` when the file size is not a multiple of the element size.
  - `write_file(data, file_path)` writes a `str` (as UTF-8) or any
    bytes-like object. It creates parent directories and returns the
    written path.
- `FileManagerRegistry` holds managers by name:
  - `make(name, relative_path=None)` creates a manager. For an existing
    name with a non-empty `relative_path`, it moves that manager's root
    instead.
  - `get(name)` raises `FileManagerNotFoundError` (a `LookupError`) for an
    unknown name.
  - `exists(name)` tells whether a manager of that name exists.
- Module-level `make`, `get` and `exists` work on the shared `registry`.

### `gravity.log_format`

- `format_value(value)` gives the compact log form:
  - sequences, sets and other iterables as `[a,b]`
  - mappings as `[k:v]`
  - `bytes` as their characters in brackets
  - `None` and dead weak references as `null`
  - exceptions as for `format_exception`
  - strings and everything else through `str`
- `format_exception(exc)` gives `EXCEPTION: <type name>: <message>`.

### `gravity.core`

- `Program`: the base class the engine drives. Its hooks are `init(params)`,
  `update()`, `draw()`, `on_resize()` and `on_close()`. `init` returns
  `False` by default, which stops start-up. The other hooks count
  `frames_updated`, `frames_drawn` and `resize_count`, and set
  `close_requested`.
- `Settings`: the window position, size, title and frame rate. The shared
  instance is `settings`.
- `ClearColorCycle`: the background colour. Each `step()` moves every
  channel by 0.001 and turns it back at 0 and 1.
- `execute(program, params)`: opens the window and runs the loop until the
  window is closed. It returns:
  - 0 on a clean exit
  - 1 if there is no program, or if the display or window could not be
    created
  - 2 if `program.init` returned false

### `gravity.app`

- `Gravity`: the program the `gravity` command runs. It is both a `Program`
  and a `Callback`.
- `main(argv=None)`: passes the first argument to the program as its
  parameters.

## Writing a program

    from gravity.core import Program, execute

    class MyProgram(Program):
        def init(self, params):
            return True

        def update(self):
            super().update()

    execute(MyProgram(), "")

## What it does not do

The engine fills the window with the drifting background colour and nothing
else. `Gravity` draws nothing and simulates nothing. It registers its two
file roots but does not read or write any files.