# linekeys

The input layer of a terminal line editor. It does not need a terminal. It provides:

- terminal input events (`linekeys.keys`),
- editing commands and editor events (`linekeys.enums`),
- keybinding tables (`linekeys.keybindings`),
- an Emacs edit mode (`linekeys.emacs`),
- a Vi edit mode (`linekeys.vi`), with its normal-mode sequence parser in `linekeys.vi_parser`, `linekeys.vi_command` and `linekeys.vi_motion`,
- simple syntax highlighters (`linekeys.highlighter`),
- a bounded message queue for printing while a line is being edited (`linekeys.external_printer`).

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Events and commands

`linekeys.keys` describes terminal input with these types:

- `KeyEvent(code, modifiers, kind)`,
- `MouseEvent`,
- `ResizeEvent`,
- `FocusEvent`,
- `PasteEvent`.

Keys are `KeyCode` values. Named keys such as `KeyCode.ENTER` and `KeyCode.ESC` are constants. Character keys come from `KeyCode.char("a")` and function keys from `KeyCode.function(5)`. Modifiers are `KeyModifiers` flags, which you combine with `|`.

`convert_raw_event(event)` prepares an event for an edit mode:

- a key release returns `None`,
- a key repeat is turned into a press,
- any other event is wrapped in a `ReedlineRawEvent`.

`linekeys.enums` defines `EditCommand`, `ReedlineEvent`, `UndoBehavior` and `Signal` as tagged values.

- A variant without payload is a class constant, for example `EditCommand.MOVE_LEFT` or `ReedlineEvent.ENTER`.
- A variant with payload is built by a factory, for example `EditCommand.insert_char("a")` or `ReedlineEvent.edit([...])`.

Two methods decide how edits are grouped for undo:

- `EditCommand.edit_type()` returns an `EditType`.
- `UndoBehavior.create_undo_point_after(previous)` says whether a change should start a new undo set.

## Turning key presses into editor events

```python
from linekeys.keys import KeyCode, KeyModifiers, KeyEvent, convert_raw_event
from linekeys.emacs import Emacs
from linekeys.enums import ReedlineEvent

emacs = Emacs()
event = convert_raw_event(KeyEvent(KeyCode.char("l"), KeyModifiers.CONTROL))
assert emacs.parse_event(event) == ReedlineEvent.CLEAR_SCREEN
```

When a character key has no binding and is pressed with no modifier, Shift, Control+Alt or Control+Alt+Shift, it becomes an `InsertChar` edit. With Shift, an ASCII letter is upper-cased. Any other unbound key gives `ReedlineEvent.NONE`.

Pasted text becomes a single `InsertString` edit, with line endings normalised to `\n`.

## Custom keybindings

```python
from linekeys.emacs import Emacs, default_emacs_keybindings
from linekeys.enums import ReedlineEvent
from linekeys.keys import KeyCode, KeyModifiers

bindings = default_emacs_keybindings()
bindings.add_binding(KeyModifiers.CONTROL, KeyCode.char("l"), ReedlineEvent.HISTORY_HINT_COMPLETE)
emacs = Emacs(bindings)
```

`Keybindings` has three methods:

- `add_binding` replaces any earlier binding. It raises `ValueError` for an empty `UntilFound` event.
- `find_binding` returns the bound event, or `None`.
- `remove_binding` removes the binding and returns the event it held, or `None`.

To build your own tables, `linekeys.keybindings` offers:

- `edit_bind`,
- `add_common_control_bindings`,
- `add_common_navigation_bindings`,
- `add_common_edit_bindings`.

## Vi mode

`linekeys.vi.Vi` starts in insert mode. To start elsewhere, pass `mode=ViMode.NORMAL`.

- Esc switches to normal mode.
- Enter switches back to insert mode and gives `ReedlineEvent.ENTER`.

In normal mode, typed characters are collected until they form a complete sequence. Examples are `dw`, `2dd`, `3l`, `cw`, `fx`, `;` and `.`. `linekeys.vi_parser.parse` parses the sequence into a `ParsedViSequence`, which is then turned into a `ReedlineEvent.multiple(...)`. A sequence that cannot be completed is dropped.

`edit_mode()` reports `PromptEditMode.VI_NORMAL` or `PromptEditMode.VI_INSERT`.

The default tables come from `default_vi_normal_keybindings()` and `default_vi_insert_keybindings()`.

## Cursor shapes

`linekeys.edit_mode.CursorConfig` holds an optional `CursorStyle` for each `PromptEditMode`. `style_for(mode)` returns it. Each `CursorStyle` has an `escape` string that selects that shape.

## Highlighters

A highlighter returns the line as a list of `(Style, text)` pairs, and the texts join back to the line. `Style.paint(text)` wraps text in ANSI colour codes.

- `ExampleHighlighter(commands)` colours the longest listed command found in the line.
- `SimpleMatchHighlighter(query)` colours every non-overlapping match of `query`.

## External printer

`ExternalPrinter(max_cap=20)` is a thread-safe bounded queue:

- `print(line)` adds a line and blocks while the queue is full.
- `get_line()` returns the oldest line, or `None` without waiting.
- `drain()` removes and returns every waiting line, oldest first.

## What this package does not do

This package does not:

- read from or write to a terminal,
- keep a line buffer,
- apply `EditCommand`s to text,
- store history,
- draw a prompt or menus.

It produces the events and commands that such an editor would carry out.