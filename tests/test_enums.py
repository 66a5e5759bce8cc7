import pytest

from linekeys.enums import (
    EDIT_COMMAND_NAMES,
    REEDLINE_EVENT_NAMES,
    EditCommand,
    EditType,
    ReedlineEvent,
    Signal,
    UndoBehavior,
)


@pytest.mark.parametrize(
    "command, label",
    [
        (EditCommand.MOVE_TO_START, "MoveToStart"),
        (EditCommand.move_to_position(3), "MoveToPosition  Value: <int>"),
        (EditCommand.insert_char("a"), "InsertChar  Value: <char>"),
        (EditCommand.insert_string("abc"), "InsertString Value: <string>"),
        (EditCommand.replace_char("x"), "ReplaceChar <char>"),
        (EditCommand.replace_chars(2, "yy"), "ReplaceChars <int> <string>"),
        (EditCommand.cut_right_until("q"), "CutRightUntil Value: <char>"),
        (EditCommand.move_left_before("q"), "MoveLeftBefore Value: <char>"),
        (EditCommand.SWAP_GRAPHEMES, "SwapGraphemes"),
    ],
)
def test_edit_command_labels(command, label):
    assert str(command) == label


@pytest.mark.parametrize(
    "event, label",
    [
        (ReedlineEvent.NONE, "None"),
        (ReedlineEvent.CTRL_D, "CtrlD"),
        (ReedlineEvent.resize(80, 24), "Resize <int> <int>"),
        (
            ReedlineEvent.edit([EditCommand.UNDO]),
            "Edit: <EditCommand> or Edit: <EditCommand> value: <string>",
        ),
        (ReedlineEvent.multiple([ReedlineEvent.ESC]), "Multiple[ { ReedLineEvents, } ]"),
        (ReedlineEvent.until_found([ReedlineEvent.UP]), "UntilFound [ { ReedLineEvents, } ]"),
        (ReedlineEvent.menu("completion"), "Menu Name: <string>"),
        (ReedlineEvent.execute_host_command("ls"), "ExecuteHostCommand"),
        (ReedlineEvent.MENU_PAGE_PREVIOUS, "MenuPagePrevious"),
    ],
)
def test_reedline_event_labels(event, label):
    assert str(event) == label


@pytest.mark.parametrize(
    "command, edit_type",
    [
        (EditCommand.MOVE_LEFT, EditType.MOVE_CURSOR),
        (EditCommand.move_to_position(4), EditType.MOVE_CURSOR),
        (EditCommand.move_right_until("x"), EditType.MOVE_CURSOR),
        (EditCommand.MOVE_BIG_WORD_RIGHT_END, EditType.MOVE_CURSOR),
        (EditCommand.insert_char("a"), EditType.EDIT_TEXT),
        (EditCommand.COMPLETE, EditType.EDIT_TEXT),
        (EditCommand.cut_left_before("x"), EditType.EDIT_TEXT),
        (EditCommand.PASTE_CUT_BUFFER_AFTER, EditType.EDIT_TEXT),
        (EditCommand.UNDO, EditType.UNDO_REDO),
        (EditCommand.REDO, EditType.UNDO_REDO),
    ],
)
def test_edit_type(command, edit_type):
    assert command.edit_type() is edit_type


def test_variant_order_follows_declaration():
    assert EDIT_COMMAND_NAMES[0] == "MoveToStart"
    assert EDIT_COMMAND_NAMES[-1] == "MoveLeftBefore"
    assert REEDLINE_EVENT_NAMES[0] == "None"
    assert REEDLINE_EVENT_NAMES[-1] == "OpenEditor"
    assert EditCommand(EDIT_COMMAND_NAMES[0]) == EditCommand.MOVE_TO_START
    assert EditCommand(EDIT_COMMAND_NAMES[-1], ("q",)) == EditCommand.move_left_before("q")
    assert str(ReedlineEvent(REEDLINE_EVENT_NAMES[0])) == "None"
    assert str(ReedlineEvent(REEDLINE_EVENT_NAMES[-1])) == "OpenEditor"


def test_values_compare_and_hash_by_content():
    assert EditCommand.insert_char("a") == EditCommand("InsertChar", ("a",))
    assert EditCommand.insert_char("a") != EditCommand.insert_char("b")
    assert hash(ReedlineEvent.edit([EditCommand.UNDO])) == hash(
        ReedlineEvent.edit((EditCommand.UNDO,))
    )
    assert EditCommand.DELETE != ReedlineEvent.ENTER


def test_event_lists_are_stored_as_tuples():
    event = ReedlineEvent.edit([EditCommand.MOVE_LEFT, EditCommand.MOVE_RIGHT])
    assert event.args == ((EditCommand.MOVE_LEFT, EditCommand.MOVE_RIGHT),)


def test_nested_events():
    inner = ReedlineEvent.until_found([ReedlineEvent.MENU_UP, ReedlineEvent.UP])
    outer = ReedlineEvent.multiple([inner, inner])
    assert outer.args[0] == (inner, inner)


def test_unknown_variant():
    with pytest.raises(ValueError):
        EditCommand("Nope")


def test_argument_validation():
    with pytest.raises(ValueError):
        EditCommand.insert_char("ab")
    with pytest.raises(ValueError):
        EditCommand.move_to_position(-1)
    with pytest.raises(TypeError):
        ReedlineEvent.edit("abc")
    with pytest.raises(TypeError):
        ReedlineEvent.edit([ReedlineEvent.ENTER])
    with pytest.raises(TypeError):
        ReedlineEvent.multiple([EditCommand.UNDO])
    with pytest.raises(ValueError):
        ReedlineEvent.resize(70000, 1)
    with pytest.raises(TypeError):
        EditCommand("MoveLeft", ("x",))


def test_repr_names_variant():
    assert repr(EditCommand.insert_char("a")) == "EditCommand.InsertChar('a')"
    assert repr(ReedlineEvent.ENTER) == "ReedlineEvent.Enter"


def test_signals():
    assert Signal.success("ls").args == ("ls",)
    assert Signal.success("ls") == Signal.success("ls")
    assert Signal.CTRL_C != Signal.CTRL_D
    assert Signal.CTRL_C.name == "CtrlC"


def test_move_cursor_never_starts_undo_point():
    assert not UndoBehavior.MOVE_CURSOR.create_undo_point_after(UndoBehavior.insert_character("a"))
    assert not UndoBehavior.MOVE_CURSOR.create_undo_point_after(UndoBehavior.CREATE_UNDO_POINT)


def test_history_navigation_groups():
    nav = UndoBehavior.HISTORY_NAVIGATION
    assert not nav.create_undo_point_after(nav)


def test_insert_groups_words():
    ins = UndoBehavior.insert_character
    assert not ins("b").create_undo_point_after(ins("a"))
    assert ins(" ").create_undo_point_after(ins("a"))
    assert not ins("a").create_undo_point_after(ins(" "))
    assert ins("a").create_undo_point_after(ins("\n"))
    assert ins("\u00a0").create_undo_point_after(ins("a"))


@pytest.mark.parametrize("factory", [UndoBehavior.backspace, UndoBehavior.delete])
def test_backspace_and_delete_group_words(factory):
    assert factory("a").create_undo_point_after(factory(" "))
    assert not factory(" ").create_undo_point_after(factory("a"))
    assert factory("\n").create_undo_point_after(factory("a"))
    assert not factory().create_undo_point_after(factory("a"))
    assert not factory("a").create_undo_point_after(factory())


def test_different_behaviors_start_undo_point():
    assert UndoBehavior.insert_character("a").create_undo_point_after(UndoBehavior.backspace("a"))
    assert UndoBehavior.CREATE_UNDO_POINT.create_undo_point_after(UndoBehavior.CREATE_UNDO_POINT)
    assert UndoBehavior.UNDO_REDO.create_undo_point_after(UndoBehavior.UNDO_REDO)


def test_optional_char_defaults_to_none():
    assert UndoBehavior.backspace().args == (None,)
    assert UndoBehavior.delete("x").args == ("x",)