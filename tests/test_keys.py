import pytest

from linekeys.keys import (
    FocusEvent,
    KeyCode,
    KeyEvent,
    KeyEventKind,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    ReedlineRawEvent,
    ResizeEvent,
    convert_raw_event,
)


def test_release_is_dropped():
    event = KeyEvent(KeyCode.char("a"), KeyModifiers.NONE, KeyEventKind.RELEASE)
    assert convert_raw_event(event) is None


def test_repeat_becomes_press():
    event = KeyEvent(KeyCode.char("a"), KeyModifiers.SHIFT, KeyEventKind.REPEAT)
    raw = convert_raw_event(event)
    assert raw.event == KeyEvent(KeyCode.char("a"), KeyModifiers.SHIFT, KeyEventKind.PRESS)


def test_press_is_kept():
    event = KeyEvent(KeyCode.ENTER, KeyModifiers.CONTROL)
    assert convert_raw_event(event).event == event


@pytest.mark.parametrize(
    "event",
    [ResizeEvent(80, 24), PasteEvent("hello"), MouseEvent(3, 4), FocusEvent(True)],
)
def test_other_events_pass_through(event):
    assert convert_raw_event(event).event == event


def test_direct_construction_rejects_release():
    event = KeyEvent(KeyCode.ESC, kind=KeyEventKind.RELEASE)
    with pytest.raises(ValueError):
        ReedlineRawEvent(event)


def test_direct_construction_rejects_non_events():
    with pytest.raises(TypeError):
        ReedlineRawEvent("x")


def test_char_key_needs_one_character():
    with pytest.raises(ValueError):
        KeyCode.char("ab")


def test_unknown_key_name():
    with pytest.raises(ValueError):
        KeyCode("Bogus")


def test_named_key_rejects_value():
    with pytest.raises(ValueError):
        KeyCode("Enter", "x")


def test_function_key_range():
    with pytest.raises(ValueError):
        KeyCode.function(300)
    assert KeyCode.function(5) == KeyCode("F", 5)


def test_keycodes_are_hashable_values():
    table = {(KeyModifiers.CONTROL, KeyCode.char("c")): "found"}
    assert table[(KeyModifiers.CONTROL, KeyCode.char("c"))] == "found"
    assert KeyCode.ENTER == KeyCode("Enter")
    assert KeyCode.char("q").is_char
    assert not KeyCode.ESC.is_char


def test_modifier_combinations():
    combined = KeyModifiers.CONTROL | KeyModifiers.ALT
    assert KeyModifiers.CONTROL in combined
    assert KeyModifiers.SHIFT not in combined
    assert not KeyModifiers.NONE
    raw = convert_raw_event(KeyEvent(KeyCode.char("a"), combined, KeyEventKind.REPEAT))
    assert raw.event == KeyEvent(
        KeyCode.char("a"), KeyModifiers.ALT | KeyModifiers.CONTROL, KeyEventKind.PRESS
    )


def test_resize_bounds():
    with pytest.raises(ValueError):
        ResizeEvent(70000, 1)