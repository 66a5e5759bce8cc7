"""Key binding tables and the bindings shared by the edit modes."""

from __future__ import annotations

from dataclasses import dataclass

from linekeys.enums import EditCommand, ReedlineEvent
from linekeys.keys import KeyCode, KeyModifiers


@dataclass(frozen=True)
class KeyCombination:
    """A key together with the modifiers held while pressing it."""

    modifier: KeyModifiers
    key_code: KeyCode


class Keybindings:
    """Maps key combinations to the editor events they trigger."""

    def __init__(self, bindings: dict[KeyCombination, ReedlineEvent] | None = None) -> None:
        self.bindings: dict[KeyCombination, ReedlineEvent] = dict(bindings or {})

    def add_binding(
        self, modifier: KeyModifiers, key_code: KeyCode, command: ReedlineEvent
    ) -> None:
        """Bind ``command`` to the key combination, replacing any earlier binding."""
        if command.name == "UntilFound" and not command.args[0]:
            raise ValueError(
                "UntilFound should contain a series of potential events to handle"
            )
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> ReedlineEvent | None:
        """The event bound to the combination, or None."""
        return self.bindings.get(KeyCombination(modifier, key_code))

    def remove_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> ReedlineEvent | None:
        """Unbind the combination and return what it was bound to, or None."""
        return self.bindings.pop(KeyCombination(modifier, key_code), None)

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self) -> str:
        return f"Keybindings({len(self.bindings)} bindings)"


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An event that runs the single edit ``command``."""
    return ReedlineEvent.edit([command])


def add_common_control_bindings(kb: Keybindings) -> None:
    """Esc, Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R and Ctrl-O (external editor)."""
    ctrl = KeyModifiers.CONTROL
    kb.add_binding(KeyModifiers.NONE, KeyCode.ESC, ReedlineEvent.ESC)
    kb.add_binding(ctrl, KeyCode.char("c"), ReedlineEvent.CTRL_C)
    kb.add_binding(ctrl, KeyCode.char("d"), ReedlineEvent.CTRL_D)
    kb.add_binding(ctrl, KeyCode.char("l"), ReedlineEvent.CLEAR_SCREEN)
    kb.add_binding(ctrl, KeyCode.char("r"), ReedlineEvent.SEARCH_HISTORY)
    kb.add_binding(ctrl, KeyCode.char("o"), ReedlineEvent.OPEN_EDITOR)


def add_common_navigation_bindings(kb: Keybindings) -> None:
    """Arrow keys, Home/End and their Ctrl variants, plus Ctrl-P/Ctrl-N."""
    none, ctrl = KeyModifiers.NONE, KeyModifiers.CONTROL
    up = ReedlineEvent.until_found([ReedlineEvent.MENU_UP, ReedlineEvent.UP])
    down = ReedlineEvent.until_found([ReedlineEvent.MENU_DOWN, ReedlineEvent.DOWN])
    left = ReedlineEvent.until_found([ReedlineEvent.MENU_LEFT, ReedlineEvent.LEFT])
    right = ReedlineEvent.until_found(
        [ReedlineEvent.HISTORY_HINT_COMPLETE, ReedlineEvent.MENU_RIGHT, ReedlineEvent.RIGHT]
    )
    word_right = ReedlineEvent.until_found(
        [ReedlineEvent.HISTORY_HINT_WORD_COMPLETE, edit_bind(EditCommand.MOVE_WORD_RIGHT)]
    )
    line_end = ReedlineEvent.until_found(
        [ReedlineEvent.HISTORY_HINT_COMPLETE, edit_bind(EditCommand.MOVE_TO_LINE_END)]
    )

    kb.add_binding(none, KeyCode.UP, up)
    kb.add_binding(none, KeyCode.DOWN, down)
    kb.add_binding(none, KeyCode.LEFT, left)
    kb.add_binding(none, KeyCode.RIGHT, right)

    kb.add_binding(ctrl, KeyCode.LEFT, edit_bind(EditCommand.MOVE_WORD_LEFT))
    kb.add_binding(ctrl, KeyCode.RIGHT, word_right)

    kb.add_binding(none, KeyCode.HOME, edit_bind(EditCommand.MOVE_TO_LINE_START))
    kb.add_binding(ctrl, KeyCode.char("a"), edit_bind(EditCommand.MOVE_TO_LINE_START))
    kb.add_binding(none, KeyCode.END, line_end)
    kb.add_binding(ctrl, KeyCode.char("e"), line_end)

    kb.add_binding(ctrl, KeyCode.HOME, edit_bind(EditCommand.MOVE_TO_START))
    kb.add_binding(ctrl, KeyCode.END, edit_bind(EditCommand.MOVE_TO_END))

    kb.add_binding(ctrl, KeyCode.char("p"), up)
    kb.add_binding(ctrl, KeyCode.char("n"), down)


def add_common_edit_bindings(kb: Keybindings) -> None:
    """Delete, Backspace and their word-wise variants."""
    none, ctrl = KeyModifiers.NONE, KeyModifiers.CONTROL
    kb.add_binding(none, KeyCode.BACKSPACE, edit_bind(EditCommand.BACKSPACE))
    kb.add_binding(none, KeyCode.DELETE, edit_bind(EditCommand.DELETE))
    kb.add_binding(ctrl, KeyCode.BACKSPACE, edit_bind(EditCommand.BACKSPACE_WORD))
    kb.add_binding(ctrl, KeyCode.DELETE, edit_bind(EditCommand.DELETE_WORD))
    # These must not touch the cut buffer.
    kb.add_binding(ctrl, KeyCode.char("h"), edit_bind(EditCommand.BACKSPACE))
    kb.add_binding(ctrl, KeyCode.char("w"), edit_bind(EditCommand.BACKSPACE_WORD))