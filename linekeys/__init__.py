"""Key events, edit commands, keybindings, Emacs and Vi edit modes, highlighters and an external printer queue."""

__version__ = "0.1.0"
__all__ = [
    "keys",
    "enums",
    "external_printer",
    "edit_mode",
    "keybindings",
    "emacs",
    "highlighter",
    "vi_motion",
    "vi_command",
    "vi_parser",
    "vi",
]