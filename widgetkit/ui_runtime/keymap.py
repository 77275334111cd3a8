"""Backend key-name normalization into `Key` values."""

from __future__ import annotations

from widgetkit.api.input_events import Key

_NAMED_KEYS: dict[str, Key] = {
    "escape": Key.ESCAPE,
    "esc": Key.ESCAPE,
    "enter": Key.ENTER,
    "return": Key.ENTER,
    "tab": Key.TAB,
    "backspace": Key.BACKSPACE,
    "space": Key.SPACE,
    " ": Key.SPACE,
    "insert": Key.INSERT,
    "delete": Key.DELETE,
    "arrowleft": Key.LEFT,
    "left": Key.LEFT,
    "arrowright": Key.RIGHT,
    "right": Key.RIGHT,
    "arrowup": Key.UP,
    "up": Key.UP,
    "arrowdown": Key.DOWN,
    "down": Key.DOWN,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "capslock": Key.CAPS_LOCK,
    "scrolllock": Key.SCROLL_LOCK,
    "numlock": Key.NUM_LOCK,
    "printscreen": Key.PRINT_SCREEN,
    "pause": Key.PAUSE,
    "shift": Key.LEFT_SHIFT,
    "control": Key.LEFT_CONTROL,
    "ctrl": Key.LEFT_CONTROL,
    "alt": Key.LEFT_ALT,
    "meta": Key.LEFT_META,
    "super": Key.LEFT_META,
    "shiftright": Key.RIGHT_SHIFT,
    "controlright": Key.RIGHT_CONTROL,
    "altright": Key.RIGHT_ALT,
    "metaright": Key.RIGHT_META,
    "numpaddecimal": Key.NUMPAD_DECIMAL,
    "numpaddivide": Key.NUMPAD_DIVIDE,
    "numpadmultiply": Key.NUMPAD_MULTIPLY,
    "numpadsubtract": Key.NUMPAD_SUBTRACT,
    "numpadadd": Key.NUMPAD_ADD,
    "numpadenter": Key.NUMPAD_ENTER,
    "numpadequal": Key.NUMPAD_EQUALS,
}

_CHAR_KEYS: dict[str, Key] = {
    "`": Key.GRAVE_ACCENT,
    "-": Key.MINUS,
    "=": Key.EQUALS,
    "[": Key.LEFT_BRACKET,
    "]": Key.RIGHT_BRACKET,
    "\\": Key.BACKSLASH,
    ";": Key.SEMICOLON,
    "'": Key.APOSTROPHE,
    ",": Key.COMMA,
    ".": Key.PERIOD,
    "/": Key.SLASH,
}

for _index in range(10):
    _CHAR_KEYS[str(_index)] = Key[f"KEY_{_index}"]
    _NAMED_KEYS[f"numpad{_index}"] = Key[f"NUMPAD_{_index}"]
for _index in range(1, 26):
    _NAMED_KEYS[f"f{_index}"] = Key[f"F{_index}"]


def map_key_name(name: str) -> Key | None:
    """Map a backend key name to a Key, or None when it has no counterpart."""
    if not name:
        return None
    if name == " ":
        return Key.SPACE
    if len(name) == 1:
        if name.isascii() and name.isalpha():
            return Key[name.upper()]
        return _CHAR_KEYS.get(name)
    return _NAMED_KEYS.get(name.strip().lower())


__all__ = ["map_key_name"]
