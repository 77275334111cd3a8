"""Public input types: keys, buttons, modifiers and the normalized event union."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto


class MouseButton(Enum):
    """Mouse buttons recognized by widgets."""

    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


class Key(Enum):
    """Physical keyboard keys."""

    KEY_0 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    GRAVE_ACCENT = auto()
    MINUS = auto()
    EQUALS = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    BACKSLASH = auto()
    SEMICOLON = auto()
    APOSTROPHE = auto()
    COMMA = auto()
    PERIOD = auto()
    SLASH = auto()
    ESCAPE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    F21 = auto()
    F22 = auto()
    F23 = auto()
    F24 = auto()
    F25 = auto()
    PRINT_SCREEN = auto()
    SCROLL_LOCK = auto()
    PAUSE = auto()
    BACKSPACE = auto()
    TAB = auto()
    CAPS_LOCK = auto()
    ENTER = auto()
    SPACE = auto()
    INSERT = auto()
    DELETE = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    NUM_LOCK = auto()
    NUMPAD_0 = auto()
    NUMPAD_1 = auto()
    NUMPAD_2 = auto()
    NUMPAD_3 = auto()
    NUMPAD_4 = auto()
    NUMPAD_5 = auto()
    NUMPAD_6 = auto()
    NUMPAD_7 = auto()
    NUMPAD_8 = auto()
    NUMPAD_9 = auto()
    NUMPAD_DECIMAL = auto()
    NUMPAD_DIVIDE = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_SUBTRACT = auto()
    NUMPAD_ADD = auto()
    NUMPAD_ENTER = auto()
    NUMPAD_EQUALS = auto()
    LEFT_SHIFT = auto()
    LEFT_CONTROL = auto()
    LEFT_ALT = auto()
    LEFT_META = auto()
    RIGHT_SHIFT = auto()
    RIGHT_CONTROL = auto()
    RIGHT_ALT = auto()
    RIGHT_META = auto()


_MODIFIER_ALIASES: dict[str, str] = {
    "shift": "shift",
    "control": "ctrl",
    "ctrl": "ctrl",
    "alt": "alt",
    "option": "alt",
    "meta": "meta",
    "super": "meta",
    "cmd": "meta",
}


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Active keyboard modifier flags."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @classmethod
    def from_names(cls, names: tuple[str, ...] | list[str]) -> Modifiers:
        """Build flags from backend modifier names, ignoring unknown names."""
        flags: dict[str, bool] = {}
        for name in names:
            field_name = _MODIFIER_ALIASES.get(str(name).strip().lower())
            if field_name is not None:
                flags[field_name] = True
        return cls(**flags)

    def with_flag(self, name: str, value: bool) -> Modifiers:
        """Return a copy with one flag toggled."""
        if name not in {"shift", "ctrl", "alt", "meta"}:
            raise ValueError(f"unknown modifier flag: {name!r}")
        return replace(self, **{name: bool(value)})


@dataclass(frozen=True, slots=True)
class MouseMove:
    """Cursor moved; the new position is already in the interaction context."""


@dataclass(frozen=True, slots=True)
class MouseDown:
    button: MouseButton


@dataclass(frozen=True, slots=True)
class MouseUp:
    button: MouseButton


@dataclass(frozen=True, slots=True)
class Scroll:
    dx: float
    dy: float


@dataclass(frozen=True, slots=True)
class KeyDown:
    key: Key


@dataclass(frozen=True, slots=True)
class KeyUp:
    key: Key


@dataclass(frozen=True, slots=True)
class Char:
    """One typed code point."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("Char must hold exactly one code point")


Event = MouseMove | MouseDown | MouseUp | Scroll | KeyDown | KeyUp | Char


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in canvas coordinates."""

    event_type: str
    x: float
    y: float
    button: int
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event."""

    event_type: str
    value: str
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class WheelEvent:
    """Mouse wheel event in canvas coordinates."""

    x: float
    y: float
    dx: float
    dy: float
    modifiers: tuple[str, ...] = ()


RawInputEvent = PointerEvent | KeyEvent | WheelEvent

__all__ = [
    "Char",
    "Event",
    "Key",
    "KeyDown",
    "KeyEvent",
    "KeyUp",
    "Modifiers",
    "MouseButton",
    "MouseDown",
    "MouseMove",
    "MouseUp",
    "PointerEvent",
    "RawInputEvent",
    "Scroll",
    "WheelEvent",
]
