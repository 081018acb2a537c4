"""Parser and pretty-printer for textual key binding specifications.

Grammar::

    binding      ::= modifier* key-token
    modifier     ::= ("s"|"shift"|"m"|"meta"|"a"|"alt"|"c"|"ctrl"|"control") "-"
    key-token    ::= named-key | single-char | "f" digit+
    binding-list ::= "unbound" | binding ("," binding)*

Input is matched case-insensitively. Pretty-printing always emits the
canonical short form, e.g. ``parse_binding("control-pgup")`` renders as
``"C-PgUp"``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import UnknownKeyTokenError, UnknownModifierError
from .models import (
    UNBOUND,
    Binding,
    BindingList,
    BindingState,
    CharKey,
    FunctionKey,
    Key,
    Modifier,
    SpecialKey,
    Unbound,
)

UNBOUND_TOKEN = "unbound"

MODIFIER_PREFIXES: Mapping[str, Modifier] = MappingProxyType(
    {
        "s": Modifier.SHIFT,
        "shift": Modifier.SHIFT,
        "m": Modifier.META,
        "meta": Modifier.META,
        "a": Modifier.ALT,
        "alt": Modifier.ALT,
        "c": Modifier.CTRL,
        "ctrl": Modifier.CTRL,
        "control": Modifier.CTRL,
    }
)

NAMED_KEYS: Mapping[str, Key] = MappingProxyType(
    {
        "esc": SpecialKey.ESC,
        "backspace": SpecialKey.BACKSPACE,
        "enter": SpecialKey.ENTER,
        "left": SpecialKey.LEFT,
        "right": SpecialKey.RIGHT,
        "up": SpecialKey.UP,
        "down": SpecialKey.DOWN,
        "upleft": SpecialKey.UP_LEFT,
        "upright": SpecialKey.UP_RIGHT,
        "downleft": SpecialKey.DOWN_LEFT,
        "downright": SpecialKey.DOWN_RIGHT,
        "center": SpecialKey.CENTER,
        "backtab": SpecialKey.BACK_TAB,
        "printscreen": SpecialKey.PRINT_SCREEN,
        "pause": SpecialKey.PAUSE,
        "insert": SpecialKey.INSERT,
        "home": SpecialKey.HOME,
        "pgup": SpecialKey.PAGE_UP,
        "del": SpecialKey.DELETE,
        "end": SpecialKey.END,
        "pgdown": SpecialKey.PAGE_DOWN,
        "begin": SpecialKey.BEGIN,
        "menu": SpecialKey.MENU,
        "space": CharKey(" "),
        "tab": CharKey("\t"),
    }
)

_CHAR_DISPLAY: Mapping[str, str] = MappingProxyType({"\t": "Tab", " ": "Space"})

_missing = set(SpecialKey) - set(NAMED_KEYS.values())
if _missing:  # pragma: no cover - import-time table check
    names = sorted(key.name for key in _missing)
    raise RuntimeError(f"special keys without a parse spelling: {names}")
del _missing


def _parse_modifier(token: str) -> Modifier:
    try:
        return MODIFIER_PREFIXES[token]
    except KeyError:
        raise UnknownModifierError(token) from None


def _parse_key(token: str) -> Key:
    named = NAMED_KEYS.get(token)
    if named is not None:
        return named
    if len(token) == 1:
        return CharKey(token)
    if token.startswith("f"):
        digits = token[1:]
        if digits.isascii() and digits.isdigit():
            return FunctionKey(int(digits))
    raise UnknownKeyTokenError(token)


def parse_binding(text: str) -> Binding:
    """Parse a single ``C-x`` style specification into a :class:`Binding`.

    Raises :class:`UnknownModifierError` for a bad prefix and
    :class:`UnknownKeyTokenError` for a bad or empty key token.
    """

    if not text:
        raise UnknownKeyTokenError.empty()

    *prefixes, key_token = text.lower().split("-")
    modifiers = frozenset(_parse_modifier(token) for token in prefixes)
    return Binding(key=_parse_key(key_token), modifiers=modifiers)


def parse_binding_list(text: str) -> BindingState:
    """Parse ``"unbound"`` or a comma separated list of bindings.

    The first failing entry propagates; no partial list is returned.
    """

    if text.strip().lower() == UNBOUND_TOKEN:
        return UNBOUND
    return BindingList(tuple(parse_binding(piece.strip()) for piece in text.split(",")))


def pp_key(key: Key) -> str:
    if isinstance(key, SpecialKey):
        return key.value
    if isinstance(key, FunctionKey):
        return f"F{key.index}"
    if isinstance(key, CharKey):
        return _CHAR_DISPLAY.get(key.char, key.char)
    raise TypeError(f"unsupported key {key!r}")


def pp_binding(binding: Binding) -> str:
    parts = [modifier.code for modifier in binding.ordered_modifiers]
    parts.append(pp_key(binding.key))
    return "-".join(parts)


def pp_binding_state(state: BindingState) -> str:
    if isinstance(state, Unbound):
        return UNBOUND_TOKEN
    return ", ".join(pp_binding(binding) for binding in state.bindings)


def non_char_keys() -> tuple[str, ...]:
    """Display spellings of every named non-character key, in declared order."""

    return tuple(key.value for key in SpecialKey)


__all__ = [
    "MODIFIER_PREFIXES",
    "NAMED_KEYS",
    "UNBOUND_TOKEN",
    "parse_binding",
    "parse_binding_list",
    "pp_key",
    "pp_binding",
    "pp_binding_state",
    "non_char_keys",
]
