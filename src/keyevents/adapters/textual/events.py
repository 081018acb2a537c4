"""Convert captured Textual key presses into :class:`Binding` values."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from textual import events
from textual.keys import key_to_character

from keyevents.keymaps.models import Binding, CharKey, FunctionKey, Key, Modifier, SpecialKey

TEXTUAL_MODIFIERS: Mapping[str, Modifier] = MappingProxyType(
    {
        "ctrl": Modifier.CTRL,
        "shift": Modifier.SHIFT,
        "alt": Modifier.ALT,
        "meta": Modifier.META,
        "super": Modifier.META,
        "hyper": Modifier.META,
    }
)

TEXTUAL_KEYS: Mapping[str, Key] = MappingProxyType(
    {
        "escape": SpecialKey.ESC,
        "backspace": SpecialKey.BACKSPACE,
        "enter": SpecialKey.ENTER,
        "up": SpecialKey.UP,
        "down": SpecialKey.DOWN,
        "left": SpecialKey.LEFT,
        "right": SpecialKey.RIGHT,
        "home": SpecialKey.HOME,
        "end": SpecialKey.END,
        "pageup": SpecialKey.PAGE_UP,
        "pagedown": SpecialKey.PAGE_DOWN,
        "delete": SpecialKey.DELETE,
        "insert": SpecialKey.INSERT,
        "pause": SpecialKey.PAUSE,
        "menu": SpecialKey.MENU,
        "print_screen": SpecialKey.PRINT_SCREEN,
        "tab": CharKey("\t"),
        "space": CharKey(" "),
    }
)

# Textual reports BackTab as a shifted tab.
_TAB = "tab"
_SHIFT = "shift"


def _invalid(event: object) -> RuntimeError:
    return RuntimeError(f"BUG: invalid keybinding {event!r}")


def _base_key(name: str, character: str | None) -> Key | None:
    known = TEXTUAL_KEYS.get(name)
    if known is not None:
        return known
    if len(name) == 1:
        return CharKey(name)
    if name.startswith("f") and name[1:].isascii() and name[1:].isdigit():
        return FunctionKey(int(name[1:]))
    # punctuation arrives under an alias such as "minus" or "exclamation_mark"
    aliased = key_to_character(name)
    if aliased is not None and len(aliased) == 1 and aliased.isprintable():
        return CharKey(aliased)
    if character is not None and len(character) == 1 and character.isprintable():
        return CharKey(character)
    return None


def event_to_binding(event: events.Key) -> Binding:
    """Translate a Textual ``Key`` event into a :class:`Binding`.

    Only key presses already filtered by the input layer may be passed in.
    Anything else is a caller bug and raises ``RuntimeError``.
    """

    if not isinstance(event, events.Key) or not event.key:
        raise _invalid(event)

    *prefixes, name = event.key.split("+")
    back_tab = name == _TAB and _SHIFT in prefixes
    if back_tab:
        prefixes = [prefix for prefix in prefixes if prefix != _SHIFT]
    try:
        modifiers = frozenset(TEXTUAL_MODIFIERS[prefix] for prefix in prefixes)
    except KeyError:
        raise _invalid(event) from None

    if back_tab:
        return Binding(key=SpecialKey.BACK_TAB, modifiers=modifiers)

    key = _base_key(name, event.character)
    if key is None:
        raise _invalid(event)
    return Binding(key=key, modifiers=modifiers)


__all__ = ["TEXTUAL_MODIFIERS", "TEXTUAL_KEYS", "event_to_binding"]
