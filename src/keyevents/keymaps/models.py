"""Dataclasses and enums describing modifiers, keys and bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from functools import total_ordering
from typing import Iterable, Union


@unique
class Modifier(Enum):
    """Modifier flag; declaration order is the pretty-print order."""

    META = "M"
    ALT = "A"
    CTRL = "C"
    SHIFT = "S"

    @property
    def code(self) -> str:
        return self.value


@unique
class SpecialKey(Enum):
    """Named non-character keys, valued by their display spelling."""

    BACK_TAB = "BackTab"
    ESC = "Esc"
    BACKSPACE = "Backspace"
    ENTER = "Enter"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    HOME = "Home"
    END = "End"
    PAGE_DOWN = "PgDown"
    PAGE_UP = "PgUp"
    DELETE = "Del"
    UP_LEFT = "UpLeft"
    UP_RIGHT = "UpRight"
    DOWN_LEFT = "DownLeft"
    DOWN_RIGHT = "DownRight"
    CENTER = "Center"
    PRINT_SCREEN = "PrintScreen"
    PAUSE = "Pause"
    INSERT = "Insert"
    BEGIN = "Begin"
    MENU = "Menu"


@dataclass(frozen=True, slots=True)
class CharKey:
    """Literal character key, stored exactly as given."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("CharKey requires exactly one character")


@dataclass(frozen=True, slots=True)
class FunctionKey:
    """Function key ``F<index>``."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("function key index cannot be negative")


Key = Union[CharKey, FunctionKey, SpecialKey]

_MODIFIER_RANK = {modifier: rank for rank, modifier in enumerate(Modifier)}
_SPECIAL_RANK = {key: rank for rank, key in enumerate(SpecialKey)}


def _key_sort_key(key: Key) -> tuple[int, int, str]:
    if isinstance(key, SpecialKey):
        return (0, _SPECIAL_RANK[key], "")
    if isinstance(key, FunctionKey):
        return (1, key.index, "")
    return (2, 0, key.char)


@total_ordering
@dataclass(frozen=True, slots=True, eq=True)
class Binding:
    """Set of modifiers plus exactly one key."""

    key: Key
    modifiers: frozenset[Modifier] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.key, (CharKey, FunctionKey, SpecialKey)):
            raise TypeError(f"expected a key, got {self.key!r}")
        if isinstance(self.modifiers, str):
            raise TypeError("modifiers must be Modifier members, not a string")
        modifiers = frozenset(self.modifiers)
        for modifier in modifiers:
            if not isinstance(modifier, Modifier):
                raise TypeError(f"expected Modifier, got {modifier!r}")
        object.__setattr__(self, "modifiers", modifiers)

    @classmethod
    def of(cls, key: Key, *modifiers: Modifier) -> "Binding":
        return cls(key=key, modifiers=frozenset(modifiers))

    @property
    def ordered_modifiers(self) -> tuple[Modifier, ...]:
        return tuple(m for m in Modifier if m in self.modifiers)

    @property
    def sort_key(self) -> tuple[tuple[int, int, str], tuple[int, ...]]:
        ranks = tuple(_MODIFIER_RANK[m] for m in self.ordered_modifiers)
        return (_key_sort_key(self.key), ranks)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Binding):
            return NotImplemented
        return self.sort_key < other.sort_key


@dataclass(frozen=True, slots=True)
class BindingList:
    """Non-empty ordered alternatives that all trigger the same event."""

    bindings: tuple[Binding, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", tuple(self.bindings))
        if not self.bindings:
            raise ValueError("BindingList requires at least one binding")

    @classmethod
    def of(cls, bindings: Iterable[Binding]) -> "BindingList":
        return cls(tuple(bindings))

    def __iter__(self):
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)


@dataclass(frozen=True, slots=True)
class Unbound:
    """Explicitly disabled binding, distinct from "not configured"."""


UNBOUND = Unbound()

BindingState = Union[BindingList, Unbound]


__all__ = [
    "Modifier",
    "SpecialKey",
    "CharKey",
    "FunctionKey",
    "Key",
    "Binding",
    "BindingList",
    "Unbound",
    "UNBOUND",
    "BindingState",
]
