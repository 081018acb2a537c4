"""Event to binding-state mapping assembled from textual entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from keyevents.runtime.telemetry import record_event, span

from .errors import KeyConfigEntryError, KeySpecError
from .grammar import parse_binding_list, pp_binding_state
from .models import Binding, BindingList, BindingState, Unbound
from .registry import KeyEvent, all_events, key_event_from_name, key_event_name

Entries = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class KeyConfig(Mapping[KeyEvent, BindingState]):
    """Immutable mapping from events to their configured binding state.

    An event missing from the mapping falls back to the application default,
    which is not the same as :data:`~keyevents.keymaps.models.UNBOUND`.
    """

    __slots__ = ("_states",)

    def __init__(self, states: Optional[Mapping[KeyEvent, BindingState]] = None) -> None:
        checked: dict[KeyEvent, BindingState] = {}
        for event, state in (states or {}).items():
            if not isinstance(event, KeyEvent):
                raise TypeError(f"expected KeyEvent, got {event!r}")
            if not isinstance(state, (BindingList, Unbound)):
                raise TypeError(f"expected a binding state for {event.value}, got {state!r}")
            checked[event] = state
        self._states: Mapping[KeyEvent, BindingState] = MappingProxyType(checked)

    def __getitem__(self, event: KeyEvent) -> BindingState:
        return self._states[event]

    def __iter__(self) -> Iterator[KeyEvent]:
        # canonical order rather than insertion order
        return (event for event in all_events() if event in self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"KeyConfig({self.to_entries()!r})"

    def state(self, event: KeyEvent) -> Optional[BindingState]:
        return self._states.get(event)

    def is_unbound(self, event: KeyEvent) -> bool:
        return isinstance(self._states.get(event), Unbound)

    def bindings_for(self, event: KeyEvent) -> tuple[Binding, ...]:
        state = self._states.get(event)
        if isinstance(state, BindingList):
            return state.bindings
        return ()

    def overlay(self, overrides: Mapping[KeyEvent, BindingState]) -> "KeyConfig":
        """Return a new config where ``overrides`` replace entries per event."""

        merged = dict(self._states)
        merged.update(overrides)
        return KeyConfig(merged)

    def to_entries(self) -> dict[str, str]:
        return {key_event_name(event): pp_binding_state(self[event]) for event in self}


@dataclass(frozen=True, slots=True)
class KeyConfigResult:
    """Outcome of :func:`load_key_config`."""

    config: KeyConfig
    errors: tuple[KeyConfigEntryError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors


def _iter_entries(entries: Entries) -> Iterable[Tuple[str, str]]:
    if isinstance(entries, Mapping):
        return entries.items()
    return entries


def load_key_config(
    entries: Entries, *, strict: bool = False, logger_name: str | None = None
) -> KeyConfigResult:
    """Translate ``(event-name, binding-spec)`` pairs into a :class:`KeyConfig`.

    Invalid entries are collected as :class:`KeyConfigEntryError` and the
    remaining entries still load. With ``strict=True`` the first invalid
    entry is raised instead. When an event name repeats, the last entry wins.
    """

    states: dict[KeyEvent, BindingState] = {}
    errors: list[KeyConfigEntryError] = []
    with span(
        "keymaps::load_key_config",
        logger_name=logger_name,
        component="keymaps",
        metadata={"strict": strict},
    ) as handle:
        for name, spec in _iter_entries(entries):
            try:
                event = key_event_from_name(name)
                state = parse_binding_list(spec)
            except KeySpecError as exc:
                error = KeyConfigEntryError(name, spec, exc)
                if strict:
                    raise error from exc
                record_event(
                    "keymaps.entry_rejected",
                    level="warning",
                    data={"name": name, "spec": spec, "reason": exc.message},
                    logger_name=logger_name,
                )
                errors.append(error)
                continue
            states[event] = state

        handle.add_metadata("loaded", len(states))
        handle.add_metadata("rejected", len(errors))

    return KeyConfigResult(config=KeyConfig(states), errors=tuple(errors))


__all__ = [
    "KeyConfig",
    "KeyConfigResult",
    "load_key_config",
]
