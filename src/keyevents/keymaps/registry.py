"""Registry of rebindable application events and their canonical names."""

from __future__ import annotations

from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping

from .errors import UnknownEventNameError


@unique
class KeyEvent(Enum):
    """Logical action a user may bind keys to.

    Each member is valued by its canonical configuration name. Declaration
    order is the curated order used for defaults and help screens.
    """

    QUIT = "quit"
    VTY_REFRESH = "vty-refresh"
    CLEAR_UNREAD = "clear-unread"

    TOGGLE_MESSAGE_PREVIEW = "toggle-message-preview"
    INVOKE_EDITOR = "invoke-editor"
    TOGGLE_MULTI_LINE = "toggle-multiline"
    CANCEL = "cancel"
    REPLY_RECENT = "reply-recent"

    ENTER_FAST_SELECT_MODE = "enter-fast-select"
    NEXT_CHANNEL = "focus-next-channel"
    PREV_CHANNEL = "focus-prev-channel"
    NEXT_UNREAD_CHANNEL = "focus-next-unread"
    LAST_CHANNEL = "focus-last-channel"

    ENTER_FLAGGED_POSTS = "show-flagged-posts"
    SHOW_HELP = "show-help"
    ENTER_SELECT_MODE = "select-mode"
    ENTER_OPEN_URL_MODE = "enter-url-open"

    # channel scroll
    LOAD_MORE = "load-more"
    OPEN_MESSAGE_URL = "open-message-url"

    SCROLL_UP = "scroll-up"
    SCROLL_DOWN = "scroll-down"
    PAGE_UP = "page-up"
    PAGE_DOWN = "page-down"
    SCROLL_TOP = "scroll-top"
    SCROLL_BOTTOM = "scroll-bottom"

    # selection moves differ from scrolling in some views
    SELECT_UP = "select-up"
    SELECT_DOWN = "select-down"

    ACTIVATE_LIST_ITEM = "activate-list-item"

    # must not collide with editor input such as j/k
    SEARCH_SELECT_UP = "search-select-up"
    SEARCH_SELECT_DOWN = "search-select-down"

    FLAG_MESSAGE = "flag-message"
    YANK_MESSAGE = "yank-message"
    DELETE_MESSAGE = "delete-message"
    EDIT_MESSAGE = "edit-message"
    REPLY_MESSAGE = "reply-message"


_ALL_EVENTS: tuple[KeyEvent, ...] = tuple(KeyEvent)

_EVENTS_BY_NAME: Mapping[str, KeyEvent] = MappingProxyType(
    {event.value: event for event in _ALL_EVENTS}
)


def _check_table() -> None:
    if len(_EVENTS_BY_NAME) != len(_ALL_EVENTS):
        raise RuntimeError("KeyEvent names are not unique")
    for event in _ALL_EVENTS:
        name = event.value
        if not name or name != name.lower() or " " in name:
            raise RuntimeError(f"KeyEvent {event!r} has a malformed name {name!r}")
        if _EVENTS_BY_NAME[name] is not event:
            raise RuntimeError(f"KeyEvent name {name!r} does not round-trip")


_check_table()


def all_events() -> tuple[KeyEvent, ...]:
    return _ALL_EVENTS


def key_event_name(event: KeyEvent) -> str:
    return event.value


def key_event_from_name(name: str) -> KeyEvent:
    """Resolve a canonical name, case-sensitively, back to its event."""

    try:
        return _EVENTS_BY_NAME[name]
    except KeyError:
        raise UnknownEventNameError(name) from None


__all__ = [
    "KeyEvent",
    "all_events",
    "key_event_name",
    "key_event_from_name",
]
