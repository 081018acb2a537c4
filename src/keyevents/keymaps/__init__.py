"""Event registry, binding grammar and key configuration."""

from .config import KeyConfig, KeyConfigResult, load_key_config
from .errors import (
    KeyConfigEntryError,
    KeySpecError,
    UnknownEventNameError,
    UnknownKeyTokenError,
    UnknownModifierError,
)
from .grammar import (
    non_char_keys,
    parse_binding,
    parse_binding_list,
    pp_binding,
    pp_binding_state,
    pp_key,
)
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
from .registry import KeyEvent, all_events, key_event_from_name, key_event_name

__all__ = [
    "Binding",
    "BindingList",
    "BindingState",
    "CharKey",
    "FunctionKey",
    "Key",
    "KeyConfig",
    "KeyConfigEntryError",
    "KeyConfigResult",
    "KeyEvent",
    "KeySpecError",
    "Modifier",
    "SpecialKey",
    "UNBOUND",
    "Unbound",
    "UnknownEventNameError",
    "UnknownKeyTokenError",
    "UnknownModifierError",
    "all_events",
    "key_event_from_name",
    "key_event_name",
    "load_key_config",
    "non_char_keys",
    "parse_binding",
    "parse_binding_list",
    "pp_binding",
    "pp_binding_state",
    "pp_key",
]
