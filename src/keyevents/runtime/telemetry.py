"""Logging and profiling for keyevents, backed by telelog.

Parsing and name lookups are pure and never log. Only the configuration
loader reports through this module:

``configure(...)`` -- install an explicit telelog config or a named preset
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured ``event::<name>`` record
``span(name, ...)`` -- profile a block and attach transient context
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "KEYEVENTS_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "keyevents")

PRESETS = ("development", "production", "quiet")

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _setting(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _flag(name: str, default: bool = False) -> bool:
    raw = _setting(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (frozenset, set, tuple, list, dict)):
        return repr(value)
    return str(value)


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((_setting("LOG_LEVEL") or "WARNING").upper())

    console = not _flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _flag("NO_COLOR"))

    if _flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_setting("LOG_BUFFER_SIZE") or "2048"))

    config.with_profiling(True)
    return config


def _config_from_preset(preset: str) -> Any:
    key = preset.lower()
    if key not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}'. Expected one of {PRESETS}.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_setting("LOG_FILE") or "keyevents.log")
        config.with_buffering(True)
    else:
        config.with_min_level("ERROR")
        config.with_console_output(False)

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``telelog.Config`` instance.
    preset:
        One of :data:`PRESETS`. Mutually exclusive with ``config``. With
        neither, settings are read from ``KEYEVENTS_*`` environment variables.
    """

    global _CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _config_from_preset(preset)
    elif config is None:
        config = _config_from_env()

    _CONFIG = config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        if _CONFIG is None:
            configure()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        with_data(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Handle yielded by :func:`span` for attaching results to the span."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def report(self, level: str, message: str, **extra: Any) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload.update({key: _text(value) for key, value in extra.items()})
        _emit(self.logger, level, message, payload)

    def fail(self, reason: str) -> None:
        self.report("error", "span::fail", reason=reason)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``, optionally tracked as ``component``.

    ``metadata`` is pushed as logger context for the duration of the block.
    An exception escaping the block is reported with ``span::fail`` and
    re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, name=name, component=component)
    pushed: list[str] = []

    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            log.add_context(key, handle.metadata[key])
            pushed.append(key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in pushed:
                log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
