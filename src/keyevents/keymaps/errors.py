"""Structured errors raised while translating key specifications."""

from __future__ import annotations


class KeySpecError(ValueError):
    """Base class for recoverable key specification errors."""

    def __init__(self, message: str, *, token: str) -> None:
        super().__init__(message)
        self.message = message
        self.token = token


class UnknownModifierError(KeySpecError):
    """Raised for an unrecognized modifier prefix such as ``q`` in ``q-x``."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown modifier prefix: {token!r}", token=token)


class UnknownKeyTokenError(KeySpecError):
    """Raised when the final key token cannot be resolved."""

    def __init__(self, token: str, *, message: str | None = None) -> None:
        super().__init__(message or f"Unknown keybinding: {token!r}", token=token)

    @classmethod
    def empty(cls) -> "UnknownKeyTokenError":
        return cls("", message="Empty keybinding not allowed")


class UnknownEventNameError(KeySpecError):
    """Raised when an event name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown event: {name!r}", token=name)

    @property
    def name(self) -> str:
        return self.token


class KeyConfigEntryError(KeySpecError):
    """Wraps the failure of a single ``event-name = binding-spec`` entry."""

    def __init__(self, name: str, spec: str, cause: KeySpecError) -> None:
        super().__init__(f"{name} = {spec!r}: {cause.message}", token=cause.token)
        self.name = name
        self.spec = spec
        self.cause = cause


__all__ = [
    "KeySpecError",
    "UnknownModifierError",
    "UnknownKeyTokenError",
    "UnknownEventNameError",
    "KeyConfigEntryError",
]
