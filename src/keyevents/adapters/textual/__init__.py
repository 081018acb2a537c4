"""Textual integration for keyevents."""

from .events import event_to_binding

__all__ = ["event_to_binding"]
