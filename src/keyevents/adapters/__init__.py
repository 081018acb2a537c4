"""Adapters converting UI toolkit input into keyevents values."""

__all__ = ["textual"]
