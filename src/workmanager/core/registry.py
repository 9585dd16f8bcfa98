"""Registry of assignment passes (events)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from workmanager.core.event import Event

_EVENT_REGISTRY: dict[str, type[Event]] = {}


def get_event(name: str) -> type[Event]:
    """
    Retrieve an event class from the registry by name.

    Raises
    ------
    KeyError
        If the event name is not found in the registry.
    """
    if name not in _EVENT_REGISTRY:
        available = ", ".join(sorted(_EVENT_REGISTRY.keys()))
        raise KeyError(
            f"Event '{name}' not found in registry. Available events: {available}"
        )
    return _EVENT_REGISTRY[name]


def list_events() -> list[str]:
    """Return sorted list of all registered event names."""
    return sorted(_EVENT_REGISTRY.keys())


def clear_registry() -> None:
    """
    Clear all registrations (useful for testing).

    WARNING: This is a destructive operation. Only use in test teardown.
    """
    _EVENT_REGISTRY.clear()
