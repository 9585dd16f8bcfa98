"""Core pipeline infrastructure for Work Manager."""

from typing import Any, Callable

from workmanager.core.event import Event
from workmanager.core.pipeline import Pipeline
from workmanager.core.registry import get_event, list_events
from workmanager.core.decorators import event as event_decorator

# Overrides the ``workmanager.core.event`` submodule attribute so that
# ``from workmanager.core import event`` yields the decorator.
event: Callable[..., Any] = event_decorator

__all__ = [
    "Event",
    "Pipeline",
    "event",
    "get_event",
    "list_events",
]
