"""Event (assignment pass) base class definition."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from workmanager.logging import WorkLogger, getLogger

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun


def _camel_to_snake(name: str) -> str:
    """Convert CamelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


@dataclass(slots=True)
class Event(ABC):
    """
    Base class for all assignment passes.

    An Event encapsulates one rule of the priority pipeline. It reads the
    roster, catalog and config of an :class:`AssignmentRun` and mutates the
    run's priority matrix in-place. Events are executed by the Pipeline in
    the exact order specified.

    Design Guidelines
    -----------------
    - Inherit from Event (or use ``@event``) and implement `execute()`
    - Use `name` class variable for unique identification
    - Keep the rule itself in a pure function under ``workmanager.systems``

    Notes
    -----
    Events are registered automatically via __init_subclass__ hook.
    The order of event execution is critical: later passes only fill cells
    that earlier passes left at 0, except the mental-break override.
    """

    name: ClassVar[str] = ""

    def __init_subclass__(cls, name: str = "", **kwargs: Any) -> None:
        """
        Auto-register Event subclasses in the global registry.

        Parameters
        ----------
        name : str, optional
            Custom name for the event.
            If not provided, uses the class name converted to snake_case.
        **kwargs
            Additional keyword arguments passed to parent __init_subclass__.
        """
        super(Event, cls).__init_subclass__(**kwargs)

        # @dataclass(slots=True) creates a new class and triggers this hook
        # a second time without the custom name; keep the existing one.
        if name != "":
            cls.name = name
        elif cls.name == "":
            cls.name = _camel_to_snake(cls.__name__)

        from workmanager.core.registry import _EVENT_REGISTRY

        _EVENT_REGISTRY[cls.name] = cls

    def get_logger(self) -> WorkLogger:
        """
        Get logger for this event with per-event log level applied.

        Logger name format: 'workmanager.events.{event_name}'. Per-event
        log levels can be configured via defaults.yml or kwargs:

        logging:
          events:
            assign_doctors: DEBUG
            assign_workers_by_passion: WARNING
        """
        return getLogger(f"workmanager.events.{self.name}")

    @abstractmethod
    def execute(self, run: AssignmentRun) -> None:
        """
        Execute the pass.

        Parameters
        ----------
        run : AssignmentRun
            Working state of the current run. Mutated in-place.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
