"""Event Pipeline with explicit execution order."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

from workmanager.core.event import Event
from workmanager.core.registry import get_event
from workmanager.logging import getLogger

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log = getLogger(__name__)


@dataclass(slots=True)
class Pipeline:
    """
    Ordered sequence of assignment passes.

    Attributes
    ----------
    events : list[Event]
        Ordered list of event instances to execute.
    _event_map : dict[str, Event]
        Internal mapping from event names to instances for quick lookup.

    See Also
    --------
    Pipeline.from_event_list : Build pipeline from event name list
    Pipeline.from_yaml : Build pipeline from a YAML file
    """

    events: list[Event] = field(default_factory=list)
    _event_map: dict[str, Event] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._event_map = {event.name: event for event in self.events}

    @classmethod
    def from_event_list(cls, event_names: list[str]) -> Pipeline:
        """
        Build pipeline from ordered list of event names.

        Events are executed in the exact order provided. Users are
        responsible for ensuring the order is logically correct.

        Raises
        ------
        KeyError
            If event name not found in registry.
        """
        return cls(events=[get_event(name)() for name in event_names])

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> Pipeline:
        """
        Build pipeline from YAML configuration file.

        The YAML file must have an 'events' key with a list of event names.
        An entry may be written ``'event_name x N'`` to repeat it.

        Raises
        ------
        ValueError
            If YAML format is invalid.
        KeyError
            If an event is not found in the registry.

        Examples
        --------
        >>> pipeline = Pipeline.from_yaml("my_pipeline.yml")
        """
        yaml_path = Path(yaml_path)
        with open(yaml_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or "events" not in config:
            raise ValueError(f"YAML file must have 'events' key: {yaml_path}")

        specs = config["events"]
        if not isinstance(specs, list):
            raise ValueError(
                f"Pipeline 'events' must be a list, got {type(specs).__name__}"
            )

        event_names: list[str] = []
        for i, spec in enumerate(specs):
            if not isinstance(spec, str):
                raise ValueError(
                    f"Event spec at index {i} must be str, got {type(spec).__name__}"
                )
            event_names.extend(cls._parse_event_spec(spec))

        return cls.from_event_list(event_names)

    @staticmethod
    def _parse_event_spec(spec: str) -> list[str]:
        """
        Parse event specification string into list of event names.

        - 'event_name' -> ['event_name']
        - 'event_name x 2' -> ['event_name', 'event_name']
        """
        spec = spec.strip()
        match = re.match(r"^(.+?)\s+x\s+(\d+)$", spec)
        if match:
            return [match.group(1).strip()] * int(match.group(2))
        return [spec]

    def execute(self, run: AssignmentRun) -> None:
        """
        Execute all events in pipeline order.

        Parameters
        ----------
        run : AssignmentRun
            Run state to operate on. Mutated in-place.
        """
        for event in self.events:
            log.deep("Executing %s", event.name)
            event.execute(run)

    def insert_after(self, after: str, event: Event | str) -> None:
        """
        Insert event after specified event.

        Raises
        ------
        ValueError
            If 'after' event not found in pipeline.
        """
        if after not in self._event_map:
            raise ValueError(f"Event '{after}' not found in pipeline")

        if isinstance(event, str):
            event = get_event(event)()

        idx = self.events.index(self._event_map[after])
        self.events.insert(idx + 1, event)
        self._event_map[event.name] = event

    def remove(self, event_name: str) -> None:
        """
        Remove event from pipeline.

        Raises
        ------
        ValueError
            If event not found in pipeline.
        """
        if event_name not in self._event_map:
            raise ValueError(f"Event '{event_name}' not found in pipeline")

        event = self._event_map.pop(event_name)
        self.events.remove(event)

    def replace(self, old_name: str, new_event: Event | str) -> None:
        """
        Replace event with another event.

        Raises
        ------
        ValueError
            If old event not found in pipeline.
        """
        if old_name not in self._event_map:
            raise ValueError(f"Event '{old_name}' not found in pipeline")

        if isinstance(new_event, str):
            new_event = get_event(new_event)()

        idx = self.events.index(self._event_map[old_name])
        self.events[idx] = new_event

        del self._event_map[old_name]
        self._event_map[new_event.name] = new_event

    @property
    def names(self) -> list[str]:
        return [event.name for event in self.events]

    def __len__(self) -> int:
        return len(self.events)

    def __repr__(self) -> str:
        return f"Pipeline(n_events={len(self.events)})"
