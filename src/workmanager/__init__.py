"""
Work Manager - Automatic Work Priority Assignment
=================================================

Work Manager recomputes the work priorities of a colony of workers once
per simulated hour. Every eligible worker gets a priority in ``[0, 4]``
(0 disabled, 1 highest, 4 lowest) for every work type the host defines,
based on skills, passions and current state (downed, in a mental break,
idle, drafted).

Quick Start
-----------
Compute priorities for a set of host workers:

>>> import workmanager as wm
>>> manager = wm.WorkManager.init(work_types=universe)
>>> assignment = manager.assign(workers)
>>> assignment.for_worker(0)["Doctor"]
1

Hook into the host's tick loop (at most one run per pool and hour):

>>> manager.on_tick("map-0", tick=tick, hour=hour, get_workers=colonists)

Custom configuration via kwargs or YAML:

>>> manager = wm.WorkManager.init(
...     work_types=universe,
...     assign_all_work_types=True,
...     always_include_cleaning=False,
... )
>>> manager = wm.WorkManager.init("my_config.yml", work_types=universe)

Key Concepts
------------
**Roster Snapshot**
  Host workers are read once into NumPy arrays (skills, passions,
  disabled work types, state flags). The passes never touch host objects.

**Assignment Pipeline**
  Each run executes a fixed sequence of passes: reset → doctors → hunters
  → skill → passion → leftover → fallback → idle → mental break. Later
  passes only fill cells still at 0, except the final mental-break
  override.

**Tied-Top Selection**
  Doctors, hunters and skill assignments go to every candidate whose skill
  reaches the floored maximum, not only the single best.

**Debounced Trigger**
  A pool recomputes on a stagger-aligned tick in a simulated hour it has
  not processed yet.

Public API
----------
**Core Classes**

WorkManager
    Facade: configuration, per-pool triggers, snapshot, assign, publish.
WorkCatalog, WorkType
    Static classification of the work-type universe.
Roster
    Array snapshot of one worker pool.
PriorityAssignment
    Immutable worker × work-type result table.
Config, SettingsStore
    Frozen settings snapshot and its mutable, persisted store.
Pipeline, Event
    Ordered assignment passes and their base class.

**Functions**

assign_priorities
    Pure computation: roster + catalog + config → PriorityAssignment.
snapshot_workers, publish
    Read host workers into a Roster and write results back.

**Registry Functions**

get_event, list_events
    Retrieve / list registered assignment passes.

Notes
-----
- Configuration precedence: defaults.yml → user config → kwargs
- Pipeline passes execute in explicit order (no dependency resolution)
- Settings changes take effect on the next run, never mid-run
"""

from __future__ import annotations

__version__: str = "0.1.0"

from . import logging  # noqa: E402 (circular-safe)
from .assignment import AssignmentRun, PriorityAssignment, assign_priorities
from .catalog import Passion, WorkCatalog, WorkType
from .config import Config, ConfigValidator, SettingsStore
from .core import Event, Pipeline, event, get_event, list_events
from .host import HostWorker, publish, snapshot_workers
from .manager import WorkManager
from .roster import Roster
from .trigger import PriorityTrigger

# Register built-in passes
from . import events  # noqa: E402, F401

__all__ = [
    "__version__",
    # Facade
    "WorkManager",
    # Data model
    "AssignmentRun",
    "Passion",
    "PriorityAssignment",
    "Roster",
    "WorkCatalog",
    "WorkType",
    # Configuration
    "Config",
    "ConfigValidator",
    "SettingsStore",
    # Pipeline
    "Event",
    "Pipeline",
    "event",
    "get_event",
    "list_events",
    # Host boundary
    "HostWorker",
    "PriorityTrigger",
    "assign_priorities",
    "publish",
    "snapshot_workers",
    # Utilities
    "logging",
]
