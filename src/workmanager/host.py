# src/workmanager/host.py
"""
Bridge between host simulation objects and the array-based core.

The host hands over live worker objects; :func:`snapshot_workers` reads
each accessor exactly once into a :class:`Roster`, and :func:`publish`
writes a finished :class:`PriorityAssignment` back and notifies every
worker. The assignment passes themselves never touch host objects.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

import numpy as np

from workmanager.assignment import PriorityAssignment
from workmanager.catalog import Passion, WorkCatalog
from workmanager.logging import getLogger
from workmanager.roster import Roster

__all__ = ["HostWorker", "publish", "snapshot_workers"]

log = getLogger(__name__)


@runtime_checkable
class HostWorker(Protocol):
    """What the host must expose for each eligible worker."""

    @property
    def name(self) -> str: ...

    @property
    def dead(self) -> bool: ...

    @property
    def downed(self) -> bool: ...

    @property
    def in_mental_break(self) -> bool: ...

    @property
    def drafted(self) -> bool: ...

    @property
    def idle(self) -> bool: ...

    @property
    def reckless(self) -> bool: ...

    def work_type_is_disabled(self, work_type: str) -> bool: ...

    def skill_level(self, skill: str) -> float: ...

    def passion(self, skill: str) -> Passion | int: ...

    def set_priority(self, work_type: str, priority: int) -> None: ...

    def notify_priorities_changed(self) -> None: ...


def snapshot_workers(workers: Sequence[HostWorker], catalog: WorkCatalog) -> Roster:
    """
    Read *workers* into a Roster laid out for *catalog*.

    Row order follows *workers*; it is the tie-break order of every pass.
    """
    n = len(workers)
    if n == 0:
        return Roster.empty(catalog)

    skill_level = np.zeros((n, catalog.n_skills), dtype=np.float64)
    passion = np.zeros((n, catalog.n_skills), dtype=np.int64)
    disabled = np.zeros((n, catalog.n_work_types), dtype=np.bool_)

    for i, w in enumerate(workers):
        for s, skill in enumerate(catalog.skills):
            skill_level[i, s] = float(w.skill_level(skill))
            passion[i, s] = int(w.passion(skill))
        for j, key in enumerate(catalog.keys):
            disabled[i, j] = bool(w.work_type_is_disabled(key))

    def flags(attr: str) -> np.ndarray:
        return np.fromiter((bool(getattr(w, attr)) for w in workers), np.bool_, n)

    return Roster(
        names=tuple(w.name for w in workers),
        skill_level=skill_level,
        passion=passion,
        disabled=disabled,
        dead=flags("dead"),
        downed=flags("downed"),
        mental_break=flags("in_mental_break"),
        drafted=flags("drafted"),
        idle=flags("idle"),
        reckless=flags("reckless"),
    )


def publish(assignment: PriorityAssignment, workers: Sequence[HostWorker]) -> None:
    """
    Write *assignment* back to the host and notify each worker.

    All priorities of a worker are written before that worker is notified.

    Raises
    ------
    ValueError
        If *workers* does not match the assignment's rows.
    """
    if len(workers) != len(assignment):
        raise ValueError(
            f"Assignment has {len(assignment)} rows but {len(workers)} workers "
            f"were given"
        )
    for (_, priorities), worker in zip(assignment, workers):
        for key, value in priorities.items():
            worker.set_priority(key, value)
        worker.notify_priorities_changed()
    log.debug("Published priorities for %d workers", len(workers))
