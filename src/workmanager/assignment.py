# src/workmanager/assignment.py
"""
Pure priority computation: roster + catalog + config → PriorityAssignment.

One call to :func:`assign_priorities` builds an :class:`AssignmentRun`,
threads it through the event pipeline and freezes the resulting matrix.
Nothing is written back to the host here; see :mod:`workmanager.host`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from workmanager.catalog import WorkCatalog
from workmanager.config import Config
from workmanager.core.pipeline import Pipeline
from workmanager.helpers import average_relevant_skill, max_relevant_passion
from workmanager.logging import DEBUG, getLogger
from workmanager.roster import Roster
from workmanager.typing import Float2D, Int2D

__all__ = [
    "AssignmentRun",
    "PriorityAssignment",
    "assign_priorities",
    "DISABLED",
    "HIGHEST",
    "LOWEST",
]

log = getLogger(__name__)

DISABLED = 0
HIGHEST = 1
LOWEST = 4


@dataclass(slots=True, eq=False)
class AssignmentRun:
    """
    Working state of one pipeline run.

    Events receive the run, read roster/catalog/config and mutate
    ``priority`` in-place. Derived matrices are computed once up front so
    every pass sees the same skill and passion figures.

    Attributes
    ----------
    roster : Roster
        Snapshot of the worker pool (read-only).
    catalog : WorkCatalog
        Work-type classification.
    config : Config
        Settings snapshot taken when the run started.
    priority : Int2D
        Working priority matrix, shape ``(n_workers, n_work_types)``.
    avg_skill : Float2D
        Average relevant skill per worker and work type.
    max_passion : Int2D
        Highest relevant passion per worker and work type.
    """

    roster: Roster
    catalog: WorkCatalog
    config: Config
    priority: Int2D = field(init=False)
    avg_skill: Float2D = field(init=False)
    max_passion: Int2D = field(init=False)

    def __post_init__(self) -> None:
        if self.roster.disabled.shape[1] != self.catalog.n_work_types:
            raise ValueError(
                f"Roster has {self.roster.disabled.shape[1]} work-type columns, "
                f"catalog has {self.catalog.n_work_types}"
            )
        if self.roster.n_skills != self.catalog.n_skills:
            raise ValueError(
                f"Roster has {self.roster.n_skills} skill columns, "
                f"catalog has {self.catalog.n_skills}"
            )
        self.priority = np.zeros(
            (self.roster.size, self.catalog.n_work_types), dtype=np.int64
        )
        self.avg_skill = average_relevant_skill(
            self.roster.skill_level, self.catalog.relevance
        )
        self.max_passion = max_relevant_passion(
            self.roster.passion, self.catalog.relevance
        )

    @property
    def n_workers(self) -> int:
        return self.roster.size

    def set_priority(self, worker: int, work_type: int, value: int) -> None:
        """Write one cell, skipping hard-disabled work types."""
        if self.roster.disabled[worker, work_type]:
            return
        self.priority[worker, work_type] = value

    def label(self, worker: int, work_type: int) -> tuple[str, str]:
        """(worker name, work type label) for log messages."""
        return (
            self.roster.names[worker],
            self.catalog.work_types[work_type].label,
        )

    def freeze(self) -> PriorityAssignment:
        table = self.priority.copy()
        table.flags.writeable = False
        return PriorityAssignment(
            names=self.roster.names, keys=self.catalog.keys, table=table
        )


@dataclass(slots=True, frozen=True, eq=False)
class PriorityAssignment:
    """
    Immutable worker × work-type priority table.

    Values are in ``[0, 4]``: 0 disabled, 1 highest, 4 lowest.
    """

    names: tuple[str, ...]
    keys: tuple[str, ...]
    table: Int2D

    def get(self, worker: int, work_type: str) -> int:
        return int(self.table[worker, self.keys.index(work_type)])

    def for_worker(self, worker: int) -> dict[str, int]:
        """Priority per work-type key for one worker."""
        return {k: int(v) for k, v in zip(self.keys, self.table[worker])}

    def assigned_count(self, worker: int) -> int:
        """Number of work types with non-zero priority."""
        return int(np.count_nonzero(self.table[worker]))

    def __iter__(self) -> Iterator[tuple[int, dict[str, int]]]:
        for i in range(len(self.names)):
            yield i, self.for_worker(i)

    def __len__(self) -> int:
        return len(self.names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PriorityAssignment):
            return NotImplemented
        return (
            self.names == other.names
            and self.keys == other.keys
            and np.array_equal(self.table, other.table)
        )

    __hash__ = None  # type: ignore[assignment]


def assign_priorities(
    roster: Roster,
    catalog: WorkCatalog,
    config: Config,
    *,
    pipeline: Pipeline | None = None,
) -> PriorityAssignment:
    """
    Compute a complete priority table for *roster*.

    Parameters
    ----------
    roster : Roster
        Eligible workers of one pool (alive, spawned, free).
    catalog : WorkCatalog
        Work-type classification.
    config : Config
        Settings snapshot; read once for the whole run.
    pipeline : Pipeline, optional
        Pass sequence. Defaults to the packaged default pipeline.

    Returns
    -------
    PriorityAssignment
        Frozen table. An empty roster yields an empty (zero-row) table.
    """
    run = AssignmentRun(roster=roster, catalog=catalog, config=config)
    if run.n_workers == 0:
        log.debug("Empty roster – nothing to assign")
        return run.freeze()

    if pipeline is None:
        from workmanager.core.default_pipeline import create_default_pipeline

        pipeline = create_default_pipeline()

    pipeline.execute(run)

    if log.isEnabledFor(DEBUG):
        assigned = np.count_nonzero(run.priority, axis=1)
        log.debug(
            "Assigned priorities for %d workers (mean %.1f work types each)",
            run.n_workers,
            float(assigned.mean()),
        )
    return run.freeze()
