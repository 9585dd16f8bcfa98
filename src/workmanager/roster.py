"""Roster: array snapshot of one worker pool."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from workmanager.catalog import WorkCatalog
from workmanager.typing import Bool1D, Bool2D, Float2D, Int2D

__all__ = ["Roster"]


@dataclass(slots=True, eq=False)
class Roster:
    """
    State of every eligible worker in a pool, one row per worker.

    Columns of ``skill_level`` and ``passion`` follow ``catalog.skills``;
    columns of ``disabled`` follow ``catalog.work_types``. The roster is
    read-only for the assignment passes: they write into the run's own
    priority matrix, never back into the snapshot.

    Attributes
    ----------
    names : tuple[str, ...]
        Short worker labels, used for logging only.
    skill_level : Float2D
        Skill levels, shape ``(n_workers, n_skills)``.
    passion : Int2D
        ``Passion`` values, shape ``(n_workers, n_skills)``.
    disabled : Bool2D
        Hard-disabled work types, shape ``(n_workers, n_work_types)``.
    dead, downed, mental_break, drafted, idle, reckless : Bool1D
        Per-worker state flags.
    """

    names: tuple[str, ...]
    skill_level: Float2D
    passion: Int2D
    disabled: Bool2D
    dead: Bool1D
    downed: Bool1D
    mental_break: Bool1D
    drafted: Bool1D
    idle: Bool1D
    reckless: Bool1D
    n_skills: int = field(init=False)

    def __post_init__(self) -> None:
        n = len(self.names)
        for attr in ("dead", "downed", "mental_break", "drafted", "idle", "reckless"):
            arr = getattr(self, attr)
            if arr.shape != (n,):
                raise ValueError(
                    f"{attr} must be length-{n} 1-D array (got shape={arr.shape})"
                )
        for attr in ("skill_level", "passion", "disabled"):
            arr = getattr(self, attr)
            if arr.ndim != 2 or arr.shape[0] != n:
                raise ValueError(
                    f"{attr} must be a 2-D array with {n} rows "
                    f"(got shape={arr.shape})"
                )
        if self.passion.shape != self.skill_level.shape:
            raise ValueError(
                f"passion shape {self.passion.shape} does not match "
                f"skill_level shape {self.skill_level.shape}"
            )
        self.n_skills = self.skill_level.shape[1]

    @classmethod
    def empty(cls, catalog: WorkCatalog) -> Roster:
        """Zero-worker roster shaped for *catalog*."""
        return cls(
            names=(),
            skill_level=np.zeros((0, catalog.n_skills), dtype=np.float64),
            passion=np.zeros((0, catalog.n_skills), dtype=np.int64),
            disabled=np.zeros((0, catalog.n_work_types), dtype=np.bool_),
            dead=np.zeros(0, dtype=np.bool_),
            downed=np.zeros(0, dtype=np.bool_),
            mental_break=np.zeros(0, dtype=np.bool_),
            drafted=np.zeros(0, dtype=np.bool_),
            idle=np.zeros(0, dtype=np.bool_),
            reckless=np.zeros(0, dtype=np.bool_),
        )

    @property
    def size(self) -> int:
        return len(self.names)

    @property
    def incapacitated(self) -> Bool1D:
        """Dead or downed."""
        return self.dead | self.downed

    @property
    def active(self) -> Bool1D:
        """Able to take normal assignments: not incapacitated, not broken."""
        return ~(self.dead | self.downed | self.mental_break)

    def __repr__(self) -> str:
        return f"Roster(n_workers={self.size}, n_skills={self.n_skills})"
