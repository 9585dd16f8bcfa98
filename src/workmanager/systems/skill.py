# src/workmanager/systems/skill.py
"""Skill- and passion-driven assignment over the general work types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from workmanager.catalog import Passion
from workmanager.helpers import tied_top
from workmanager.logging import DEEP_DEBUG, getLogger

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log_skill = getLogger("workmanager.events.assign_workers_by_skill")
log_passion = getLogger("workmanager.events.assign_workers_by_passion")

PASSION_PRIORITY = {Passion.MAJOR: 2, Passion.MINOR: 3}


def assign_workers_by_skill(run: AssignmentRun) -> int:
    """
    Give each skilled general work type to its best workers.

    Rule (per work type j with at least one relevant skill)
    ----
        C_j       = { i : active_i ∧ ¬disabled_i,j }
        threshold = ⌊ max_{i ∈ C_j} skill_i,j ⌋
        p_i,j     = 1   for i ∈ C_j with skill_i,j ≥ threshold and p_i,j = 0

    Work types are handled independently; an empty C_j assigns nothing.

    Returns
    -------
    int
        Number of cells set to 1.
    """
    roster = run.roster
    active = roster.active
    assigned = 0

    for j in np.flatnonzero(run.catalog.skilled_general_mask):
        candidates = active & ~roster.disabled[:, j]
        if not candidates.any():
            continue
        skill = run.avg_skill[:, j]
        winners = tied_top(skill, candidates) & (run.priority[:, j] == 0)
        run.priority[winners, j] = 1
        assigned += int(winners.sum())

        if log_skill.isEnabledFor(DEEP_DEBUG):
            for i in winners.nonzero()[0]:
                name, label = run.label(i, j)
                log_skill.deep(
                    "Setting %s's priority of '%s' to 1 (skill = %.1f, max = %.1f)",
                    name,
                    label,
                    skill[i],
                    skill[candidates].max(),
                )

    log_skill.debug("Assigned %d work types by skill", assigned)
    return assigned


def assign_workers_by_passion(run: AssignmentRun) -> int:
    """
    Fill still-open general work types from passions.

    Rule
    ----
        p_i,j = 2   if max relevant passion is MAJOR
              = 3   if MINOR
              (unchanged otherwise)

    only for active workers with p_i,j = 0 and j not disabled.

    Returns
    -------
    int
        Number of cells set.
    """
    roster = run.roster
    open_cells = (
        roster.active[:, np.newaxis]
        & run.catalog.general_mask[np.newaxis, :]
        & ~roster.disabled
        & (run.priority == 0)
    )

    assigned = 0
    for passion, value in PASSION_PRIORITY.items():
        cells = open_cells & (run.max_passion == passion)
        run.priority[cells] = value
        assigned += int(cells.sum())

        if log_passion.isEnabledFor(DEEP_DEBUG):
            for i, j in np.argwhere(cells):
                name, label = run.label(i, j)
                log_passion.deep(
                    "Setting %s's priority of '%s' to %d (passion = %s)",
                    name,
                    label,
                    value,
                    passion.name,
                )

    log_passion.debug("Assigned %d work types by passion", assigned)
    return assigned
