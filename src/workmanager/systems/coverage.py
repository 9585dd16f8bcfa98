# src/workmanager/systems/coverage.py
"""Low-priority (4) coverage passes: leftover, fallback and idle."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from workmanager.catalog import CLEANING_KEY, HAULING_KEY
from workmanager.logging import DEEP_DEBUG, getLogger
from workmanager.typing import Bool1D, Bool2D

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log_leftover = getLogger("workmanager.events.assign_leftover_work_types")
log_fallback = getLogger("workmanager.events.assign_fallback_work_types")
log_idle = getLogger("workmanager.events.assign_idle_workers")

LEFTOVER = 4


def _fill_open_cells(run: AssignmentRun, rows: Bool1D, cols: Bool1D) -> Bool2D:
    """Set every zero, non-disabled cell in rows × cols to 4."""
    cells = (
        rows[:, np.newaxis]
        & cols[np.newaxis, :]
        & ~run.roster.disabled
        & (run.priority == 0)
    )
    run.priority[cells] = LEFTOVER
    return cells


def _log_cells(log, run: AssignmentRun, cells: Bool2D) -> None:
    if not log.isEnabledFor(DEEP_DEBUG):
        return
    for i, j in np.argwhere(cells):
        name, label = run.label(i, j)
        log.deep("Setting %s's priority of '%s' to %d", name, label, LEFTOVER)


def assign_leftover_work_types(run: AssignmentRun, *, assign_all: bool) -> int:
    """
    Make sure no general work type is left without a worker.

    Rule
    ----
    ``assign_all``:
        p_i,j = 4   for every active i, general j with p_i,j = 0

    otherwise, for each general j (catalog order) with no active worker
    above 0:
        i*      = argmin_{i active, ¬disabled_i,j} #{ k general : p_i,k > 0 }
        p_i*,j  = 4

    Ties go to the first worker in roster order; counts are refreshed
    after every assignment.

    Returns
    -------
    int
        Number of cells set to 4.
    """
    roster = run.roster
    active = roster.active
    if not active.any():
        return 0

    general = run.catalog.general_mask

    if assign_all:
        cells = _fill_open_cells(run, active, general)
        _log_cells(log_leftover, run, cells)
        log_leftover.debug("Assigned all %d open work types", int(cells.sum()))
        return int(cells.sum())

    assigned = 0
    for j in np.flatnonzero(general):
        if (run.priority[active, j] > 0).any():
            continue
        eligible = active & ~roster.disabled[:, j]
        if not eligible.any():
            log_leftover.debug(
                "No worker can take '%s'", run.catalog.work_types[j].label
            )
            continue

        load = np.count_nonzero(run.priority[:, general] > 0, axis=1)
        load = np.where(eligible, load, np.iinfo(np.int64).max)
        i = int(np.argmin(load))
        run.set_priority(i, j, LEFTOVER)
        assigned += 1

        name, label = run.label(i, j)
        log_leftover.deep(
            "Setting %s's priority of '%s' to %d (leftover)", name, label, LEFTOVER
        )

    log_leftover.debug("Covered %d leftover work types", assigned)
    return assigned


def assign_fallback_work_types(
    run: AssignmentRun,
    *,
    hauling: bool,
    cleaning: bool,
) -> int:
    """
    Every active worker hauls and/or cleans at least at priority 4.

    Each toggle covers its own work type; a work type missing from the
    catalog is skipped.

    Returns
    -------
    int
        Number of cells set to 4.
    """
    cols = np.zeros(run.catalog.n_work_types, dtype=np.bool_)
    for enabled, key in ((hauling, HAULING_KEY), (cleaning, CLEANING_KEY)):
        j = run.catalog.find(key)
        if enabled and j is not None:
            cols[j] = True
    if not cols.any():
        return 0

    cells = _fill_open_cells(run, run.roster.active, cols)
    _log_cells(log_fallback, run, cells)
    log_fallback.debug("Assigned %d fallback work types", int(cells.sum()))
    return int(cells.sum())


def assign_idle_workers(run: AssignmentRun) -> int:
    """
    Idle, undrafted workers take every open general work type at 4.

    Returns
    -------
    int
        Number of cells set to 4.
    """
    roster = run.roster
    idle = roster.active & roster.idle & ~roster.drafted
    if not idle.any():
        return 0

    cells = _fill_open_cells(run, idle, run.catalog.general_mask)
    _log_cells(log_idle, run, cells)
    log_idle.debug(
        "Gave %d idle worker(s) %d extra work types",
        int(idle.sum()),
        int(cells.sum()),
    )
    return int(cells.sum())
