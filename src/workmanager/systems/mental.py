# src/workmanager/systems/mental.py
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from workmanager.logging import getLogger

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log = getLogger("workmanager.events.assign_mental_break_workers")


def assign_mental_break_workers(run: AssignmentRun) -> int:
    """
    Force degraded participation on workers in a mental break.

    Rule
    ----
        p_i,j = 2   if j is a fallback type (hauling, cleaning)
              = 3   otherwise

    for every broken i (not dead, not downed) and every j outside the
    always-on and medical types, skipping disabled cells. Overwrites
    whatever earlier passes assigned.

    Returns
    -------
    int
        Number of workers overridden.
    """
    roster = run.roster
    broken = roster.mental_break & ~roster.dead & ~roster.downed
    if not broken.any():
        return 0

    domain = run.catalog.mental_domain_mask
    values = np.where(run.catalog.fallback_mask, 2, 3)
    cells = broken[:, np.newaxis] & domain[np.newaxis, :] & ~roster.disabled
    run.priority[cells] = np.broadcast_to(values, run.priority.shape)[cells]

    for i in broken.nonzero()[0]:
        log.deep("Overriding priorities of '%s' (mental break)", roster.names[i])
    log.debug("Overrode %d worker(s) in a mental break", int(broken.sum()))
    return int(broken.sum())
