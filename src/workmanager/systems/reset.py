# src/workmanager/systems/reset.py
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from workmanager.logging import getLogger

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log = getLogger("workmanager.events.reset_priorities")


def reset_priorities(run: AssignmentRun) -> None:
    """
    Disable everything, then switch on the always-on work types.

        priority[i, j] = 1   if i not incapacitated and j always-on
                       = 0   otherwise

    Dead and downed workers end with an all-zero row.
    """
    roster = run.roster
    run.priority[:] = 0

    able = ~roster.incapacitated
    grant = able[:, np.newaxis] & run.catalog.always_on_mask[np.newaxis, :]
    grant &= ~roster.disabled
    run.priority[grant] = 1

    log.debug(
        "Reset %d workers (%d incapacitated)",
        run.n_workers,
        int((~able).sum()),
    )
