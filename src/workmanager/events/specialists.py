"""Specialist events: doctors and hunters.

Both use tied-top selection: every candidate within one floor step of the
best average skill wins, not only the single best.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from workmanager.core.decorators import event

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun


@event
class AssignDoctors:
    """
    Assign the best medics, scaling up with the number of patients.

    Rule
    ----
        threshold = ⌊ max skill over active, non-disabled workers ⌋
        doctor    = every candidate with skill ≥ threshold

    With ``assign_multiple_doctors`` the next best are promoted until there
    are at least as many doctors as downed workers.
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.medical import assign_doctors

        assign_doctors(run, multiple_doctors=run.config.assign_multiple_doctors)


@event
class AssignHunters:
    """
    Assign the best ranged workers as hunters.

    Reckless (brawler) workers and workers preferring melee are never
    candidates.
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.hunting import assign_hunters

        assign_hunters(run)
