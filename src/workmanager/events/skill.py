"""Skill and passion events over the general work types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from workmanager.core.decorators import event

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun


@event
class AssignWorkersBySkill:
    """
    Priority 1 for the top-skilled workers of every skilled general type.

    Each work type is decided independently; ties all win.
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.skill import assign_workers_by_skill

        assign_workers_by_skill(run)


@event
class AssignWorkersByPassion:
    """
    Priority 2 (major) or 3 (minor passion) for still-open general types.
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.skill import assign_workers_by_passion

        assign_workers_by_passion(run)
