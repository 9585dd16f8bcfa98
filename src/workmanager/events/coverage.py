"""Coverage events: leftover, fallback, idle and mental-break passes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from workmanager.core.decorators import event

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun


@event
class AssignLeftoverWorkTypes:
    """
    Priority 4 coverage for unstaffed general work types.

    Rule
    ----
    ``assign_all_work_types`` on:  every open cell of every active worker.
    off:  one worker per unstaffed type, the one with the fewest
          assignments (first in roster order on ties).
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.coverage import assign_leftover_work_types

        assign_leftover_work_types(run, assign_all=run.config.assign_all_work_types)


@event
class AssignFallbackWorkTypes:
    """
    Priority 4 hauling / cleaning for every active worker, per toggle.
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.coverage import assign_fallback_work_types

        assign_fallback_work_types(
            run,
            hauling=run.config.always_include_hauling,
            cleaning=run.config.always_include_cleaning,
        )


@event
class AssignIdleWorkers:
    """
    Priority 4 on every open general type for idle, undrafted workers.
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.coverage import assign_idle_workers

        assign_idle_workers(run)


@event
class AssignMentalBreakWorkers:
    """
    Override workers in a mental break: fallback types 2, the rest 3.

    Notes
    -----
    • Runs last and overwrites earlier passes
    • Always-on and medical types are left untouched
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.mental import assign_mental_break_workers

        assign_mental_break_workers(run)
