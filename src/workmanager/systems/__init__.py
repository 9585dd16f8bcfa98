"""Pure rule functions behind the assignment events.

Each function reads an ``AssignmentRun`` and mutates its priority matrix
in-place; the events in ``workmanager.events`` only pull policy values
from the config and call these.
"""

from workmanager.systems.coverage import (
    assign_fallback_work_types,
    assign_idle_workers,
    assign_leftover_work_types,
)
from workmanager.systems.hunting import assign_hunters, prefers_ranged
from workmanager.systems.medical import assign_doctors
from workmanager.systems.mental import assign_mental_break_workers
from workmanager.systems.reset import reset_priorities
from workmanager.systems.skill import (
    assign_workers_by_passion,
    assign_workers_by_skill,
)

__all__ = [
    "assign_doctors",
    "assign_fallback_work_types",
    "assign_hunters",
    "assign_idle_workers",
    "assign_leftover_work_types",
    "assign_mental_break_workers",
    "assign_workers_by_passion",
    "assign_workers_by_skill",
    "prefers_ranged",
    "reset_priorities",
]
