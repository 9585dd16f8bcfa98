"""Event classes for the assignment pipeline.

Events are auto-registered via __init_subclass__ hook and composed into a
Pipeline for execution. Each event wraps a rule function from
``workmanager.systems``:

- reset.py       → systems/reset.py
- specialists.py → systems/medical.py, systems/hunting.py
- skill.py       → systems/skill.py
- coverage.py    → systems/coverage.py, systems/mental.py
"""

# Import all events to trigger auto-registration
from workmanager.events.coverage import (
    AssignFallbackWorkTypes,
    AssignIdleWorkers,
    AssignLeftoverWorkTypes,
    AssignMentalBreakWorkers,
)
from workmanager.events.reset import ResetPriorities
from workmanager.events.skill import AssignWorkersByPassion, AssignWorkersBySkill
from workmanager.events.specialists import AssignDoctors, AssignHunters

__all__ = [
    "AssignDoctors",
    "AssignFallbackWorkTypes",
    "AssignHunters",
    "AssignIdleWorkers",
    "AssignLeftoverWorkTypes",
    "AssignMentalBreakWorkers",
    "AssignWorkersByPassion",
    "AssignWorkersBySkill",
    "ResetPriorities",
]
