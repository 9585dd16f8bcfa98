"""Reset event: the first pass of every run."""

from __future__ import annotations

from typing import TYPE_CHECKING

from workmanager.core.decorators import event

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun


@event
class ResetPriorities:
    """
    Disable all work types, then enable the always-on ones.

    Rule
    ----
        p_i,j = 1   if i not dead/downed and j ∈ {firefighting, patient,
                    bed rest, basic labor}
              = 0   otherwise
    """

    def execute(self, run: AssignmentRun) -> None:
        from workmanager.systems.reset import reset_priorities

        reset_priorities(run)
