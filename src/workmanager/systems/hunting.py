# src/workmanager/systems/hunting.py
from __future__ import annotations

from typing import TYPE_CHECKING

from workmanager.catalog import MELEE_SKILL, SHOOTING_SKILL
from workmanager.helpers import tied_top
from workmanager.logging import getLogger
from workmanager.typing import Bool1D

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log = getLogger("workmanager.events.assign_hunters")


def prefers_ranged(run: AssignmentRun) -> Bool1D:
    """
    Workers leaning towards ranged combat.

        passion_shoot > passion_melee
        ∨ (passion_shoot = passion_melee ∧ level_shoot ≥ level_melee)
    """
    roster = run.roster
    s = run.catalog.skill_index(SHOOTING_SKILL)
    m = run.catalog.skill_index(MELEE_SKILL)
    sp, mp = roster.passion[:, s], roster.passion[:, m]
    sl, ml = roster.skill_level[:, s], roster.skill_level[:, m]
    return (sp > mp) | ((sp == mp) & (sl >= ml))


def assign_hunters(run: AssignmentRun) -> int:
    """
    Make the best ranged, non-reckless workers hunters.

    Rule
    ----
        C         = { i : active_i ∧ ¬disabled_i,hunt ∧ ¬reckless_i
                          ∧ prefers_ranged_i }
        threshold = ⌊ max_{i ∈ C} skill_i ⌋
        hunter_i  = 1   for every i ∈ C with skill_i ≥ threshold

    Returns
    -------
    int
        Number of hunters assigned.
    """
    j = run.catalog.hunting
    if j is None:
        return 0

    roster = run.roster
    candidates = (
        roster.active & ~roster.disabled[:, j] & ~roster.reckless & prefers_ranged(run)
    )
    if not candidates.any():
        log.debug("No hunter candidates")
        return 0

    skill = run.avg_skill[:, j]
    winners = tied_top(skill, candidates)
    run.priority[winners, j] = 1

    log.debug("Max hunting skill %.1f", float(skill[candidates].max()))
    for i in winners.nonzero()[0]:
        log.deep("Assigning '%s' as a hunter", roster.names[i])

    return int(winners.sum())
