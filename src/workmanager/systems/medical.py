# src/workmanager/systems/medical.py
from __future__ import annotations

from typing import TYPE_CHECKING

from workmanager.helpers import order_by_descending, tied_top
from workmanager.logging import DEBUG, getLogger

if TYPE_CHECKING:
    from workmanager.assignment import AssignmentRun

log = getLogger("workmanager.events.assign_doctors")


def assign_doctors(run: AssignmentRun, *, multiple_doctors: bool) -> int:
    """
    Make the best medics doctors, then scale up with the patient load.

    Rule
    ----
        C         = { i : active_i ∧ ¬disabled_i,doc }
        threshold = ⌊ max_{i ∈ C} skill_i ⌋
        doctor_i  = 1   for every i ∈ C with skill_i ≥ threshold

    With ``multiple_doctors`` the next-best candidates still at 0 are
    promoted, one at a time, until #doctors ≥ #downed workers.

    Returns
    -------
    int
        Number of workers at priority 1 for medical work.
    """
    j = run.catalog.medical
    if j is None:
        return 0

    roster = run.roster
    candidates = roster.active & ~roster.disabled[:, j]
    if not candidates.any():
        log.debug("No doctor candidates")
        return 0

    skill = run.avg_skill[:, j]
    winners = tied_top(skill, candidates)
    run.priority[winners, j] = 1
    doctor_count = int(winners.sum())

    if log.isEnabledFor(DEBUG):
        log.debug(
            "Max doctoring skill %.1f → %d doctor(s)",
            float(skill[candidates].max()),
            doctor_count,
        )
    for i in winners.nonzero()[0]:
        log.deep("Assigning '%s' as a doctor", roster.names[i])

    if not multiple_doctors:
        return doctor_count

    patient_count = int((roster.downed & ~roster.dead).sum())
    log.debug("Patient count = %d", patient_count)

    for i in order_by_descending(skill):
        if doctor_count >= patient_count:
            break
        if not candidates[i] or run.priority[i, j] != 0:
            continue
        run.set_priority(i, j, 1)
        doctor_count += 1
        log.deep("Assigning '%s' as an extra doctor", roster.names[i])

    return doctor_count
