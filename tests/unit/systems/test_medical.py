# tests/unit/systems/test_medical.py
"""
Doctor-assignment unit tests.
"""

from __future__ import annotations

import numpy as np
import pytest

from workmanager.assignment import AssignmentRun
from workmanager.systems.medical import assign_doctors
from tests.helpers.factories import default_work_types, make_run, mock_catalog, mock_roster


def _doctor_column(run):
    return run.priority[:, run.catalog.medical]


def test_tied_top_doctors(catalog) -> None:
    """Skills 5.0 / 8.0 / 8.5 → threshold 8 → two doctors."""
    roster = mock_roster(3, catalog, levels={"Medicine": [5.0, 8.0, 8.5]})
    run = make_run(roster, catalog)

    count = assign_doctors(run, multiple_doctors=False)

    assert count == 2
    np.testing.assert_array_equal(_doctor_column(run), [0, 1, 1])


def test_threshold_over_active_workers_only(catalog) -> None:
    roster = mock_roster(
        3,
        catalog,
        levels={"Medicine": [15.0, 6.2, 3.0]},
        downed=[True, False, False],
    )
    run = make_run(roster, catalog)

    assign_doctors(run, multiple_doctors=False)

    np.testing.assert_array_equal(_doctor_column(run), [0, 1, 0])


def test_disabled_worker_is_never_a_doctor(catalog) -> None:
    roster = mock_roster(
        2,
        catalog,
        levels={"Medicine": [20.0, 4.0]},
        disabled_types={"Doctor": [True, False]},
    )
    run = make_run(roster, catalog)

    assign_doctors(run, multiple_doctors=True)

    np.testing.assert_array_equal(_doctor_column(run), [0, 1])


def test_scales_with_patient_count(catalog) -> None:
    """5 active + 3 downed: best wins, then the next two are promoted."""
    roster = mock_roster(
        8,
        catalog,
        levels={"Medicine": [10.0, 6.0, 5.5, 3.0, 2.0, 20.0, 20.0, 20.0]},
        downed=[False] * 5 + [True] * 3,
    )
    run = make_run(roster, catalog)

    count = assign_doctors(run, multiple_doctors=True)

    assert count == 3
    np.testing.assert_array_equal(_doctor_column(run), [1, 1, 1, 0, 0, 0, 0, 0])


def test_no_promotion_when_disabled_setting(catalog) -> None:
    roster = mock_roster(
        4,
        catalog,
        levels={"Medicine": [10.0, 6.0, 5.0, 0.0]},
        downed=[False, False, False, True],
    )
    run = make_run(roster, catalog)

    assert assign_doctors(run, multiple_doctors=False) == 1


def test_tied_doctors_already_cover_patients(catalog) -> None:
    roster = mock_roster(
        4,
        catalog,
        levels={"Medicine": [7.1, 7.9, 2.0, 0.0]},
        downed=[False, False, False, True],
    )
    run = make_run(roster, catalog)

    assert assign_doctors(run, multiple_doctors=True) == 2
    assert _doctor_column(run)[2] == 0


def test_more_patients_than_candidates(catalog) -> None:
    roster = mock_roster(
        4,
        catalog,
        levels={"Medicine": [5.0, 1.0, 0.0, 0.0]},
        downed=[False, False, True, True],
        mental_break=[False, False, False, False],
    )
    run = make_run(roster, catalog)

    count = assign_doctors(run, multiple_doctors=True)

    assert count == 2
    np.testing.assert_array_equal(_doctor_column(run), [1, 1, 0, 0])


def test_dead_workers_are_not_patients(catalog) -> None:
    roster = mock_roster(
        3,
        catalog,
        levels={"Medicine": [9.0, 4.0, 0.0]},
        dead=[False, False, True],
        downed=[False, False, True],
    )
    run = make_run(roster, catalog)

    assert assign_doctors(run, multiple_doctors=True) == 1


@pytest.mark.parametrize("flag", ["dead", "downed", "mental_break"])
def test_no_candidates(catalog, flag) -> None:
    roster = mock_roster(2, catalog, **{flag: [True, True]})
    run = make_run(roster, catalog)

    assert assign_doctors(run, multiple_doctors=True) == 0
    assert not _doctor_column(run).any()


def test_universe_without_medical_type() -> None:
    catalog = mock_catalog([w for w in default_work_types() if w.key != "Doctor"])
    run = make_run(mock_roster(2, catalog), catalog)

    assert assign_doctors(run, multiple_doctors=True) == 0
    assert not run.priority.any()


def test_promotions_write_through_run(catalog, monkeypatch) -> None:
    roster = mock_roster(
        4,
        catalog,
        levels={"Medicine": [10.0, 6.0, 5.0, 0.0]},
        downed=[False, False, True, True],
    )
    run = make_run(roster, catalog)
    writes = []
    original = AssignmentRun.set_priority

    def record(self, worker, work_type, value):
        writes.append((worker, work_type, value))
        original(self, worker, work_type, value)

    monkeypatch.setattr(AssignmentRun, "set_priority", record)

    assert assign_doctors(run, multiple_doctors=True) == 2
    assert writes == [(1, catalog.medical, 1)]
