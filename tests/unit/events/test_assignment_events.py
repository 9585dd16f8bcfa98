"""Tests for the built-in assignment events.

Each event only pulls its policy from ``run.config`` and calls the rule
function; these tests check that wiring.
"""

import numpy as np
import pytest

from workmanager.config import Config
from workmanager.core.registry import get_event, list_events
from workmanager.events import (
    AssignDoctors,
    AssignFallbackWorkTypes,
    AssignHunters,
    AssignIdleWorkers,
    AssignLeftoverWorkTypes,
    AssignMentalBreakWorkers,
    AssignWorkersByPassion,
    AssignWorkersBySkill,
    ResetPriorities,
)
from tests.helpers.factories import make_run, mock_roster

BUILT_IN = {
    "reset_priorities": ResetPriorities,
    "assign_doctors": AssignDoctors,
    "assign_hunters": AssignHunters,
    "assign_workers_by_skill": AssignWorkersBySkill,
    "assign_workers_by_passion": AssignWorkersByPassion,
    "assign_leftover_work_types": AssignLeftoverWorkTypes,
    "assign_fallback_work_types": AssignFallbackWorkTypes,
    "assign_idle_workers": AssignIdleWorkers,
    "assign_mental_break_workers": AssignMentalBreakWorkers,
}


@pytest.mark.parametrize("name, cls", BUILT_IN.items(), ids=list(BUILT_IN))
def test_built_in_events_registered(name, cls):
    assert name in list_events()
    assert get_event(name) is cls
    assert cls.name == name


def test_event_docstrings_preserved():
    assert "best medics" in AssignDoctors.__doc__


class TestConfigWiring:
    def _doctor_run(self, catalog, **cfg):
        roster = mock_roster(
            3,
            catalog,
            levels={"Medicine": [9.0, 5.0, 0.0]},
            downed=[False, False, True],
        )
        return make_run(roster, catalog, Config(**cfg))

    def test_doctors_single(self, catalog):
        run = self._doctor_run(catalog, assign_multiple_doctors=False)
        AssignDoctors().execute(run)
        np.testing.assert_array_equal(run.priority[:, catalog.medical], [1, 0, 0])

    def test_doctors_multiple(self, catalog):
        run = self._doctor_run(catalog, assign_multiple_doctors=True)
        AssignDoctors().execute(run)
        np.testing.assert_array_equal(run.priority[:, catalog.medical], [1, 0, 0])

        # two patients → second doctor
        roster = mock_roster(
            4,
            catalog,
            levels={"Medicine": [9.0, 5.0, 0.0, 0.0]},
            downed=[False, False, True, True],
        )
        run = make_run(roster, catalog, Config(assign_multiple_doctors=True))
        AssignDoctors().execute(run)
        np.testing.assert_array_equal(
            run.priority[:, catalog.medical], [1, 1, 0, 0]
        )

    @pytest.mark.parametrize("assign_all, expected", [(False, 1), (True, 2)])
    def test_leftover_mode(self, catalog, assign_all, expected):
        run = make_run(
            mock_roster(2, catalog), catalog, Config(assign_all_work_types=assign_all)
        )
        AssignLeftoverWorkTypes().execute(run)
        research = catalog.index_of("Research")
        assert np.count_nonzero(run.priority[:, research]) == expected

    def test_fallback_toggles(self, catalog):
        cfg = Config(always_include_hauling=False, always_include_cleaning=True)
        run = make_run(mock_roster(2, catalog), catalog, cfg)
        AssignFallbackWorkTypes().execute(run)
        assert not run.priority[:, catalog.index_of("Hauling")].any()
        assert (run.priority[:, catalog.index_of("Cleaning")] == 4).all()

    def test_remaining_events_execute(self, catalog):
        roster = mock_roster(
            3,
            catalog,
            idle=[True, False, False],
            mental_break=[False, True, False],
            levels={
                "Shooting": [5.0, 1.0, 0.0],
                "Cooking": [2.0, 1.0, 0.0],
                "Mining": [0.0, 0.0, 5.0],
            },
            passions={"Mining": [2, 0, 0]},
        )
        run = make_run(roster, catalog)
        for cls in (
            ResetPriorities,
            AssignHunters,
            AssignWorkersBySkill,
            AssignWorkersByPassion,
            AssignIdleWorkers,
            AssignMentalBreakWorkers,
        ):
            cls().execute(run)

        assert run.priority[0, catalog.hunting] == 1
        assert run.priority[0, catalog.index_of("Cooking")] == 1
        assert run.priority[0, catalog.index_of("Mining")] == 2
        assert run.priority[0, catalog.index_of("Hauling")] == 4
        assert run.priority[1, catalog.index_of("Hauling")] == 2
        assert run.priority[1, catalog.index_of("Cooking")] == 3
