# tests/unit/systems/test_hunting.py
"""
Hunter-assignment unit tests.
"""

from __future__ import annotations

import numpy as np
import pytest

from workmanager.catalog import Passion
from workmanager.systems.hunting import assign_hunters, prefers_ranged
from tests.helpers.factories import default_work_types, make_run, mock_catalog, mock_roster


@pytest.mark.parametrize(
    "shoot_passion, melee_passion, shoot, melee, expected",
    [
        (Passion.MAJOR, Passion.MINOR, 1.0, 10.0, True),
        (Passion.NONE, Passion.MINOR, 10.0, 1.0, False),
        (Passion.MINOR, Passion.MINOR, 5.0, 5.0, True),
        (Passion.MINOR, Passion.MINOR, 4.0, 5.0, False),
    ],
    ids=["passion_wins", "melee_passion", "equal_tie_goes_ranged", "melee_level"],
)
def test_prefers_ranged(
    catalog, shoot_passion, melee_passion, shoot, melee, expected
) -> None:
    roster = mock_roster(
        1,
        catalog,
        levels={"Shooting": [shoot], "Melee": [melee]},
        passions={"Shooting": [shoot_passion], "Melee": [melee_passion]},
    )
    assert prefers_ranged(make_run(roster, catalog))[0] == expected


def test_tied_top_hunters_skip_reckless(catalog) -> None:
    roster = mock_roster(
        4,
        catalog,
        levels={"Shooting": [12.0, 12.7, 4.0, 15.0]},
        reckless=[False, False, False, True],
    )
    run = make_run(roster, catalog)

    count = assign_hunters(run)

    assert count == 2
    np.testing.assert_array_equal(run.priority[:, catalog.hunting], [1, 1, 0, 0])


def test_melee_preferring_workers_excluded(catalog) -> None:
    roster = mock_roster(
        2,
        catalog,
        levels={"Shooting": [14.0, 3.0]},
        passions={"Melee": [Passion.MAJOR, Passion.NONE]},
    )
    run = make_run(roster, catalog)

    assign_hunters(run)

    np.testing.assert_array_equal(run.priority[:, catalog.hunting], [0, 1])


def test_inactive_and_disabled_excluded(catalog) -> None:
    roster = mock_roster(
        3,
        catalog,
        levels={"Shooting": [18.0, 16.0, 2.0]},
        mental_break=[True, False, False],
        disabled_types={"Hunting": [False, True, False]},
    )
    run = make_run(roster, catalog)

    assign_hunters(run)

    np.testing.assert_array_equal(run.priority[:, catalog.hunting], [0, 0, 1])


def test_no_candidates_assigns_nothing(catalog) -> None:
    roster = mock_roster(2, catalog, reckless=[True, True])
    run = make_run(roster, catalog)

    assert assign_hunters(run) == 0
    assert not run.priority.any()


def test_universe_without_hunting_type() -> None:
    catalog = mock_catalog([w for w in default_work_types() if w.key != "Hunting"])
    run = make_run(mock_roster(2, catalog), catalog)

    assert assign_hunters(run) == 0
