"""Tests for the Roster snapshot."""

import numpy as np
import pytest

from workmanager.roster import Roster
from tests.helpers.factories import mock_roster


def test_empty_roster_shapes(catalog):
    roster = Roster.empty(catalog)
    assert roster.size == 0
    assert roster.skill_level.shape == (0, catalog.n_skills)
    assert roster.disabled.shape == (0, catalog.n_work_types)
    assert roster.n_skills == catalog.n_skills


def test_active_and_incapacitated(catalog):
    roster = mock_roster(
        4,
        catalog,
        dead=[False, True, False, False],
        downed=[False, False, True, False],
        mental_break=[False, False, False, True],
    )
    np.testing.assert_array_equal(roster.incapacitated, [False, True, True, False])
    np.testing.assert_array_equal(roster.active, [True, False, False, False])


@pytest.mark.parametrize("flag", ["dead", "downed", "idle", "reckless"])
def test_flag_length_mismatch(catalog, flag):
    with pytest.raises(ValueError, match=flag):
        mock_roster(3, catalog, **{flag: np.zeros(2, dtype=bool)})


def test_matrix_row_mismatch(catalog):
    with pytest.raises(ValueError, match="disabled"):
        mock_roster(3, catalog, disabled=np.zeros((2, catalog.n_work_types), bool))


def test_passion_shape_must_match_levels(catalog):
    with pytest.raises(ValueError, match="passion shape"):
        mock_roster(2, catalog, passion=np.zeros((2, 1), dtype=np.int64))


def test_repr(catalog):
    assert repr(mock_roster(2, catalog)) == "Roster(n_workers=2, n_skills=8)"
