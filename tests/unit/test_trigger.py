"""Tests for the per-pool recompute trigger."""

import pytest

from workmanager.trigger import STAGGER_PERIOD, PriorityTrigger, stagger_offset_for


def test_offset_is_deterministic_and_in_range():
    for key in ("map-0", "map-1", "a much longer pool identifier"):
        offset = stagger_offset_for(key)
        assert 0 <= offset < STAGGER_PERIOD
        assert offset == stagger_offset_for(key)


def test_default_offset_from_pool_key():
    trigger = PriorityTrigger("map-0")
    assert trigger.stagger_offset == stagger_offset_for("map-0")


def test_derived_offset_gates_ticks():
    trigger = PriorityTrigger("map-1")
    aligned = (STAGGER_PERIOD - stagger_offset_for("map-1")) % STAGGER_PERIOD

    assert trigger.should_run(aligned, 0)
    assert not trigger.should_run(aligned + 1, 0)


def test_explicit_zero_offset_is_kept():
    trigger = PriorityTrigger("map-1", stagger_offset=0)
    assert trigger.stagger_offset == 0
    assert trigger.should_run(0, 0)
    assert not trigger.should_run(1, 0)


def test_invalid_period():
    with pytest.raises(ValueError, match="stagger_period"):
        PriorityTrigger("map-0", stagger_period=0)


def test_runs_only_on_aligned_ticks():
    trigger = PriorityTrigger("map-0", stagger_offset=10)
    calls = []

    assert not trigger.tick(49, 0, lambda: calls.append(49))
    assert trigger.tick(50, 0, lambda: calls.append(50))
    assert calls == [50]


def test_at_most_once_per_hour():
    trigger = PriorityTrigger("map-0", stagger_offset=0)
    calls = []

    assert trigger.tick(0, 5, lambda: calls.append(0))
    assert not trigger.tick(60, 5, lambda: calls.append(60))
    assert trigger.tick(120, 6, lambda: calls.append(120))
    assert calls == [0, 120]
    assert trigger.last_hour == 6


def test_first_hour_zero_still_runs():
    trigger = PriorityTrigger("map-0", stagger_offset=0)
    assert trigger.last_hour is None
    assert trigger.should_run(0, 0)


def test_failed_run_is_retried_next_slot():
    trigger = PriorityTrigger("map-0", stagger_offset=0)

    def boom():
        raise RuntimeError("host exploded")

    with pytest.raises(RuntimeError, match="host exploded"):
        trigger.tick(0, 3, boom)
    assert trigger.last_hour is None

    calls = []
    assert trigger.tick(60, 3, lambda: calls.append(60))
    assert calls == [60]


def test_reset_forgets_hour():
    trigger = PriorityTrigger("map-0", stagger_offset=0)
    trigger.tick(0, 1, lambda: None)
    trigger.reset()
    assert trigger.should_run(60, 1)


def test_pools_are_independent():
    a = PriorityTrigger("a", stagger_offset=0)
    b = PriorityTrigger("b", stagger_offset=30)

    assert a.tick(0, 1, lambda: None)
    assert not b.should_run(0, 1)
    assert b.tick(30, 1, lambda: None)
    assert a.last_hour == b.last_hour == 1
