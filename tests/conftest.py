"""Pytest configuration and fixtures for workmanager tests."""

import os

import pytest

import workmanager.events  # noqa: F401 - register all events
from workmanager import logging
from workmanager.catalog import WorkCatalog
from workmanager.core.registry import clear_registry
from tests.helpers.factories import mock_catalog


@pytest.fixture
def clean_registry():
    """
    Save registry state, clear it for the test, then restore it.

    This fixture should be explicitly requested by tests that define
    synthetic events.

    DO NOT use autouse=True, as it would interfere with tests that rely on
    the built-in passes being registered.
    """
    # noinspection PyProtectedMember
    from workmanager.core.registry import _EVENT_REGISTRY

    saved_events = dict(_EVENT_REGISTRY)
    clear_registry()

    yield

    _EVENT_REGISTRY.clear()
    _EVENT_REGISTRY.update(saved_events)


@pytest.fixture
def catalog() -> WorkCatalog:
    """The default test universe."""
    return mock_catalog()


@pytest.fixture(autouse=True)
def mute_workmanager_logs(caplog):
    # COVERAGE_RUN=true executes every logging branch for accurate coverage
    if os.environ.get("COVERAGE_RUN") == "true":
        level = logging.DEEP_DEBUG
    else:
        level = logging.ERROR

    caplog.set_level(level, logger="workmanager")
    logging.getLogger("workmanager").setLevel(level)
