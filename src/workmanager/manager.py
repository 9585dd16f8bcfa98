# src/workmanager/manager.py
from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Sequence

import yaml

from workmanager import logging as wm_logging
from workmanager.assignment import PriorityAssignment, assign_priorities
from workmanager.catalog import WorkCatalog, WorkType
from workmanager.config import Config, ConfigValidator, SettingsStore
from workmanager.core.default_pipeline import create_default_pipeline
from workmanager.core.pipeline import Pipeline
from workmanager.host import HostWorker, publish, snapshot_workers
from workmanager.trigger import PriorityTrigger

__all__ = ["WorkManager"]

log = wm_logging.getLogger(__name__)


# helpers
# ---------------------------------------------------------------------------
def _read_yaml(obj: str | Path | Mapping[str, Any] | None) -> Dict[str, Any]:
    """Return a plain dict – {} if *obj* is None."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    p = Path(obj)
    with p.open("rt", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"config root must be mapping, got {type(data)!r}")
    return dict(data)


def _package_defaults() -> Dict[str, Any]:
    """Load workmanager/defaults.yml"""
    txt = resources.files("workmanager").joinpath("defaults.yml").read_text()
    return yaml.safe_load(txt) or {}


# WorkManager
# ---------------------------------------------------------------------
@dataclass(slots=True)
class WorkManager:
    """
    Facade that keeps the work priorities of one or more worker pools
    up to date.

    One call to `on_tick` per simulation tick and pool → at most one
    `recompute` per pool and simulated hour.
    """

    catalog: WorkCatalog
    settings: SettingsStore
    pipeline: Pipeline
    triggers: dict[str, PriorityTrigger] = field(default_factory=dict)

    # Constructor
    # ---------------------------------------------------------------------
    @classmethod
    def init(
        cls,
        config: str | Path | Mapping[str, Any] | None = None,
        *,
        work_types: Iterable[WorkType],
        **overrides: Any,  # anything here wins last
    ) -> "WorkManager":
        """
        Build a WorkManager.

        Order of precedence (later overrides earlier):

            1. package defaults  (workmanager/defaults.yml)
            2. *config*  (Path / str / Mapping / None)
            3. explicit keyword arguments (**overrides)

        Raises
        ------
        ValueError
            If the merged configuration is invalid.
        KeyError
            If an always-on or fallback work type is missing from
            *work_types*, or the pipeline names an unknown event.
        """
        cfg_dict: Dict[str, Any] = _package_defaults()
        cfg_dict.update(_read_yaml(config))
        cfg_dict.update(overrides)

        ConfigValidator.validate_config(cfg_dict)

        wm_logging.configure(cfg_dict.pop("logging", None) or {})

        pipeline_path = cfg_dict.pop("pipeline_path", None)
        if pipeline_path is not None:
            import workmanager.events  # noqa: F401 - register built-in passes

            pipeline = Pipeline.from_yaml(pipeline_path)
        else:
            pipeline = create_default_pipeline()

        catalog = WorkCatalog.from_work_types(work_types)
        settings = SettingsStore(Config(**cfg_dict))

        log.info(
            "Work manager ready: %d work types, %d passes",
            catalog.n_work_types,
            len(pipeline),
        )
        return cls(catalog=catalog, settings=settings, pipeline=pipeline)

    # Settings
    # ---------------------------------------------------------------------
    @property
    def config(self) -> Config:
        """Settings snapshot the next run will use."""
        return self.settings.snapshot()

    def update_settings(self, **changes: Any) -> None:
        """Change settings; effective from the next run, never mid-run."""
        self.settings.update(**changes)

    # Runs
    # ---------------------------------------------------------------------
    def assign(self, workers: Sequence[HostWorker]) -> PriorityAssignment:
        """Compute priorities for *workers* without touching them."""
        roster = snapshot_workers(workers, self.catalog)
        return assign_priorities(
            roster, self.catalog, self.config, pipeline=self.pipeline
        )

    def recompute(self, workers: Sequence[HostWorker]) -> PriorityAssignment:
        """Snapshot, assign and publish back to *workers*."""
        assignment = self.assign(workers)
        publish(assignment, workers)
        return assignment

    def trigger_for(self, pool_key: str) -> PriorityTrigger:
        """This pool's trigger, created on first use."""
        trigger = self.triggers.get(pool_key)
        if trigger is None:
            trigger = PriorityTrigger(pool_key)
            self.triggers[pool_key] = trigger
        return trigger

    def on_tick(
        self,
        pool_key: str,
        tick: int,
        hour: int,
        get_workers: Callable[[], Sequence[HostWorker]],
    ) -> bool:
        """
        Host tick callback for one pool.

        *get_workers* is only called when a run is due, so the pool is
        queried at most once per simulated hour.

        Returns
        -------
        bool
            Whether priorities were recomputed on this tick.
        """
        return self.trigger_for(pool_key).tick(
            tick, hour, lambda: self.recompute(get_workers())
        )

    def __repr__(self) -> str:
        return (
            f"WorkManager(n_work_types={self.catalog.n_work_types}, "
            f"n_pools={len(self.triggers)})"
        )
