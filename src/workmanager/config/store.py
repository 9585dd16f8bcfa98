"""
Mutable settings boundary with load/save to persistent storage.

The pipeline only ever sees frozen :class:`Config` snapshots. This store
is the one place settings change (e.g. from a settings screen), and the
change takes effect the next time a snapshot is taken.

Persisted file layout (YAML)::

    UpdateFrequency: 24
    AssignMultipleDoctors: true
    AssignAllWorkTypes: false
    AllHaulers: true
    AllCleaners: true
"""

from __future__ import annotations

from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from workmanager.config.schema import Config
from workmanager.config.validator import ConfigValidator
from workmanager.logging import getLogger

__all__ = ["PERSISTED_KEYS", "SettingsStore"]

log = getLogger(__name__)

# persisted name -> Config field
PERSISTED_KEYS = {
    "UpdateFrequency": "update_interval",
    "AssignMultipleDoctors": "assign_multiple_doctors",
    "AssignAllWorkTypes": "assign_all_work_types",
    "AllHaulers": "always_include_hauling",
    "AllCleaners": "always_include_cleaning",
}


class SettingsStore:
    """
    Process-wide, mutable holder of the current settings.

    Examples
    --------
    >>> store = SettingsStore.load("settings.yml")
    >>> store.update(assign_all_work_types=True)
    >>> store.save("settings.yml")
    >>> cfg = store.snapshot()
    """

    __slots__ = ("_config",)

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> SettingsStore:
        """Build from Config field names, validating first."""
        cfg = {k: v for k, v in values.items() if k in _FIELD_NAMES}
        ConfigValidator.validate_config(cfg)
        return cls(Config(**cfg))

    @classmethod
    def load(cls, path: str | Path) -> SettingsStore:
        """
        Read persisted settings; a missing file yields defaults.

        Keys absent from the file keep their default values.

        Raises
        ------
        TypeError
            If the file root is not a mapping.
        ValueError
            If a persisted value fails validation.
        """
        p = Path(path)
        if not p.exists():
            log.info("No settings file at '%s' – using defaults", p)
            return cls()
        with p.open("rt", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, Mapping):
            raise TypeError(f"settings root must be mapping, got {type(data)!r}")

        values = {
            PERSISTED_KEYS[k]: v for k, v in data.items() if k in PERSISTED_KEYS
        }
        ignored = sorted(set(data) - set(PERSISTED_KEYS))
        if ignored:
            log.warning("Ignoring unknown settings keys in '%s': %s", p, ignored)
        return cls.from_mapping(values)

    def save(self, path: str | Path) -> None:
        """Write the current settings under their persisted names."""
        current = asdict(self._config)
        data = {name: current[attr] for name, attr in PERSISTED_KEYS.items()}
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("wt", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh, sort_keys=False)
        log.debug("Saved settings to '%s'", p)

    def update(self, **changes: Any) -> None:
        """
        Change one or more settings; effective from the next snapshot.

        Raises
        ------
        ValueError
            If a key is unknown or a value fails validation.
        """
        unknown = sorted(set(changes) - _FIELD_NAMES)
        if unknown:
            raise ValueError(f"Unknown setting(s) {unknown}")
        merged = replace(self._config, **changes)
        ConfigValidator.validate_config(asdict(merged))
        self._config = merged

    def snapshot(self) -> Config:
        """Frozen settings for one run."""
        return self._config

    def __repr__(self) -> str:
        return f"SettingsStore({self._config!r})"


_FIELD_NAMES = {f.name for f in fields(Config)}
