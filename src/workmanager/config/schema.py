"""
Configuration dataclass for assignment policy.

This module defines the Config dataclass, the immutable settings snapshot
read at the start of every pipeline run. Config instances are created by
SettingsStore.snapshot() or WorkManager.init() after merging defaults,
user config and kwargs.

Design Notes
------------
- Immutable (frozen=True): a run can never see a setting change mid-way
- Memory-efficient (slots=True)
- Simple dataclass, no methods - validation happens in ConfigValidator

See Also
--------
ConfigValidator : Centralized validation for configuration parameters
SettingsStore : Mutable load/save boundary producing Config snapshots
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Config:
    """
    Immutable policy settings for one assignment run.

    Parameters
    ----------
    update_interval : int, optional
        Recompute interval in the range [1, 120]. Persisted and validated,
        but runs are gated on simulated-hour changes, not on this value.
        Default: 24.
    assign_multiple_doctors : bool, optional
        Promote extra doctors until there is one per downed worker.
        Default: True.
    assign_all_work_types : bool, optional
        Give every active worker priority 4 on every remaining general work
        type, instead of covering only unstaffed work types. Default: False.
    always_include_hauling : bool, optional
        Every active worker hauls at least at priority 4. Default: True.
    always_include_cleaning : bool, optional
        Every active worker cleans at least at priority 4. Default: True.

    Examples
    --------
    >>> from workmanager.config import Config
    >>> cfg = Config(assign_all_work_types=True)
    >>> cfg.assign_multiple_doctors
    True

    Config is immutable:

    >>> cfg.update_interval = 12  # doctest: +SKIP
    FrozenInstanceError: cannot assign to field 'update_interval'
    """

    update_interval: int = 24
    assign_multiple_doctors: bool = True
    assign_all_work_types: bool = False
    always_include_hauling: bool = True
    always_include_cleaning: bool = True
