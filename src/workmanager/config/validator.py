"""Centralized configuration validation for Work Manager."""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any


class ConfigValidator:
    """
    Centralized validation for assignment configuration.

    All validation happens once when settings are loaded or changed, to
    ensure:
    - Type correctness
    - Valid parameter ranges
    - Relationship constraints between parameters
    - Clear error messages with actionable feedback
    """

    VALID_LOG_LEVELS = {"DEEP_DEBUG", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    INT_PARAMS = ("update_interval",)
    BOOL_PARAMS = (
        "assign_multiple_doctors",
        "assign_all_work_types",
        "always_include_hauling",
        "always_include_cleaning",
    )

    @staticmethod
    def validate_config(cfg: dict[str, Any]) -> None:
        """
        Validate all configuration parameters.

        Parameters
        ----------
        cfg : dict
            Configuration dictionary to validate.

        Raises
        ------
        ValueError
            If any validation check fails.
        """
        ConfigValidator._validate_keys(cfg)
        ConfigValidator._validate_types(cfg)
        ConfigValidator._validate_ranges(cfg)
        ConfigValidator._validate_relationships(cfg)

        if "logging" in cfg:
            ConfigValidator._validate_logging(cfg["logging"])

        if cfg.get("pipeline_path") is not None:
            ConfigValidator.validate_pipeline_path(cfg["pipeline_path"])

    @staticmethod
    def _validate_keys(cfg: dict[str, Any]) -> None:
        """Reject unknown top-level keys (usually typos)."""
        known = {
            *ConfigValidator.INT_PARAMS,
            *ConfigValidator.BOOL_PARAMS,
            "logging",
            "pipeline_path",
        }
        unknown = sorted(set(cfg) - known)
        if unknown:
            raise ValueError(
                f"Unknown config parameter(s) {unknown}. "
                f"Valid parameters: {sorted(known)}"
            )

    @staticmethod
    def _validate_types(cfg: dict[str, Any]) -> None:
        """
        Ensure correct types for configuration parameters.

        Raises
        ------
        ValueError
            If any parameter has incorrect type.
        """
        # bool is a subclass of int; reject it for integer settings
        for key in ConfigValidator.INT_PARAMS:
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(
                    f"Config parameter '{key}' must be int, got {type(val).__name__}"
                )

        for key in ConfigValidator.BOOL_PARAMS:
            if key not in cfg:
                continue
            val = cfg[key]
            if not isinstance(val, bool):
                raise ValueError(
                    f"Config parameter '{key}' must be bool, got {type(val).__name__}"
                )

        if "pipeline_path" in cfg:
            val = cfg["pipeline_path"]
            if val is not None and not isinstance(val, (str, Path)):
                raise ValueError(
                    f"Config parameter 'pipeline_path' must be str or None, "
                    f"got {type(val).__name__}"
                )

    @staticmethod
    def _validate_ranges(cfg: dict[str, Any]) -> None:
        """
        Ensure parameters are in valid ranges.

        Raises
        ------
        ValueError
            If any parameter is out of valid range.
        """
        constraints = {
            "update_interval": (1, 120),
        }

        for key, (min_val, max_val) in constraints.items():
            if key not in cfg:
                continue
            val = cfg[key]
            if val < min_val:
                raise ValueError(
                    f"Config parameter '{key}' must be >= {min_val}, got {val}"
                )
            if val > max_val:
                raise ValueError(
                    f"Config parameter '{key}' must be <= {max_val}, got {val}"
                )

    @staticmethod
    def _validate_relationships(cfg: dict[str, Any]) -> None:
        """Warn about legal but unusual combinations."""
        if (
            cfg.get("always_include_hauling") is False
            and cfg.get("always_include_cleaning") is False
            and cfg.get("assign_all_work_types") is not True
        ):
            warnings.warn(
                "always_include_hauling and always_include_cleaning are both off "
                "and assign_all_work_types is off. Hauling and cleaning will only "
                "be covered by a single leftover worker each.",
                UserWarning,
                stacklevel=3,
            )

    @staticmethod
    def _validate_logging(log_config: dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Parameters
        ----------
        log_config : dict
            Logging configuration dictionary with keys:
            - default_level: str (e.g., 'INFO', 'DEBUG')
            - events: dict[str, str] (per-event overrides)

        Raises
        ------
        ValueError
            If logging configuration is invalid.
        """
        if not isinstance(log_config, dict):
            raise ValueError(
                f"Logging configuration must be dict, got {type(log_config).__name__}"
            )

        if "default_level" in log_config:
            level = log_config["default_level"]
            if not isinstance(level, str):
                raise ValueError(
                    f"Logging default_level must be str, got {type(level).__name__}"
                )
            if level.upper() not in ConfigValidator.VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid log level '{level}'. "
                    f"Must be one of {ConfigValidator.VALID_LOG_LEVELS}"
                )

        if "events" in log_config:
            events = log_config["events"]
            if not isinstance(events, dict):
                raise ValueError(
                    f"Logging events must be dict, got {type(events).__name__}"
                )

            for event_name, level in events.items():
                if not isinstance(event_name, str):
                    raise ValueError(
                        f"Event name must be str, got {type(event_name).__name__}"
                    )
                if not isinstance(level, str):
                    raise ValueError(
                        f"Log level for event '{event_name}' must be str, "
                        f"got {type(level).__name__}"
                    )
                if level.upper() not in ConfigValidator.VALID_LOG_LEVELS:
                    raise ValueError(
                        f"Invalid log level '{level}' for event '{event_name}'. "
                        f"Must be one of {ConfigValidator.VALID_LOG_LEVELS}"
                    )

    @staticmethod
    def validate_pipeline_path(pipeline_path: str | Path) -> None:
        """
        Validate pipeline path exists and is readable.

        Raises
        ------
        ValueError
            If path does not exist or is not a file.
        """
        path = Path(pipeline_path)

        if not path.exists():
            raise ValueError(f"Pipeline path '{pipeline_path}' does not exist")

        if not path.is_file():
            raise ValueError(f"Pipeline path '{pipeline_path}' is not a file")

        if path.suffix not in (".yml", ".yaml"):
            warnings.warn(
                f"Pipeline path '{pipeline_path}' does not have .yml/.yaml extension",
                UserWarning,
                stacklevel=2,
            )
