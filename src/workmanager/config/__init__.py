"""Configuration module for Work Manager."""

from workmanager.config.schema import Config
from workmanager.config.store import SettingsStore
from workmanager.config.validator import ConfigValidator

__all__ = ["Config", "ConfigValidator", "SettingsStore"]
