"""Tests for configuration validation."""

import warnings

import pytest

from workmanager.config import ConfigValidator


class TestKeyValidation:
    def test_known_keys_accepted(self):
        ConfigValidator._validate_keys(
            {"update_interval": 12, "logging": {}, "pipeline_path": None}
        )

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown config parameter"):
            ConfigValidator.validate_config({"asign_all_work_types": True})


class TestTypeValidation:
    """Test type checking for configuration parameters."""

    def test_integer_params_accept_int(self):
        ConfigValidator._validate_types({"update_interval": 24})

    @pytest.mark.parametrize("value", [24.0, "24", True])
    def test_integer_params_reject_non_int(self, value):
        with pytest.raises(ValueError, match="must be int"):
            ConfigValidator._validate_types({"update_interval": value})

    @pytest.mark.parametrize("key", ConfigValidator.BOOL_PARAMS)
    def test_bool_params_reject_int(self, key):
        with pytest.raises(ValueError, match="must be bool"):
            ConfigValidator._validate_types({key: 1})

    def test_pipeline_path_accepts_string_or_none(self):
        ConfigValidator._validate_types({"pipeline_path": "/path/to/pipeline.yml"})
        ConfigValidator._validate_types({"pipeline_path": None})

    def test_pipeline_path_rejects_int(self):
        with pytest.raises(ValueError, match="pipeline_path"):
            ConfigValidator._validate_types({"pipeline_path": 3})


class TestRangeValidation:
    @pytest.mark.parametrize("value", [1, 24, 120])
    def test_update_interval_bounds_inclusive(self, value):
        ConfigValidator._validate_ranges({"update_interval": value})

    def test_update_interval_too_small(self):
        with pytest.raises(ValueError, match=">= 1"):
            ConfigValidator._validate_ranges({"update_interval": 0})

    def test_update_interval_too_large(self):
        with pytest.raises(ValueError, match="<= 120"):
            ConfigValidator._validate_ranges({"update_interval": 121})


class TestRelationshipValidation:
    def test_warns_when_no_fallback_coverage(self):
        with pytest.warns(UserWarning, match="both off"):
            ConfigValidator.validate_config(
                {"always_include_hauling": False, "always_include_cleaning": False}
            )

    def test_no_warning_with_assign_all(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            ConfigValidator.validate_config(
                {
                    "always_include_hauling": False,
                    "always_include_cleaning": False,
                    "assign_all_work_types": True,
                }
            )


class TestLoggingValidation:
    def test_valid_logging(self):
        ConfigValidator._validate_logging(
            {"default_level": "deep_debug", "events": {"assign_doctors": "DEBUG"}}
        )

    def test_invalid_default_level(self):
        with pytest.raises(ValueError, match="Invalid log level 'LOUD'"):
            ConfigValidator._validate_logging({"default_level": "LOUD"})

    def test_invalid_event_level(self):
        with pytest.raises(ValueError, match="for event 'assign_doctors'"):
            ConfigValidator._validate_logging({"events": {"assign_doctors": "LOUD"}})

    def test_logging_must_be_dict(self):
        with pytest.raises(ValueError, match="must be dict"):
            ConfigValidator.validate_config({"logging": "DEBUG"})


class TestPipelinePath:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="does not exist"):
            ConfigValidator.validate_pipeline_path(tmp_path / "nope.yml")

    def test_directory(self, tmp_path):
        with pytest.raises(ValueError, match="is not a file"):
            ConfigValidator.validate_pipeline_path(tmp_path)

    def test_odd_extension_warns(self, tmp_path):
        path = tmp_path / "pipeline.txt"
        path.write_text("events: []\n")
        with pytest.warns(UserWarning, match="extension"):
            ConfigValidator.validate_pipeline_path(path)
