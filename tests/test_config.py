"""Tests for PickerConfig, persistence and error mapping."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel

from huewheel.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    HueWheelError,
    format_error_for_display,
)
from huewheel.models import BarRange, PickerConfig
from huewheel.utils.persistence import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestPickerConfig:
    """Test PickerConfig defaults and range sanitizing."""

    @pytest.mark.unit
    def test_defaults(self):
        config = PickerConfig()
        assert config.wheel.wheel_radius == 124
        assert config.wheel.pointer_halo_radius == 18
        assert config.wheel.center_radius == 54
        assert config.bar.length == 240
        assert config.opacity_range == BarRange(minimum=0, maximum=255)
        assert config.saturation_range == BarRange(minimum=0.0, maximum=1.0)
        assert config.value_range == BarRange(minimum=0.0, maximum=1.0)

    @pytest.mark.unit
    def test_out_of_bounds_ranges_fall_back(self):
        config = PickerConfig(
            opacity_range={"minimum": 300, "maximum": 100},
            saturation_range={"minimum": 0.9, "maximum": 0.1},
        )
        assert config.opacity_range == BarRange(minimum=0, maximum=100)
        assert config.saturation_range == BarRange(minimum=0.0, maximum=1.0)

    @pytest.mark.unit
    def test_valid_ranges_are_kept(self):
        config = PickerConfig(value_range={"minimum": 0.25, "maximum": 0.75})
        assert config.value_range == BarRange(minimum=0.25, maximum=0.75)

    @pytest.mark.unit
    def test_geometry_must_be_positive(self):
        with pytest.raises(ValueError):
            PickerConfig(wheel={"wheel_radius": 0})


class TestConfigPersistence:
    """Test loading and saving config files."""

    @pytest.mark.integration
    def test_save_and_load(self, temp_dir):
        path = temp_dir / "config.json"
        config = PickerConfig(bar={"length": 320}, value_range={"minimum": 0.2, "maximum": 0.9})
        config.save(path)

        loaded = PickerConfig.load_or_default(path)
        assert loaded == config

    @pytest.mark.integration
    def test_missing_file_gives_defaults(self, temp_dir):
        assert PickerConfig.load_or_default(temp_dir / "nope.json") == PickerConfig()

    @pytest.mark.integration
    def test_invalid_range_in_file_is_sanitized(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"opacity_range": {"minimum": 250, "maximum": 255}}))
        config = PickerConfig.load_or_default(path)
        assert config.opacity_range == BarRange(minimum=0, maximum=255)

    @pytest.mark.integration
    def test_invalid_json_raises(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"bar": {"length": 100},}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PickerConfig.load_or_default(path)
        assert exc_info.value.file_path == str(path)

    @pytest.mark.integration
    def test_empty_file_raises(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PickerConfig.load_or_default(path)
        assert exc_info.value.user_message == "Configuration file is empty"

    @pytest.mark.integration
    def test_invalid_value_raises_validation_error(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"bar": {"length": -5}}))

        with pytest.raises(ConfigValidationError) as exc_info:
            PickerConfig.load_or_default(path)
        assert exc_info.value.field == "bar.length"
        assert "positive" in exc_info.value.recovery_hint

    @pytest.mark.integration
    def test_several_invalid_values(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"bar": {"length": -5}, "wheel": {"wheel_radius": "big"}}))

        with pytest.raises(ConfigValidationError) as exc_info:
            PickerConfig.load_or_default(path)
        assert exc_info.value.field == "multiple fields"


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(config_path, SampleModel).name == "modified"

    def test_save_without_backup(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=3), config_path, backup=False)
        assert not config_path.with_suffix(".json.bak").exists()

    def test_no_temp_file_left_behind(self, tmp_path: Path):
        config_path = tmp_path / "nested" / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path)
        assert config_path.exists()
        assert not config_path.with_suffix(".json.tmp").exists()

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    def test_load_or_default_uses_factory(self, tmp_path: Path):
        model = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json", SampleModel, lambda: SampleModel(name="factory")
        )
        assert model.name == "factory"

    def test_corrupted_file_is_not_replaced(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json")

        with pytest.raises(ConfigurationError):
            PydanticPersistence.load_json_or_default(config_path, SampleModel)
        assert config_path.read_text() == "{not json"


class TestErrorDisplay:
    """Test error formatting helpers."""

    @pytest.mark.unit
    def test_package_error(self):
        error = ConfigFileInvalidError("/tmp/c.json", "File is empty")
        message, hint = format_error_for_display(error)
        assert message == "Configuration file is empty"
        assert "/tmp/c.json" in hint

    @pytest.mark.unit
    def test_foreign_error(self):
        message, hint = format_error_for_display(KeyError("x"))
        assert message.startswith("KeyError")
        assert hint is None

    @pytest.mark.unit
    def test_full_message(self):
        error = HueWheelError("Something broke", recovery_hint="Try again")
        assert str(error) == "Something broke"
        assert error.get_full_message() == "Something broke\n\nSuggestion: Try again"
        assert error.technical_message == "Something broke"
