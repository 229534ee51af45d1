"""Picker configuration: geometry and per-channel bar ranges."""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from huewheel.utils.numeric import round_half_up
from huewheel.utils.persistence import PydanticPersistence

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".huewheel" / "config.json"


class BarRange(BaseModel):
    """The part of a channel a bar spans, from its start to its end."""

    model_config = ConfigDict(frozen=True)

    minimum: float = Field(description="Level at the start of the track")
    maximum: float = Field(description="Level at the end of the track")


class RangeLimits(BaseModel):
    """
    Which bar ranges a channel accepts.

    Settings outside these limits are not errors: the offending end is
    replaced by the channel's default and a warning is logged.
    """

    model_config = ConfigDict(frozen=True)

    lower: float = Field(description="Lowest level of the channel")
    upper: float = Field(description="Highest level of the channel")
    min_allowed: tuple[float, float] = Field(description="Accepted [low, high] for the range minimum")
    max_allowed: tuple[float, float] = Field(description="Accepted [low, high] for the range maximum")
    integral: bool = Field(default=False, description="Levels are whole numbers")

    @property
    def default_range(self) -> BarRange:
        return BarRange(minimum=self.lower, maximum=self.upper)

    def sanitize(self, minimum: float | None = None, maximum: float | None = None) -> BarRange:
        """Build a range from possibly invalid settings."""
        if minimum is None or not self.min_allowed[0] <= minimum <= self.min_allowed[1]:
            if minimum is not None:
                logger.warning(f"Range minimum {minimum} outside {self.min_allowed}, using {self.lower}")
            minimum = self.lower

        if maximum is None or not self.max_allowed[0] <= maximum <= self.max_allowed[1]:
            if maximum is not None:
                logger.warning(f"Range maximum {maximum} outside {self.max_allowed}, using {self.upper}")
            maximum = self.upper

        if self.integral:
            minimum, maximum = round_half_up(minimum), round_half_up(maximum)

        if minimum >= maximum:
            logger.warning(f"Empty range [{minimum}, {maximum}], using [{self.lower}, {self.upper}]")
            return self.default_range

        return BarRange(minimum=minimum, maximum=maximum)


OPACITY_LIMITS = RangeLimits(
    lower=0, upper=255, min_allowed=(0, 0xF6), max_allowed=(0x0A, 0xFF), integral=True
)
UNIT_LIMITS = RangeLimits(lower=0.0, upper=1.0, min_allowed=(0.0, 0.8), max_allowed=(0.2, 1.0))
TONE_LIMITS = RangeLimits(lower=0.0, upper=2.0, min_allowed=(0.0, 2.0), max_allowed=(0.0, 2.0))


class WheelGeometry(BaseModel):
    """Hue wheel dimensions in pixels."""

    wheel_radius: int = Field(default=124, gt=0, description="Radius of the color ring")
    pointer_halo_radius: int = Field(
        default=18, gt=0, description="Half-size of the square that grabs the pointer"
    )
    center_radius: int = Field(
        default=54, gt=0, description="Radius of the selected-color swatch in the middle"
    )


class BarGeometry(BaseModel):
    """Bar dimensions in pixels."""

    length: int = Field(default=240, gt=0, description="Length of the track")
    pointer_halo_radius: int = Field(
        default=18, ge=0, description="Margin before the track starts (pointer halo radius)"
    )


class PickerConfig(BaseModel):
    """Defaults used when building pickers from configuration."""

    wheel: WheelGeometry = Field(default_factory=WheelGeometry)
    bar: BarGeometry = Field(default_factory=BarGeometry)

    opacity_range: BarRange = Field(default_factory=lambda: OPACITY_LIMITS.default_range)
    saturation_range: BarRange = Field(default_factory=lambda: UNIT_LIMITS.default_range)
    value_range: BarRange = Field(default_factory=lambda: UNIT_LIMITS.default_range)

    @field_validator("opacity_range")
    @classmethod
    def sanitize_opacity_range(cls, v: BarRange) -> BarRange:
        return OPACITY_LIMITS.sanitize(v.minimum, v.maximum)

    @field_validator("saturation_range", "value_range")
    @classmethod
    def sanitize_unit_range(cls, v: BarRange) -> BarRange:
        return UNIT_LIMITS.sanitize(v.minimum, v.maximum)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses ~/.huewheel/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (atomic, keeps a .bak of the previous file)."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
