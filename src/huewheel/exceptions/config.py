"""Errors raised while reading a picker config file.

Out-of-bounds bar ranges are not errors (they fall back to defaults). These
cover files that cannot be parsed and values pydantic refuses outright.
"""

from typing import Any, Optional

from .base import HueWheelError

_JSON_HINTS = (
    "a comma after the last entry of an object or list",
    "keys or strings without double quotes",
    "a missing closing brace or bracket",
)


class ConfigurationError(HueWheelError):
    """A picker config file could not be used."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty, unreadable or not JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Config file that failed to parse
            parse_error: Parser or OS message
        """
        lowered = parse_error.lower()
        if "empty" in lowered:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'huewheel config reset' to write defaults"
        elif "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last entry in {file_path}"
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = "Look for:\n" + "\n".join(f"  - {hint}" for hint in _JSON_HINTS)
            recovery += f"\nFile: {file_path}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Could not parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config value has the wrong type or violates a hard bound."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Dotted path of the offending field (``bar.length``)
            value: Value found in the file
            error_msg: Validator message
            file_path: Config file the value came from, if any
        """
        lines = [f"Fix '{field}' in the picker configuration"]
        if file_path:
            lines.append(f"File: {file_path}")

        lowered = field.lower()
        if "radius" in lowered or "length" in lowered:
            lines.append("Geometry values are whole pixels and must be positive")
        elif "range" in lowered:
            lines.append("Ranges take 'minimum' and 'maximum' numbers")

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
