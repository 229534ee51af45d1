"""Turning foreign exceptions into huewheel ones, and huewheel ones into text.

``wrap_pydantic_error`` is used by the persistence layer;
``format_error_for_display`` by the CLI.
"""

from typing import Optional

from pydantic import ValidationError

from .base import HueWheelError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError


def _dotted(loc) -> str:
    return ".".join(str(part) for part in loc) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> ConfigurationError:
    """
    Map a pydantic failure on ``file_path`` to a ConfigurationError.

    Broken JSON becomes ConfigFileInvalidError. A single bad field keeps its
    dotted location; several are folded into one "multiple fields" error.
    """
    if not isinstance(error, ValidationError) or not error.errors():
        text = str(error)
        if "Invalid JSON" in text:
            return ConfigFileInvalidError(file_path, text)
        return ConfigValidationError(field="unknown", value=None, error_msg=text, file_path=file_path)

    problems = error.errors()

    if any(p.get("type") == "json_invalid" for p in problems):
        reasons = (str(p.get("ctx", {}).get("error", p.get("msg"))) for p in problems)
        return ConfigFileInvalidError(file_path, "; ".join(reasons))

    if len(problems) == 1:
        (only,) = problems
        return ConfigValidationError(
            field=_dotted(only.get("loc", ())),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    listing = "\n".join(
        f"  - {_dotted(p.get('loc', ()))}: {p.get('msg', 'validation failed')}" for p in problems
    )
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(problems)} validation errors:\n{listing}",
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return ``(message, hint)`` for showing ``error`` to a user."""
    if isinstance(error, HueWheelError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
