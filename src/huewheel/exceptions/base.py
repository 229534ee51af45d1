"""Root of the huewheel exception hierarchy.

Each error carries two texts: one for people (``user_message``, plus an
optional ``recovery_hint``) and one for logs (``technical_message``).
``recoverable`` tells callers whether retrying after a fix makes sense.
"""

from typing import Optional


class HueWheelError(Exception):
    """
    Base exception for all huewheel errors.

    Attributes:
        user_message: Short text to show the user
        technical_message: Detail for the log (defaults to user_message)
        recoverable: True if fixing the input and retrying can succeed
        recovery_hint: What the user can do about it, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
