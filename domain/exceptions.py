# domain/exceptions.py
from __future__ import annotations

from typing import Optional, Sequence


class WebinarError(Exception):
    """Base class for errors raised by the webinar steps."""


class ConfigurationError(WebinarError):
    """Credential or settings problem detected before any network call."""


class AuthenticationError(WebinarError):
    """Token exchange failed or returned no access token."""


class UnknownOperatorError(WebinarError):
    def __init__(self, operator: str, valid_operators: Sequence[str]):
        self.operator = operator
        self.valid_operators = list(valid_operators)
        super().__init__(f"Unknown operator '{operator}'.")


class InvalidOperandError(WebinarError):
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
