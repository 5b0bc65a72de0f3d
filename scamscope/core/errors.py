"""
Engine error kinds
------------------
Two failure kinds exist and must never be conflated:

- InputValidationError: the caller sent nothing to score (missing/blank input).
- TableParseError: an uploaded table could not be read as tabular data at all.

A malformed URL is NOT an error; the URL analyzer scores it at the maximum.
"""


class ScamscopeError(Exception):
    """Base class for failures surfaced by the scoring engine."""


class InputValidationError(ScamscopeError, ValueError):
    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"{field} required")


class TableParseError(ScamscopeError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)
