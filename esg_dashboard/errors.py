"""Error taxonomy shared by the providers, the loaders and the API layer.

Engine functions never raise these for missing or malformed domain data;
only the boundary (network, decoding, explicit form validation) does.
"""

from __future__ import annotations

from typing import Optional


class EsgDashboardError(Exception):
    """Base class for every error raised by the package."""


class ValidationError(EsgDashboardError):
    """A metric payload failed validation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class DataUnavailableError(EsgDashboardError):
    """The remote API could not provide the requested data."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(DataUnavailableError):
    """The remote API answered 404."""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)
