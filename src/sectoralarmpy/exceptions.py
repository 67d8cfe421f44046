"""Exceptions for the sectoralarmpy library."""


class SectorAlarmError(Exception):
    """Base exception for sectoralarmpy."""


class SectorAlarmAuthError(SectorAlarmError):
    """Raised when the portal rejects the login."""


class SectorAlarmVersionNotFoundError(SectorAlarmError):
    """Raised when the landing page no longer carries a version token."""


class SectorAlarmApiError(SectorAlarmError):
    """Raised when a data endpoint answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SectorAlarmResponseError(SectorAlarmError):
    """Raised when a response body cannot be decoded."""


class SectorAlarmConnectionError(SectorAlarmError):
    """Raised when unable to connect to the Sector Alarm portal."""
