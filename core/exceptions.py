"""
Service Exceptions

Errors raised by the league service and rendered as error envelopes by the
handler registered in core.middleware.
"""

from schemas.common import ApiStatus


class FPLServiceError(Exception):
    """Base class for errors reported to clients with a specific code."""

    status_code: int = 500
    error_code: str = "FETCH_FAILED"
    api_status: ApiStatus = ApiStatus.SERVER_ERROR
    default_message: str = "Failed to fetch FPL data"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class LeagueNotConfiguredError(FPLServiceError):
    """FPL_LEAGUE_ID is not set. Raised before any network call."""

    status_code = 500
    error_code = "LEAGUE_NOT_CONFIGURED"
    api_status = ApiStatus.NOT_CONFIGURED
    default_message = "League ID not configured"


class InvalidActionError(FPLServiceError):
    """Unknown or missing ?action= value."""

    status_code = 400
    error_code = "INVALID_ACTION"
    api_status = ApiStatus.VALIDATION_ERROR
    default_message = "Invalid action"


class StandingsUnavailableError(FPLServiceError):
    """League standings could not be fetched for a period-scores request."""

    status_code = 502
    error_code = "STANDINGS_UNAVAILABLE"
    api_status = ApiStatus.UPSTREAM_ERROR
    default_message = "Failed to fetch league standings"

    def __init__(self, reason: str | None = None):
        # reason is for logs only; clients get the default message
        super().__init__()
        self.reason = reason
