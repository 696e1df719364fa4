from datetime import datetime
from enum import Enum
from typing import Optional, Any

import pytz

# ------------------------------- Base Models ------------------------------- #

class ApiStatus(str, Enum):
    """Standard API response statuses"""
    SUCCESS = "success"
    ERROR = "error"
    VALIDATION_ERROR = "validation_error"
    NOT_CONFIGURED = "not_configured"
    UPSTREAM_ERROR = "upstream_error"
    SERVER_ERROR = "server_error"

# ------------------------------- Response Helpers ------------------------------- #

def utc_timestamp() -> str:
    """ISO-8601 timestamp in UTC for response envelopes."""
    return datetime.now(pytz.utc).isoformat()

def error_response(
    message: str = "An error occurred",
    status: ApiStatus = ApiStatus.ERROR,
    error_code: Optional[str] = None,
    data: Any = None,
    timestamp: Optional[str] = None
) -> dict:
    """
    Helper function to create a standardized error response.

    `error` duplicates `message` so clients that only read the `error`
    key (the page polling loop did) keep working.
    """
    return {
        "status": status.value,
        "message": message,
        "error": message,
        "data": data,
        "error_code": error_code,
        "timestamp": timestamp or utc_timestamp(),
    }
