"""
Resilience Patterns

Provides the retryable error hierarchy, circuit breakers for the FPL API,
and a resilient HTTP client for handling transient failures in external
API calls.
"""

from typing import Any, Callable, Optional

import requests
from circuitbreaker import circuit, CircuitBreakerError, CircuitBreakerMonitor
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    RetryCallState,
)

from core.logging import get_logger
from core.settings import settings


# -----------------------------------------------------------------------------
# Custom Exceptions
# -----------------------------------------------------------------------------


class RetryableError(Exception):
    """Base class for errors that should trigger retries."""

    pass


class RateLimitError(RetryableError):
    """Raised when rate limited (HTTP 429)."""

    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message)
        self.retry_after = retry_after


class NetworkError(RetryableError):
    """Raised on network/timeout errors."""

    pass


class ServerError(RetryableError):
    """Raised on server errors (5xx)."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ClientError(Exception):
    """Raised on client errors (4xx). Not retryable."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(Exception):
    """Raised when a successful response body is not the expected JSON. Not retryable."""

    pass


# -----------------------------------------------------------------------------
# Circuit Breakers
# -----------------------------------------------------------------------------

FPL_CIRCUIT_NAME = "fpl_api"
FPL_HISTORY_CIRCUIT_NAME = "fpl_entry_history"


def create_circuit_breaker(
    name: str,
    failure_threshold: int = 5,
    recovery_timeout: int = 60,
) -> Callable:
    """
    Create a circuit breaker decorator.

    Args:
        name: Name of the circuit breaker for identification
        failure_threshold: Number of failures before opening circuit
        recovery_timeout: Seconds to wait before attempting recovery

    Returns:
        A circuit breaker decorator
    """
    return circuit(
        failure_threshold=failure_threshold,
        recovery_timeout=recovery_timeout,
        expected_exception=RetryableError,
        name=name,
    )


# Only retryable failures count towards opening; a 404 for one entry does not
fpl_api_circuit = create_circuit_breaker(
    name=FPL_CIRCUIT_NAME,
    failure_threshold=settings.circuit_breaker_threshold,
    recovery_timeout=settings.circuit_breaker_timeout,
)

# Optional per-entry history fetches trip their own breaker, not fpl_api_circuit
fpl_history_circuit = create_circuit_breaker(
    name=FPL_HISTORY_CIRCUIT_NAME,
    failure_threshold=settings.circuit_breaker_threshold,
    recovery_timeout=settings.circuit_breaker_timeout,
)


def is_circuit_open(circuit_name: str = FPL_CIRCUIT_NAME) -> bool:
    """Check if a circuit breaker is currently open."""
    cb = CircuitBreakerMonitor.get(circuit_name)
    return bool(cb and cb.opened)


# -----------------------------------------------------------------------------
# Resilient HTTP Client
# -----------------------------------------------------------------------------


def classify_response_error(response: requests.Response) -> None:
    """
    Classify HTTP response errors and raise appropriate exceptions.

    Args:
        response: The HTTP response to classify

    Raises:
        RateLimitError: For 429 responses
        ServerError: For 5xx responses
        ClientError: For 4xx responses
    """
    if response.status_code == 429:
        retry_after = response.headers.get("Retry-After")
        retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else 60
        raise RateLimitError(
            f"Rate limited, retry after {retry_seconds}s",
            retry_after=retry_seconds,
        )

    if response.status_code >= 500:
        raise ServerError(
            f"Server error: {response.status_code}",
            status_code=response.status_code,
        )

    if response.status_code >= 400:
        raise ClientError(
            f"Client error: {response.status_code} - {response.text[:200]}",
            status_code=response.status_code,
        )


def resilient_request(
    method: str,
    url: str,
    timeout: int = 10,
    **kwargs: Any,
) -> requests.Response:
    """
    Make an HTTP request with retry-aware error handling.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        timeout: Request timeout in seconds
        **kwargs: Additional arguments passed to requests

    Returns:
        The HTTP response

    Raises:
        NetworkError: On connection or timeout errors
        RateLimitError: On 429 responses
        ServerError: On 5xx responses
        ClientError: On 4xx responses
    """
    log = get_logger("http")

    try:
        log.debug("http_request", method=method, url=url)
        response = requests.request(method, url, timeout=timeout, **kwargs)
        classify_response_error(response)
        log.debug("http_response", method=method, url=url, status=response.status_code)
        return response

    except requests.exceptions.Timeout:
        log.warning("http_timeout", method=method, url=url)
        raise NetworkError(f"Request timed out: {url}")

    except requests.exceptions.ConnectionError as e:
        log.warning("http_connection_error", method=method, url=url, error=str(e))
        raise NetworkError(f"Connection failed: {url}")

    except requests.exceptions.RequestException as e:
        log.error("http_error", method=method, url=url, error=str(e))
        raise NetworkError(f"Request failed: {url} - {e}")


class ResilientHTTPClient:
    """
    HTTP client with built-in retry and circuit breaker support.

    Example:
        client = ResilientHTTPClient(
            max_retries=3,
            timeout=10,
            headers={"User-Agent": "..."},
            circuit_breaker=fpl_api_circuit,
        )
        response = client.get("https://fantasy.premierleague.com/api/bootstrap-static/")
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 10.0,
        timeout: int = 10,
        headers: Optional[dict[str, str]] = None,
        circuit_breaker: Optional[Callable] = None,
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.timeout = timeout
        self.headers = dict(headers or {})
        self.circuit_breaker = circuit_breaker
        self._backoff = wait_exponential(multiplier=base_delay, max=max_delay)
        self.log = get_logger("http_client")

    def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> requests.Response:
        """Internal method to make a single request."""
        headers = {**self.headers, **kwargs.pop("headers", {})}
        return resilient_request(
            method=method,
            url=url,
            timeout=kwargs.pop("timeout", self.timeout),
            headers=headers,
            **kwargs,
        )

    def _wait(self, retry_state: RetryCallState) -> float:
        """Honour Retry-After on 429s (capped at max_delay), else back off exponentially."""
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return min(float(error.retry_after), self.max_delay)
        return self._backoff(retry_state)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self.log.warning(
            "retry_attempt",
            attempt=retry_state.attempt_number,
            error=str(error),
            error_type=type(error).__name__,
        )

    def _request_with_retry(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> requests.Response:
        """Make request with retry logic."""

        @retry(
            stop=stop_after_attempt(self.max_retries),
            wait=self._wait,
            retry=retry_if_exception_type(RetryableError),
            before_sleep=self._log_retry,
            reraise=True,
        )
        def _do_request() -> requests.Response:
            return self._make_request(method, url, **dict(kwargs))

        return _do_request()

    def request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Make an HTTP request with retry and optional circuit breaker.

        Args:
            method: HTTP method
            url: Request URL
            **kwargs: Additional request arguments

        Returns:
            The HTTP response
        """
        if self.circuit_breaker:

            @self.circuit_breaker
            def _protected_request() -> requests.Response:
                return self._request_with_retry(method, url, **kwargs)

            return _protected_request()
        else:
            return self._request_with_retry(method, url, **kwargs)

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        """Make a GET request."""
        return self.request("GET", url, **kwargs)


# Failures surfaced to callers after retries and circuit checks
UPSTREAM_ERRORS = (RetryableError, ClientError, InvalidResponseError, CircuitBreakerError)


__all__ = [
    "RetryableError",
    "RateLimitError",
    "NetworkError",
    "ServerError",
    "ClientError",
    "InvalidResponseError",
    "CircuitBreakerError",
    "UPSTREAM_ERRORS",
    "create_circuit_breaker",
    "fpl_api_circuit",
    "fpl_history_circuit",
    "is_circuit_open",
    "classify_response_error",
    "resilient_request",
    "ResilientHTTPClient",
]
