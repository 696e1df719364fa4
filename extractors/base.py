"""
Base Extractor

Abstract base class for data extractors.
"""

from abc import ABC, abstractmethod
from typing import Any

from core.logging import get_logger


class BaseExtractor(ABC):
    """
    Abstract base class for data extractors.

    Extractors are responsible for fetching raw data from an external API
    with proper error handling and resilience. Reshaping into response
    payloads is done by the services layer.

    Subclasses should:
    - Go through a ResilientHTTPClient for retries and timeouts
    - Raise the core.resilience error types on upstream failure
    - Keep methods synchronous (callers offload them with asyncio.to_thread)
    """

    def __init__(self, name: str):
        """
        Initialize extractor.

        Args:
            name: Extractor name for logging
        """
        self.name = name
        self.log = get_logger(f"extractor.{name}")

    @abstractmethod
    def extract(self, **kwargs: Any) -> Any:
        """
        Extract data from the source.

        Args:
            **kwargs: Source-specific parameters

        Returns:
            Raw extracted data

        Raises:
            NetworkError, RateLimitError, etc. for retryable failures
        """
        pass
