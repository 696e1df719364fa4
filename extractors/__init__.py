"""
Data Extractors

Components for fetching data from external sources.
"""

from extractors.base import BaseExtractor
from extractors.fpl import FPLExtractor

__all__ = [
    "BaseExtractor",
    "FPLExtractor",
]
