"""
Country guide module.

Proxies country guide requests to an LLM provider.

Public API:
- IGuideService: Interface for guide generation
- CountryGuideRequest / CountryGuideResponse: Models
- InvalidCountryError, GuideGenerationError: Exceptions
"""

from .interfaces import IGuideService
from .models import CountryGuideRequest, CountryGuideResponse
from .exceptions import InvalidCountryError, GuideGenerationError

__all__ = [
    "IGuideService",
    "CountryGuideRequest",
    "CountryGuideResponse",
    "InvalidCountryError",
    "GuideGenerationError",
]
