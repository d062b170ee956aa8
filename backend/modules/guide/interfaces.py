"""
Country guide module interface.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IGuideService(Protocol):
    """Generates a short travel guide for a country."""

    async def generate_guide(self, country: Any) -> str:
        """
        Generate guide text for a country.

        Args:
            country: Country display name

        Returns:
            Guide text with surrounding whitespace stripped

        Raises:
            InvalidCountryError: If country is not a non-empty string
            GuideGenerationError: If the generation API fails
        """
        ...
