"""
Country guide module exceptions.
"""

from shared.exceptions import ExternalServiceError, ValidationError


class InvalidCountryError(ValidationError):
    """Raised when the country name is missing, empty or not a string."""

    def __init__(self):
        super().__init__(
            "Please provide a valid country name.",
            code="INVALID_COUNTRY",
        )


class GuideGenerationError(ExternalServiceError):
    """
    Raised when the generation API fails for any reason.

    The message is generic; the upstream cause is logged, never returned.
    """

    def __init__(self, provider: str):
        super().__init__(
            "Something went wrong while generating the country guide.",
            service=provider,
            code="GUIDE_GENERATION_FAILED",
        )
