"""
Country guide module data models.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CountryGuideRequest(BaseModel):
    """
    Request body for a country guide.

    `country` is left untyped so a non-string value reaches the service
    and is rejected with the module's own validation error.
    """

    country: Optional[Any] = Field(None, description="Country display name")


class CountryGuideResponse(BaseModel):
    """Generated guide text."""

    result: str
