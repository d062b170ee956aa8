"""
Country guide API endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_guide_service

from .interfaces import IGuideService
from .models import CountryGuideRequest, CountryGuideResponse

router = APIRouter()


@router.post("/country-guide", response_model=CountryGuideResponse)
async def country_guide(
    request: CountryGuideRequest,
    service: IGuideService = Depends(get_guide_service),
) -> CountryGuideResponse:
    """
    Generate a short travel guide for a country.

    Responds 400 for a missing or non-string country and 500 when the
    generation API fails. A new guide is generated on every call.
    """
    text = await service.generate_guide(request.country)
    return CountryGuideResponse(result=text)
