"""
Authentication API endpoints.

Provides signup, login and the token-protected check.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import CredentialsRequest, ProtectedResponse, TokenResponse

router = APIRouter()


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def signup(
    request: CredentialsRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Create an account and return a bearer token for it.

    Responds 400 when the username is already taken.
    """
    token = await service.signup(request.username, request.password)
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: CredentialsRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange username + password for a bearer token.

    Unknown usernames and wrong passwords get the same 400 response.
    """
    token = await service.login(request.username, request.password)
    return TokenResponse(token=token)


@router.get("/protected", response_model=ProtectedResponse)
async def protected(
    user: AuthenticatedUser = Depends(get_current_user),
) -> ProtectedResponse:
    """Echo the decoded token subject."""
    return ProtectedResponse(
        message="This is a protected route",
        user=user.model_dump(),
    )
