"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field


class CredentialRecord(BaseModel):
    """A stored username with its salted password hash."""

    id: str = Field(..., description="User ID (UUID)")
    username: str = Field(..., description="Unique username")
    password_hash: str = Field(..., description="bcrypt hash of the password")

    model_config = {"frozen": True}


class TokenClaims(BaseModel):
    """
    Decoded token payload.

    `sub` carries the user ID; `iat` and `exp` are Unix timestamps.
    """

    sub: str = Field(..., description="Subject (user ID)")
    username: str = Field(..., description="Username of the subject")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class CredentialsRequest(BaseModel):
    """Signup and login request body."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Plaintext password")


class TokenResponse(BaseModel):
    """Response carrying a freshly issued bearer token."""

    token: str


class ProtectedResponse(BaseModel):
    """Response of the protected endpoint."""

    message: str
    user: dict
