"""
Grand Line Guide backend API client.

Thin async wrapper over the signup / login / protected / country-guide
endpoints. Every failure surfaces as BackendRequestError.
"""

import logging
from typing import Any, Optional

import httpx

from .exceptions import BackendRequestError

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull the server's error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            if isinstance(body.get(key), str):
                return body[key]
    return f"HTTP {response.status_code}"


class BackendClient:
    """Async client for the Grand Line Guide backend."""

    def __init__(
        self,
        base_url: str,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._http = http
        self._owns_http = http is None
        self._timeout = timeout

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._timeout)
        return self._http

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client().request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise BackendRequestError("Could not reach the Grand Line Guide backend") from e

        if response.is_error:
            raise BackendRequestError(_error_message(response), status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise BackendRequestError(
                "Malformed response from the backend",
                status_code=response.status_code,
            ) from e

    async def signup(self, username: str, password: str) -> str:
        """Create an account; returns its bearer token."""
        data = await self._request(
            "POST", "/signup", json={"username": username, "password": password}
        )
        return data["token"]

    async def login(self, username: str, password: str) -> str:
        """Exchange credentials for a bearer token."""
        data = await self._request(
            "POST", "/login", json={"username": username, "password": password}
        )
        return data["token"]

    async def protected(self, token: str) -> dict[str, Any]:
        """Call the protected endpoint with a stored token."""
        return await self._request(
            "GET", "/protected", headers={"Authorization": f"Bearer {token}"}
        )

    async def country_guide(self, country: str) -> str:
        """Request a freshly generated guide for a country."""
        data = await self._request("POST", "/api/country-guide", json={"country": country})
        return data["result"]
