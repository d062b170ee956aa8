"""
Country directory client.

Wraps the REST Countries lookups (all / by name / by region / by code) and
normalizes every upstream record into the same flat Country shape.

API: https://restcountries.com/v3.1
"""

import logging
from typing import Any, Optional, Protocol, Union, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .exceptions import CountryNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://restcountries.com/v3.1"

# The directory rejects /all without a field filter
FIELDS = "name,population,region,languages,flags,capital"

NOT_AVAILABLE = "N/A"


class Country(BaseModel):
    """
    A country as shown in the listing.

    Every field may hold the "N/A" sentinel; `population` is otherwise an
    integer, so it is typed as either.
    """

    model_config = {"frozen": True}

    name: str
    population: Union[int, str]
    region: str
    languages: str
    flag: str
    capital: str


def format_country(raw: dict[str, Any]) -> Country:
    """Normalize one upstream country object.

    Falsy values (missing, empty, zero) fall back to "N/A". Languages keep
    upstream order; only the first capital is kept.
    """
    languages = raw.get("languages")
    capitals = raw.get("capital") or []

    return Country(
        name=(raw.get("name") or {}).get("common") or NOT_AVAILABLE,
        population=raw.get("population") or NOT_AVAILABLE,
        region=raw.get("region") or NOT_AVAILABLE,
        languages=", ".join(languages.values()) if languages is not None else NOT_AVAILABLE,
        flag=(raw.get("flags") or {}).get("png") or NOT_AVAILABLE,
        capital=(capitals[0] if capitals else None) or NOT_AVAILABLE,
    )


@runtime_checkable
class ICountryDirectory(Protocol):
    """Remote country lookups used by the listing controller."""

    async def list_all(self) -> list[Country]:
        ...

    async def find_by_name(self, name: str) -> list[Country]:
        ...

    async def find_by_region(self, region: str) -> list[Country]:
        ...

    async def find_by_code(self, code: str) -> Country:
        ...


class CountryDirectoryClient:
    """
    Async client for the REST Countries directory.

    Results keep upstream order. Transport and HTTP status errors are
    logged and re-raised unchanged; nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._http = http
        self._owns_http = http is None
        self._timeout = timeout

    async def __aenter__(self) -> "CountryDirectoryClient":
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

    async def _fetch(self, path: str, description: str) -> list[dict[str, Any]]:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client().get(url, params={"fields": FIELDS})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Error fetching {description}: {e}")
            raise
        logger.debug(f"Fetched {description} from {url}")
        return response.json()

    async def list_all(self) -> list[Country]:
        """GET /all: every country."""
        data = await self._fetch("/all", "all countries")
        return [format_country(c) for c in data]

    async def find_by_name(self, name: str) -> list[Country]:
        """GET /name/{name}: countries whose name matches."""
        data = await self._fetch(f"/name/{quote(name, safe='')}", f'countries named "{name}"')
        return [format_country(c) for c in data]

    async def find_by_region(self, region: str) -> list[Country]:
        """GET /region/{region}: countries in a region."""
        data = await self._fetch(
            f"/region/{quote(region, safe='')}", f'countries in region "{region}"'
        )
        return [format_country(c) for c in data]

    async def find_by_code(self, code: str) -> Country:
        """GET /alpha/{code}: the country with a 2- or 3-letter code.

        The directory answers with a collection; only the first entry is used.

        Raises:
            CountryNotFoundError: If the collection is empty
        """
        data = await self._fetch(f"/alpha/{quote(code, safe='')}", f'country with code "{code}"')
        if isinstance(data, dict):
            data = [data]
        if not data:
            raise CountryNotFoundError(code)
        return format_country(data[0])
