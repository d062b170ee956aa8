"""
Grand Line Guide client.

Python counterpart of the browser front end: the country directory client,
the listing controller with debounced search and pagination, the persisted
session and the backend API client. The terminal front end in main.py
drives these pieces.
"""

from .countries import Country, CountryDirectoryClient, format_country
from .listing import ListingController, Page, choose_strategy, paginate
from .session import BootstrapOutcome, Session, bootstrap
from .backend import BackendClient

__all__ = [
    "Country",
    "CountryDirectoryClient",
    "format_country",
    "ListingController",
    "Page",
    "choose_strategy",
    "paginate",
    "BootstrapOutcome",
    "Session",
    "bootstrap",
    "BackendClient",
]
