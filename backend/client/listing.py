"""
Country listing controller.

Decides which directory lookup to run for the current search text and
region, debounces input changes, and slices results into pages.

The strategy choice is a pure function so it can be tested without timers.
Scheduling lives in ListingController:

- every change cancels the pending debounce timer and starts a new one
- only the last timer within the quiet period fires a query
- queries that already started are not cancelled; each carries a
  generation number and its result is dropped if a newer change happened
"""

import asyncio
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .countries import Country, ICountryDirectory

logger = logging.getLogger(__name__)

ALL_REGIONS = "All"
REGIONS = (ALL_REGIONS, "Africa", "Americas", "Asia", "Europe", "Oceania")

PAGE_SIZE = 5
DEBOUNCE_SECONDS = 0.3
MAX_CODE_LENGTH = 3


@dataclass(frozen=True)
class ByCode:
    code: str


@dataclass(frozen=True)
class ByName:
    name: str


@dataclass(frozen=True)
class ByRegion:
    region: str


@dataclass(frozen=True)
class AllCountries:
    pass


Strategy = Union[ByCode, ByName, ByRegion, AllCountries]


def choose_strategy(search_text: str, region: str) -> Strategy:
    """Pick the lookup for the given input.

    Short search text (up to three characters) is treated as a country
    code, longer text as a name fragment. Search text wins over the region
    filter.
    """
    text = search_text.strip()
    if text:
        if len(text) <= MAX_CODE_LENGTH:
            return ByCode(text)
        return ByName(text)
    if region != ALL_REGIONS:
        return ByRegion(region)
    return AllCountries()


async def run_strategy(directory: ICountryDirectory, strategy: Strategy) -> list[Country]:
    """Execute one lookup. Errors propagate to the caller."""
    if isinstance(strategy, ByCode):
        return [await directory.find_by_code(strategy.code)]
    if isinstance(strategy, ByName):
        return await directory.find_by_name(strategy.name)
    if isinstance(strategy, ByRegion):
        return await directory.find_by_region(strategy.region)
    return await directory.list_all()


@dataclass(frozen=True)
class Page:
    """One page of listing results (1-based)."""

    items: list[Country]
    number: int
    total_pages: int
    total: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def total_pages(total: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(total / page_size))


def paginate(results: list[Country], page: int, page_size: int = PAGE_SIZE) -> Page:
    pages = total_pages(len(results), page_size)
    number = min(max(page, 1), pages)
    start = (number - 1) * page_size
    return Page(
        items=results[start:start + page_size],
        number=number,
        total_pages=pages,
        total=len(results),
    )


class ListingController:
    """
    Owns the listing view state: search text, region, page and results.

    Must be used from inside a running event loop. A failed lookup empties
    the results and is kept on `last_error`; it is never raised to the caller.
    """

    def __init__(
        self,
        directory: ICountryDirectory,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        page_size: int = PAGE_SIZE,
        on_change: Optional[Callable[["ListingController"], None]] = None,
    ):
        self._directory = directory
        self._debounce_seconds = debounce_seconds
        self._page_size = page_size
        self._on_change = on_change

        self.search_text = ""
        self.region = ALL_REGIONS
        self.page = 1
        self.results: list[Country] = []
        self.last_error: Optional[Exception] = None

        self._generation = 0
        self._timer: Optional[asyncio.Task] = None
        self._queries: set[asyncio.Task] = set()

    @property
    def strategy(self) -> Strategy:
        return choose_strategy(self.search_text, self.region)

    def set_search_text(self, text: str) -> None:
        self.search_text = text
        self._input_changed()

    def set_region(self, region: str) -> None:
        if region not in REGIONS:
            raise ValueError(f"Unknown region '{region}'. Expected one of: {', '.join(REGIONS)}")
        self.region = region
        self._input_changed()

    def current_page(self) -> Page:
        return paginate(self.results, self.page, self._page_size)

    def next_page(self) -> None:
        if self.current_page().has_next:
            self.page += 1

    def previous_page(self) -> None:
        if self.current_page().has_previous:
            self.page -= 1

    def go_to_page(self, page: int) -> None:
        self.page = paginate(self.results, page, self._page_size).number

    async def refresh(self) -> None:
        """Run the current lookup now, bypassing the debounce timer."""
        self._cancel_timer()
        self._generation += 1
        await self._query(self.strategy, self._generation)

    async def wait_until_idle(self) -> None:
        """Wait for the pending timer and every started query to finish."""
        while True:
            pending = [
                t for t in (self._timer, *self._queries)
                if t is not None and not t.done()
            ]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def close(self) -> None:
        self._cancel_timer()

    def _input_changed(self) -> None:
        self.page = 1
        self._cancel_timer()
        self._generation += 1
        self._timer = asyncio.get_running_loop().create_task(
            self._fire_after_quiet_period(self._generation)
        )

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def _fire_after_quiet_period(self, generation: int) -> None:
        await asyncio.sleep(self._debounce_seconds)
        # Run the query in its own task so a later change cancelling this
        # timer does not abort a request already in flight.
        task = asyncio.get_running_loop().create_task(self._query(self.strategy, generation))
        self._queries.add(task)
        task.add_done_callback(self._queries.discard)

    async def _query(self, strategy: Strategy, generation: int) -> None:
        error: Optional[Exception] = None
        try:
            results = await run_strategy(self._directory, strategy)
        except Exception as e:
            logger.warning(f"Listing lookup {strategy} failed: {e}")
            results, error = [], e

        if generation != self._generation:
            logger.debug(f"Discarding stale listing response for {strategy}")
            return

        self.results = results
        self.last_error = error
        if self._on_change is not None:
            self._on_change(self)
