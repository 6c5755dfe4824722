# client/feed_controller.py

"""
Feed controller driving one paginated, filtered view of articles.

The controller owns the view's `FeedQuery` and the last applied `FeedPage`.
Every navigation takes a new generation number; a response is applied only
if its generation is still the current one, so the last navigation wins
even when an older request resolves later.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from .gateway_client import GatewayClientError, GatewayClientInterface
from .redaction import redact_page
from ..schemas.news_schemas import Article, FeedPage, FeedQuery
from ..core.config import settings
from common.logger import LoggerFactory, LoggerType, LogLevel

FAILURE_MESSAGE = "Failed to fetch news. Please try again later."

logger = LoggerFactory.get_logger(
    name="feed-controller",
    logger_type=LoggerType.STANDARD,
    level=LogLevel.INFO,
    file_level=LogLevel.DEBUG,
    log_file=settings.log_file("feed_controller"),
)


class FeedState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass(frozen=True)
class FeedFailure:
    """Failed fetch, whatever the cause."""

    message: str = FAILURE_MESSAGE


def compute_total_pages(total_results: int, page_size: int) -> int:
    """Number of pages for an upstream total, never less than one."""
    return max(1, math.ceil(total_results / page_size))


async def load_page(
    client: GatewayClientInterface, query: FeedQuery
) -> Union[FeedPage, FeedFailure]:
    """
    Fetch one page of the feed and apply the redaction filter.

    Args:
        client: Gateway client used for the single request
        query: Mode, selector and pagination of the request

    Returns:
        The filtered FeedPage, or a FeedFailure carrying the fixed message
    """
    try:
        envelope = await client.fetch_feed(query)
    except GatewayClientError as e:
        logger.warning(f"Feed request failed ({e.status_code}): {e.message}")
        return FeedFailure()
    except Exception as e:
        logger.error(f"Unexpected error while fetching feed: {str(e)}")
        return FeedFailure()

    if not envelope.success or envelope.data is None:
        logger.warning(f"Gateway reported failure: {envelope.message}")
        return FeedFailure()

    page = redact_page(envelope.data)
    dropped = len(envelope.data.articles) - len(page.articles)
    if dropped:
        logger.debug(f"Dropped {dropped} redacted articles")
    return page


class FeedController:
    """
    Per-view controller: Idle -> Loading -> {Loaded, Errored}.

    Navigation from any state goes back to Loading. `close()` is the
    unmount; results of requests still in flight are ignored afterwards.
    """

    def __init__(
        self,
        client: GatewayClientInterface,
        query: FeedQuery,
        on_change: Optional[Callable[["FeedController"], None]] = None,
    ):
        self.client = client
        self._query = query
        self._on_change = on_change
        self._state = FeedState.IDLE
        self._page: Optional[FeedPage] = None
        self._total_results = 0
        self._error_message: Optional[str] = None
        self._generation = 0
        self._closed = False

    @property
    def query(self) -> FeedQuery:
        return self._query

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state == FeedState.LOADING

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def feed_page(self) -> Optional[FeedPage]:
        return self._page

    @property
    def articles(self) -> List[Article]:
        return list(self._page.articles) if self._page else []

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def total_results(self) -> int:
        return self._total_results

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self._total_results, self._query.page_size)

    @property
    def can_next(self) -> bool:
        return self._query.page < self.total_pages

    @property
    def can_prev(self) -> bool:
        return self._query.page > 1

    @property
    def page_indicator(self) -> str:
        return f"{self._query.page} of {self.total_pages}"

    async def start(self) -> bool:
        """Load the initial page of the view."""
        return await self._load(self._query)

    async def next(self) -> bool:
        if not self.can_next:
            return False
        return await self._load(self._query.with_page(self._query.page + 1))

    async def prev(self) -> bool:
        if not self.can_prev:
            return False
        return await self._load(self._query.with_page(self._query.page - 1))

    async def change_selector(self, selector: str) -> bool:
        """Switch category, country or search text and go back to page 1."""
        target = self._query.with_selector(selector)
        return await self._load(target, new_feed=True)

    async def navigate(self, query: FeedQuery) -> bool:
        """Switch to another feed (route change); always starts at page 1.

        The page size of the session is kept whatever the target carries.
        """
        target = FeedQuery(
            mode=query.mode,
            page=1,
            page_size=self._query.page_size,
            selector=query.selector,
        )
        return await self._load(target, new_feed=True)

    async def refresh(self) -> bool:
        """Re-issue the current query, the manual retry after an error."""
        return await self._load(self._query)

    def close(self) -> None:
        self._closed = True
        self._generation += 1

    async def _load(self, query: FeedQuery, new_feed: bool = False) -> bool:
        """
        Issue a request for `query` and apply its result if still current.

        Returns:
            True if the result was applied, False if it was superseded
        """
        if self._closed:
            logger.debug("Ignoring navigation on a closed controller")
            return False

        if new_feed:
            # Count of the previous feed no longer applies
            self._total_results = 0
        self._generation += 1
        generation = self._generation
        self._query = query
        self._state = FeedState.LOADING
        self._page = None
        self._error_message = None
        self._notify()

        logger.debug(
            f"Loading {query.mode.value} '{query.selector}' page {query.page} "
            f"(generation {generation})"
        )
        result = await load_page(self.client, query)

        if generation != self._generation:
            logger.debug(
                f"Discarding superseded result of generation {generation} "
                f"(current {self._generation})"
            )
            return False

        if isinstance(result, FeedFailure):
            self._state = FeedState.ERRORED
            self._error_message = result.message
        else:
            self._state = FeedState.LOADED
            self._page = result
            self._total_results = result.total_results

        self._notify()
        return True

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self)
