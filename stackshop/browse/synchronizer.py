"""Query-state synchronizer for the catalog browser.

Owns the editable browsing controls (search text, category, subcategory,
page) and keeps them consistent with the URL query mapping. Every
effective change navigates once and issues exactly one product fetch with
the full current parameter set.

Fetches run as asyncio tasks tagged with a sequence number; only the
response to the most recently issued request is applied, so a slow stale
response can never overwrite newer results.
"""

import asyncio
from collections.abc import Callable, Coroutine, Mapping
from dataclasses import replace
from typing import Any

import httpx
import structlog

from stackshop.browse.client import APIResponse, CatalogAPIClient
from stackshop.browse.state import (
    DEFAULT_PAGE_SIZE,
    CategoryChanged,
    ClearAll,
    Event,
    NextPage,
    PageInfo,
    PrevPage,
    QueryState,
    SearchCommitted,
    SubCategoryChanged,
    clean_value,
    reduce,
)
from stackshop.catalog.models import Product

logger = structlog.get_logger()

SEARCH_DEBOUNCE_SECONDS = 0.3

Navigate = Callable[[dict[str, str]], None]


def _parse_page(data: Any) -> tuple[list[Product], int]:
    """Parse a ``{"products": [...], "total": n}`` body.

    Raises:
        ValueError: If the body does not have that shape.
    """
    if not isinstance(data, dict):
        raise ValueError("product list response is not an object")
    products = [Product.model_validate(p) for p in data.get("products") or []]
    return products, int(data.get("total") or 0)


def _parse_names(data: Any, key: str) -> list[str]:
    if not isinstance(data, dict):
        return []
    names = data.get(key)
    if not isinstance(names, list):
        return []
    return [str(name) for name in names]


class QueryStateSynchronizer:
    """Keeps browsing controls, URL parameters and fetched results in sync.

    Must be driven from a running event loop. ``navigate`` receives the new
    URL query mapping on every effective change (history push).

    Example usage:
        sync = QueryStateSynchronizer(
            CatalogAPIClient("http://localhost:8000"),
            params={"category": "Furniture"},
            navigate=lambda params: history.append(params),
        )
        await sync.start()
        sync.set_search_text("chair")
        await sync.wait_idle()
        print(sync.page_info.label, [p.title for p in sync.products])
    """

    def __init__(
        self,
        client: CatalogAPIClient,
        params: Mapping[str, str] | None = None,
        navigate: Navigate | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        search_delay: float = SEARCH_DEBOUNCE_SECONDS,
    ) -> None:
        """Initialize the synchronizer from the current URL parameters.

        Args:
            client: Catalog API client.
            params: Current URL query parameters.
            navigate: Callback receiving the new URL parameters.
            page_size: Fixed page size. Overrides any ``limit`` in the URL.
            search_delay: Debounce delay for search input, in seconds.
        """
        self.client = client
        self.page_size = page_size
        self.search_delay = search_delay
        self._navigate = navigate

        self.params: dict[str, str] = dict(params or {})
        self.state = replace(
            QueryState.from_params(self.params, default_limit=page_size),
            limit=page_size,
        )

        # Visible control state
        self.search_text = self.state.search or ""
        self.categories: list[str] = []
        self.sub_categories: list[str] = []

        # Fetched results
        self.products: list[Product] = []
        self.total = 0
        self.loading = False

        self._search_generation = 0
        self._search_task: asyncio.Task | None = None
        self._products_seq = 0
        self._sub_categories_seq = 0
        self._tasks: set[asyncio.Task] = set()

    # =========================================================================
    # Derived views
    # =========================================================================

    @property
    def page_info(self) -> PageInfo:
        """Pagination view for the current state and total."""
        return PageInfo.from_state(self.state, self.total)

    @property
    def has_active_filters(self) -> bool:
        """Check if there is anything for "clear all" to clear."""
        return bool(self.search_text) or self.state.has_filters

    @property
    def query_string(self) -> str:
        """Current URL query string."""
        return str(httpx.QueryParams(self.params))

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def start(self) -> None:
        """Load categories, then fetch subcategories and the first page."""
        await self._load_categories()
        if self.state.category:
            self._refresh_sub_categories(self.state.category)
        self._refresh_products()

    async def wait_idle(self) -> None:
        """Wait for pending debounce and fetch tasks to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Cancel pending tasks."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._search_task = None
        self.loading = False

    # =========================================================================
    # Control events
    # =========================================================================

    def set_search_text(self, text: str) -> None:
        """Update the search box and schedule a debounced commit.

        A newer edit cancels the pending commit.

        Args:
            text: Current search box contents.
        """
        self.search_text = text
        self._cancel_pending_search()
        self._search_task = self._spawn(
            self._commit_search_later(self._search_generation, text)
        )

    def select_category(self, category: str | None) -> None:
        """Select or clear the category.

        Clears the subcategory selection and reloads the subcategory list.

        Args:
            category: Category name, None or empty to clear.
        """
        previous = self.state.category
        if not self._dispatch(CategoryChanged(category)):
            return

        if self.state.category is None:
            self._sub_categories_seq += 1
            self.sub_categories = []
        elif self.state.category != previous:
            self._refresh_sub_categories(self.state.category)

    def select_sub_category(self, sub_category: str | None) -> None:
        """Select or clear the subcategory.

        Args:
            sub_category: Subcategory name, None or empty to clear.
        """
        self._dispatch(SubCategoryChanged(sub_category))

    def next_page(self) -> None:
        """Go to the next page.

        No-op on the last page, and while a product fetch is in flight:
        ``total`` still belongs to the previous result set until it lands.
        """
        if self.loading:
            return
        self._dispatch(NextPage(self.total))

    def prev_page(self) -> None:
        """Go to the previous page. No-op on the first page or while loading."""
        if self.loading:
            return
        self._dispatch(PrevPage())

    def clear_all(self) -> None:
        """Reset every filter and the offset in a single navigation."""
        self._cancel_pending_search()
        self.search_text = ""

        state = reduce(self.state, ClearAll())
        params = state.to_params()
        if state == self.state and params == self.params:
            return

        self._sub_categories_seq += 1
        self.sub_categories = []
        self._apply(state, params)

    # =========================================================================
    # Internals
    # =========================================================================

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _cancel_pending_search(self) -> None:
        self._search_generation += 1
        if self._search_task is not None:
            self._search_task.cancel()
            self._search_task = None

    async def _commit_search_later(self, generation: int, text: str) -> None:
        await asyncio.sleep(self.search_delay)
        if generation != self._search_generation:
            return
        self._search_task = None
        if clean_value(text) == self.state.search:
            return
        self._dispatch(SearchCommitted(text))

    def _dispatch(self, event: Event) -> bool:
        """Apply an event; navigate and fetch if the state changed.

        Returns:
            True if the state changed.
        """
        state = reduce(self.state, event)
        if state == self.state:
            return False
        self._apply(state, state.merge_into(self.params))
        return True

    def _apply(self, state: QueryState, params: dict[str, str]) -> None:
        changed = state != self.state
        self.state = state
        self.params = params

        logger.debug("Query state changed", params=params)

        if self._navigate is not None:
            self._navigate(dict(params))
        if changed:
            self._refresh_products()

    def _refresh_products(self) -> None:
        self._products_seq += 1
        self.loading = True
        self._spawn(self._fetch_products(self._products_seq, self.state.to_params()))

    async def _fetch_products(self, seq: int, params: dict[str, str]) -> None:
        response = await self.client.list_products(params)

        if seq != self._products_seq:
            logger.debug("Discarding stale product response", seq=seq, latest=self._products_seq)
            return

        products, total = self._products_from(response)
        self.products = products
        self.total = total
        self.loading = False

    def _products_from(self, response: APIResponse) -> tuple[list[Product], int]:
        if not response.success:
            logger.warning(
                "Product fetch failed",
                error_code=response.error.error_code if response.error else None,
                message=response.error.message if response.error else None,
            )
            return [], 0

        try:
            return _parse_page(response.data)
        except (TypeError, ValueError) as e:
            logger.warning("Invalid product list response", error=str(e))
            return [], 0

    async def _load_categories(self) -> None:
        response = await self.client.list_categories()
        if not response.success:
            logger.warning(
                "Category fetch failed",
                error_code=response.error.error_code if response.error else None,
            )
            self.categories = []
            return
        self.categories = _parse_names(response.data, "categories")

    def _refresh_sub_categories(self, category: str) -> None:
        self._sub_categories_seq += 1
        self._spawn(self._fetch_sub_categories(self._sub_categories_seq, category))

    async def _fetch_sub_categories(self, seq: int, category: str) -> None:
        response = await self.client.list_subcategories(category)

        if seq != self._sub_categories_seq:
            logger.debug("Discarding stale subcategory response", category=category)
            return

        if not response.success:
            logger.warning(
                "Subcategory fetch failed",
                category=category,
                error_code=response.error.error_code if response.error else None,
            )
            self.sub_categories = []
            return
        self.sub_categories = _parse_names(response.data, "subCategories")
