"""Browsing query state and its transitions.

The query state is the union of the filter (search, category,
subcategory) and the page window (limit, offset). It round-trips through
the flat URL query mapping used for shareable links, and changes only
through ``reduce(state, event)``.

Transition rules:
    SearchCommitted      search := text,        offset := 0
    CategoryChanged      category := value,     sub_category := None, offset := 0
    SubCategoryChanged   sub_category := value, offset := 0
    NextPage(total)      offset += limit        (no-op when offset + limit >= total)
    PrevPage             offset -= limit >= 0   (no-op when offset <= 0)
    ClearAll             defaults
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace

DEFAULT_PAGE_SIZE = 20

# URL query parameter names
SEARCH_PARAM = "search"
CATEGORY_PARAM = "category"
SUB_CATEGORY_PARAM = "subCategory"
LIMIT_PARAM = "limit"
OFFSET_PARAM = "offset"

FILTER_PARAMS = (SEARCH_PARAM, CATEGORY_PARAM, SUB_CATEGORY_PARAM)
STATE_PARAMS = (*FILTER_PARAMS, LIMIT_PARAM, OFFSET_PARAM)


def clean_value(value: str | None) -> str | None:
    """Treat empty and whitespace-only values as absent."""
    if value is None or not value.strip():
        return None
    return value


def _parse_int(value: str | None, default: int, minimum: int) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        return default
    return number if number >= minimum else default


# ============================================================================
# Query State
# ============================================================================


@dataclass(frozen=True)
class QueryState:
    """Canonical browsing state.

    Attributes:
        search: Committed search text, None when not searching.
        category: Selected category.
        sub_category: Selected subcategory, scoped to the category.
        limit: Page size.
        offset: Zero-based index of the first product on the page.
    """

    search: str | None = None
    category: str | None = None
    sub_category: str | None = None
    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset}")
        object.__setattr__(self, "search", clean_value(self.search))
        object.__setattr__(self, "category", clean_value(self.category))
        object.__setattr__(self, "sub_category", clean_value(self.sub_category))

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, str],
        default_limit: int = DEFAULT_PAGE_SIZE,
    ) -> "QueryState":
        """Parse state from a URL query mapping.

        Absent or blank filters mean "no filter". A missing, non-numeric or
        out-of-range limit or offset falls back to its default.

        Args:
            params: Query parameters.
            default_limit: Page size used when ``limit`` is unusable.

        Returns:
            Parsed state.
        """
        return cls(
            search=params.get(SEARCH_PARAM),
            category=params.get(CATEGORY_PARAM),
            sub_category=params.get(SUB_CATEGORY_PARAM),
            limit=_parse_int(params.get(LIMIT_PARAM), default_limit, minimum=1),
            offset=_parse_int(params.get(OFFSET_PARAM), 0, minimum=0),
        )

    def to_params(self) -> dict[str, str]:
        """Serialize to a flat URL query mapping.

        Empty filters are omitted; limit and offset are always present.
        """
        params = {}
        if self.search is not None:
            params[SEARCH_PARAM] = self.search
        if self.category is not None:
            params[CATEGORY_PARAM] = self.category
        if self.sub_category is not None:
            params[SUB_CATEGORY_PARAM] = self.sub_category
        params[LIMIT_PARAM] = str(self.limit)
        params[OFFSET_PARAM] = str(self.offset)
        return params

    def merge_into(self, params: Mapping[str, str]) -> dict[str, str]:
        """Write this state over an existing URL query mapping.

        Keys owned by the state are set or removed; any other key the
        mapping carries is kept as is.

        Args:
            params: Current URL query parameters.

        Returns:
            New mapping.
        """
        merged = {k: v for k, v in params.items() if k not in STATE_PARAMS}
        merged.update(self.to_params())
        return merged

    @property
    def has_filters(self) -> bool:
        """Check if any filter is active."""
        return any((self.search, self.category, self.sub_category))


# ============================================================================
# Events
# ============================================================================


@dataclass(frozen=True)
class SearchCommitted:
    """Debounced search text was committed."""

    text: str | None


@dataclass(frozen=True)
class CategoryChanged:
    """A category was selected or cleared."""

    category: str | None


@dataclass(frozen=True)
class SubCategoryChanged:
    """A subcategory was selected or cleared."""

    sub_category: str | None


@dataclass(frozen=True)
class NextPage:
    """Move one page forward given the current result total."""

    total: int


@dataclass(frozen=True)
class PrevPage:
    """Move one page back."""


@dataclass(frozen=True)
class ClearAll:
    """Reset every filter and the offset."""


Event = SearchCommitted | CategoryChanged | SubCategoryChanged | NextPage | PrevPage | ClearAll


def reduce(state: QueryState, event: Event) -> QueryState:
    """Apply an event to a state.

    Args:
        state: Current state.
        event: Event to apply.

    Returns:
        Next state. The same object when the event is a no-op.

    Raises:
        TypeError: If the event type is unknown.
    """
    if isinstance(event, SearchCommitted):
        return replace(state, search=event.text, offset=0)

    if isinstance(event, CategoryChanged):
        return replace(state, category=event.category, sub_category=None, offset=0)

    if isinstance(event, SubCategoryChanged):
        return replace(state, sub_category=event.sub_category, offset=0)

    if isinstance(event, NextPage):
        if state.offset + state.limit >= event.total:
            return state
        return replace(state, offset=state.offset + state.limit)

    if isinstance(event, PrevPage):
        if state.offset <= 0:
            return state
        return replace(state, offset=max(0, state.offset - state.limit))

    if isinstance(event, ClearAll):
        return QueryState(limit=state.limit)

    raise TypeError(f"Unknown query state event: {event!r}")


# ============================================================================
# Page Info
# ============================================================================


@dataclass(frozen=True)
class PageInfo:
    """Pagination view derived from a state and a result total."""

    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_state(cls, state: QueryState, total: int) -> "PageInfo":
        """Compute page info.

        Args:
            state: Query state.
            total: Number of products matching the filters.

        Returns:
            Page info.
        """
        return cls(
            current_page=state.offset // state.limit + 1,
            total_pages=max(1, math.ceil(total / state.limit)),
            has_next=state.offset + state.limit < total,
            has_prev=state.offset > 0,
        )

    @property
    def label(self) -> str:
        """Human-readable page label, e.g. "Page 3 / 3"."""
        return f"Page {self.current_page} / {self.total_pages}"
