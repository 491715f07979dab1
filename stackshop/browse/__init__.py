"""Catalog browsing client.

Query state, its pure transitions, the HTTP client for the catalog API,
and the synchronizer that ties controls, URL parameters and fetched
results together.
"""

from stackshop.browse.client import APIError, APIResponse, CatalogAPIClient
from stackshop.browse.state import (
    CategoryChanged,
    ClearAll,
    NextPage,
    PageInfo,
    PrevPage,
    QueryState,
    SearchCommitted,
    SubCategoryChanged,
    reduce,
)
from stackshop.browse.synchronizer import QueryStateSynchronizer

__all__ = [
    # Client
    "APIError",
    "APIResponse",
    "CatalogAPIClient",
    # State
    "CategoryChanged",
    "ClearAll",
    "NextPage",
    "PageInfo",
    "PrevPage",
    "QueryState",
    "SearchCommitted",
    "SubCategoryChanged",
    "reduce",
    # Synchronizer
    "QueryStateSynchronizer",
]
