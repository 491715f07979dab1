"""StackShop product catalog.

This package provides:
- Catalog Query Service: FastAPI endpoints over a static product dataset
- Query-State Synchronizer: client-side browsing state kept in sync with
  URL query parameters, with debounced search and stale-response handling
"""

__version__ = "1.0.0"
