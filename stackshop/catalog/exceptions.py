"""Catalog exceptions.

Errors raised while loading or querying the product catalog.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CatalogDataError(CatalogError):
    """Raised when the product dataset cannot be loaded.

    Covers a missing file, malformed JSON, records that fail validation
    and duplicate SKUs.
    """

    def __init__(self, source: str, reason: str, **details: Any) -> None:
        """Initialize catalog data error.

        Args:
            source: Path or label of the dataset being loaded.
            reason: What was wrong with it.
            **details: Extra context (record index, SKU, ...).
        """
        super().__init__(
            f"Cannot load catalog from {source}: {reason}",
            details={"source": source, "reason": reason, **details},
        )
