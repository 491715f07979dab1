"""Catalog API Client.

Thin HTTP client for the catalog REST API used by the browsing
synchronizer. Failures are returned as ``APIResponse`` values rather
than raised, so callers can fall back to empty results.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx
import structlog

logger = structlog.get_logger()


@dataclass
class APIError:
    """Represents an API error response."""

    error_code: str
    message: str
    status_code: int
    details: Any = field(default_factory=list)


@dataclass
class APIResponse:
    """Represents an API response."""

    success: bool
    data: dict[str, Any] | list[Any] | None = None
    error: APIError | None = None


class CatalogAPIClient:
    """HTTP client for the catalog REST API.

    Example usage:
        client = CatalogAPIClient("http://localhost:8000")
        response = await client.list_products({"search": "chair", "limit": "20"})
        if response.success:
            products = response.data["products"]
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Catalog API base URL.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> APIResponse:
        """Make a GET request.

        Args:
            path: API endpoint path.
            params: Query parameters. None and empty values are dropped.

        Returns:
            APIResponse with success status and data or error.
        """
        client = await self._get_client()

        if params:
            params = {k: v for k, v in params.items() if v is not None and v != ""}

        try:
            logger.debug("Making API request", path=path, params=params)

            response = await client.get(path, params=params)

            if response.status_code >= 400:
                try:
                    error_data = response.json()
                except ValueError:
                    error_data = {}
                return APIResponse(
                    success=False,
                    error=APIError(
                        error_code=error_data.get("error_code", "HTTP_ERROR"),
                        message=error_data.get("error", f"HTTP {response.status_code}"),
                        status_code=response.status_code,
                        details=error_data.get("details", []),
                    ),
                )

            return APIResponse(success=True, data=response.json())

        except httpx.TimeoutException as e:
            logger.error("API request timeout", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="TIMEOUT",
                    message=f"Request timed out: {path}",
                    status_code=504,
                ),
            )
        except httpx.RequestError as e:
            logger.error("API request failed", path=path, error=str(e))
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="REQUEST_ERROR",
                    message=f"Request failed: {str(e)}",
                    status_code=500,
                ),
            )
        except Exception as e:
            logger.exception("Unexpected API error", path=path)
            return APIResponse(
                success=False,
                error=APIError(
                    error_code="INTERNAL_ERROR",
                    message=f"Internal error: {str(e)}",
                    status_code=500,
                ),
            )

    # =========================================================================
    # Product Endpoints
    # =========================================================================

    async def list_products(self, params: Mapping[str, str]) -> APIResponse:
        """List products.

        Args:
            params: Query parameters (search, category, subCategory,
                limit, offset).

        Returns:
            APIResponse with ``{"products": [...], "total": n}``.
        """
        return await self._get("/api/products", params=params)

    async def get_product(self, sku: str) -> APIResponse:
        """Get a product by SKU.

        Args:
            sku: Product SKU.

        Returns:
            APIResponse with product data, or a PRODUCT_NOT_FOUND error.
        """
        return await self._get(f"/api/products/{quote(sku, safe='')}")

    # =========================================================================
    # Category Endpoints
    # =========================================================================

    async def list_categories(self) -> APIResponse:
        """List category names.

        Returns:
            APIResponse with ``{"categories": [...]}``.
        """
        return await self._get("/api/categories")

    async def list_subcategories(self, category: str | None = None) -> APIResponse:
        """List subcategory names of a category.

        Args:
            category: Category name.

        Returns:
            APIResponse with ``{"subCategories": [...]}``.
        """
        return await self._get("/api/subcategories", params={"category": category})
