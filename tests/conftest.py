"""Test fixtures for the catalog service and browsing client."""

import pytest
from fastapi.testclient import TestClient

# Reset global service before importing app
import stackshop.catalog.service as service_module
from stackshop.catalog import Product, ProductRepository, ProductService


@pytest.fixture(autouse=True)
def reset_service():
    """Reset global product service before each test."""
    service_module._product_service = None
    yield
    service_module._product_service = None


@pytest.fixture
def client():
    """Create test client."""
    from stackshop.main import app
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_products() -> list[Product]:
    """Small hand-made catalog."""
    return [
        Product(
            stackline_sku="SKU-1",
            title="Ergonomic Office Chair",
            category_name="Furniture",
            sub_category_name="Office Chairs",
            image_urls=["https://img.example/1a.jpg", "https://img.example/1b.jpg"],
        ),
        Product(
            stackline_sku="SKU-2",
            title="Standing Desk",
            category_name="Furniture",
            sub_category_name="Desks",
            image_urls=["https://img.example/2.jpg"],
        ),
        Product(
            stackline_sku="SKU-3",
            title="Camping Chair",
            category_name="Outdoors",
            sub_category_name="Camping",
            image_urls=[],
        ),
        Product(
            stackline_sku="SKU-4",
            title="Wireless Headphones",
            category_name="Electronics",
            sub_category_name="Audio",
            image_urls=["https://img.example/4.jpg"],
        ),
        Product(
            stackline_sku="SKU-5",
            title="Gaming CHAIR with Footrest",
            category_name="Furniture",
            sub_category_name="Office Chairs",
            image_urls=["https://img.example/5.jpg"],
        ),
    ]


@pytest.fixture
def repository(sample_products: list[Product]) -> ProductRepository:
    """Create repository over the small catalog."""
    return ProductRepository(sample_products)


@pytest.fixture
def product_service(repository: ProductRepository) -> ProductService:
    """Create product service over the small catalog."""
    return ProductService(repository)
