"""
Shared pytest fixtures for all tests.

This module provides common fixtures for database sessions, mock
repositories and caches, and test data.
"""

import os
from datetime import UTC, datetime
from decimal import Decimal
from typing import AsyncGenerator
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

from storefront.database.async_db import create_tables  # noqa: E402
from storefront.domains.cart.domain.entities import Cart, CartItem  # noqa: E402
from storefront.domains.cart.domain.value_objects import VariantSnapshot  # noqa: E402
from storefront.models.db import Product, ProductVariant  # noqa: E402


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def db_url() -> str:
    """Return test database URL (in-memory SQLite unless overridden)."""
    return os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture
async def async_engine(db_url: str):
    """Create async database engine with the cart tables."""
    if db_url.startswith("sqlite"):
        engine = create_async_engine(
            db_url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(db_url, echo=False, pool_pre_ping=True)

    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(async_engine) -> async_sessionmaker:
    """Create async session factory."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a database session for a test.

    Each test gets a fresh in-memory database through the engine fixture.
    """
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(db_session: AsyncSession) -> dict[str, ProductVariant]:
    """
    Seed a small catalog.

    Returns variants keyed by name:
    - v1: published, stock 10, price 1000
    - v2: published, stock 5, price 1200, sale price 999
    - draft: draft product, stock 3, price 500
    """
    published = Product(id="p-published", name="T-Shirt", slug="t-shirt", status="PUBLISHED")
    draft = Product(id="p-draft", name="Hoodie", slug="hoodie", status="DRAFT")
    variants = {
        "v1": ProductVariant(
            id="v1", product=published, sku="TS-S", price=Decimal("1000"), stock_quantity=10
        ),
        "v2": ProductVariant(
            id="v2",
            product=published,
            sku="TS-M",
            price=Decimal("1200"),
            sale_price=Decimal("999"),
            stock_quantity=5,
        ),
        "draft": ProductVariant(
            id="draft", product=draft, sku="HD-S", price=Decimal("500"), stock_quantity=3
        ),
    }
    db_session.add_all([published, draft, *variants.values()])
    await db_session.commit()
    return variants


# ============================================================================
# REDIS FIXTURES
# ============================================================================


@pytest.fixture
def mock_redis() -> Mock:
    """Create a mock Redis client."""
    mock = Mock(spec=Redis)
    mock.get = AsyncMock(return_value=None)
    mock.set = AsyncMock(return_value=True)
    mock.delete = AsyncMock(return_value=1)
    mock.ping = AsyncMock(return_value=True)
    mock.aclose = AsyncMock()
    return mock


# ============================================================================
# CART FIXTURES
# ============================================================================


@pytest.fixture
def mock_cart_repository():
    """Mock cart repository"""
    return AsyncMock()


@pytest.fixture
def mock_cache():
    """Mock cache: every read is a miss"""
    cache = AsyncMock()
    cache.get.return_value = None
    cache.set.return_value = True
    cache.delete.return_value = True
    cache.delete_many.return_value = 2
    return cache


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 10, 30, tzinfo=UTC)


@pytest.fixture
def make_cart(fixed_now):
    """Factory for Cart entities."""

    def _make(cart_id: str = "cart-1", user_id: str | None = None, session_id: str | None = "session-1"):
        return Cart.create(
            id=cart_id,
            user_id=user_id,
            session_id=session_id,
            created_at=fixed_now,
            updated_at=fixed_now,
        )

    return _make


@pytest.fixture
def make_item(fixed_now):
    """Factory for CartItem entities."""

    def _make(
        item_id: str = "item-1",
        cart_id: str = "cart-1",
        variant_id: str = "v1",
        quantity: int = 1,
        price: Decimal | int = Decimal("1000"),
    ):
        return CartItem.create(
            id=item_id,
            cart_id=cart_id,
            variant_id=variant_id,
            quantity=quantity,
            price_at_add=price,
            created_at=fixed_now,
        )

    return _make


@pytest.fixture
def make_variant():
    """Factory for VariantSnapshot values."""

    def _make(
        variant_id: str = "v1",
        stock_quantity: int = 10,
        price: Decimal | int = Decimal("1000"),
        sale_price: Decimal | int | None = None,
        product_status: str = "PUBLISHED",
    ):
        return VariantSnapshot(
            id=variant_id,
            stock_quantity=stock_quantity,
            price=price,
            sale_price=sale_price,
            product_status=product_status,
        )

    return _make
