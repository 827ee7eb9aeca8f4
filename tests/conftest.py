"""Pytest fixtures for async SQLite test database and API client."""
from datetime import datetime
from decimal import Decimal

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from salesdash.app import app
from salesdash.database.database import Base, get_db
from salesdash.endpoints.dependencies import get_http_client
from salesdash.models.transaction import Transaction

SEED_URL = "https://seed.example.com/product_transaction.json"

# Shaped like the public seed dataset: numeric ids, offset timestamps
SEED_RECORDS = [
    {
        "id": 1,
        "title": "Fjallraven Foldsack Backpack",
        "price": 329.85,
        "description": "Your perfect pack for everyday use and walks in the forest.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "sold": False,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
    },
    {
        "id": 2,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 44.6,
        "description": "Slim-fitting style, contrast raglan long sleeve.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "sold": False,
        "dateOfSale": "2021-10-27T20:29:54+05:30",
    },
    {
        "id": 3,
        "title": "Mens Cotton Jacket",
        "price": 615.89,
        "description": "Great outerwear jackets for Spring/Autumn/Winter.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-07-27T20:29:54+05:30",
    },
]


@pytest_asyncio.fixture
async def db_session():
    """Create an in-memory SQLite async session for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def sample_transactions(db_session):
    """Create sample transactions spread over several months and years."""
    transactions = [
        # March: one per low, second and top price bucket
        Transaction(
            id="1",
            title="Solid Cotton Shirt",
            description="Casual slim fit shirt",
            price=Decimal("50.00"),
            date_of_sale=datetime(2021, 3, 5, 10, 0),
            category="men's clothing",
            sold=True,
        ),
        Transaction(
            id="2",
            title="Gold Plated Ring",
            description="Classic jewelery for every day",
            price=Decimal("150.00"),
            date_of_sale=datetime(2022, 3, 15, 18, 30),
            category="jewelery",
            sold=False,
        ),
        Transaction(
            id="3",
            title="Laptop Backpack",
            description="Fits 15 inch LAPTOPS and tablets",
            price=Decimal("950.00"),
            date_of_sale=datetime(2021, 3, 27, 9, 15),
            category="electronics",
            sold=True,
        ),
        # April
        Transaction(
            id="4",
            title="USB Drive 64GB",
            description="Fast flash storage",
            price=Decimal("150.00"),
            date_of_sale=datetime(2021, 4, 10, 12, 0),
            category="electronics",
            sold=True,
        ),
        # December 3rd: the day must not be taken for the month
        Transaction(
            id="5",
            title="Rain Jacket",
            description="Waterproof 100% polyester",
            price=Decimal("320.50"),
            date_of_sale=datetime(2021, 12, 3, 8, 0),
            category="women's clothing",
            sold=False,
        ),
        # No sale date: never matches a month
        Transaction(
            id="6",
            title="Mystery Box",
            description="Unknown contents",
            price=Decimal("10.00"),
            date_of_sale=None,
            category="misc",
            sold=True,
        ),
    ]
    db_session.add_all(transactions)
    await db_session.commit()
    return transactions


@pytest.fixture
def seed_handler():
    """Mutable handler for the fake seed source; tests may replace ``handler.respond``."""

    class Handler:
        def __init__(self):
            self.requests = []
            self.respond = lambda request: httpx.Response(200, json=SEED_RECORDS)

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.respond(request)

    return Handler()


@pytest_asyncio.fixture
async def http_client(seed_handler):
    """Outbound client whose requests are answered by ``seed_handler``."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(seed_handler)) as client:
        yield client


@pytest_asyncio.fixture
async def api_client(db_session, http_client, monkeypatch):
    """Client for the FastAPI app bound to the test database and seed source."""
    from salesdash.settings import settings

    monkeypatch.setattr(settings, "SEED_URL", SEED_URL)

    async def _get_db():
        yield db_session

    async def _get_http_client():
        return http_client

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_http_client] = _get_http_client
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
