"""Test configuration and fixtures"""

from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from tavola.main import app
from tavola.database import Base, get_db
from tavola.models.table import DiningArea, RestaurantTable, TableStatus
from tavola.models.user import User, UserRole
from tavola.api.auth import create_access_token, get_password_hash


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def future_date() -> date:
    """A day safely in the future for bookings"""
    return date.today() + timedelta(days=7)


async def _make_user(db, username: str, role: UserRole, password: str = "testpass123") -> User:
    user = User(
        email=f"{username}@example.com",
        username=username,
        hashed_password=get_password_hash(password),
        first_name=username.title(),
        role=role,
        is_active=True,
        is_verified=True,
    )
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
async def test_user(test_db):
    """Create a customer account"""
    return await _make_user(test_db, "guest", UserRole.CUSTOMER)


@pytest.fixture
async def test_staff_user(test_db):
    return await _make_user(test_db, "host", UserRole.STAFF)


@pytest.fixture
async def test_manager_user(test_db):
    return await _make_user(test_db, "manager", UserRole.MANAGER)


@pytest.fixture
async def test_dining_area(test_db):
    area = DiningArea(name="Main Room", description="Ground floor", capacity=40)
    test_db.add(area)
    await test_db.commit()
    return area


@pytest.fixture
async def test_tables(test_db, test_dining_area):
    """
    Floor used by availability tests, keyed by table number:
    two 2-tops, a 3-top, two 4-tops, a 6-top, an 8-top, a 2-top under
    maintenance and an inactive 2-top.
    """
    layout = [
        ("A1", 2, TableStatus.AVAILABLE, True),
        ("A2", 2, TableStatus.AVAILABLE, True),
        ("B1", 3, TableStatus.AVAILABLE, True),
        ("C1", 4, TableStatus.OCCUPIED, True),
        ("C2", 4, TableStatus.AVAILABLE, True),
        ("D1", 6, TableStatus.AVAILABLE, True),
        ("E1", 8, TableStatus.AVAILABLE, True),
        ("M1", 2, TableStatus.MAINTENANCE, True),
        ("X1", 2, TableStatus.AVAILABLE, False),
    ]
    tables = {}
    for number, capacity, status, is_active in layout:
        table = RestaurantTable(
            dining_area_id=test_dining_area.id,
            table_number=number,
            capacity=capacity,
            status=status,
            is_active=is_active,
        )
        test_db.add(table)
        tables[number] = table
    await test_db.commit()
    return tables


@pytest.fixture
async def client(test_db):
    """Create test client with overridden database"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    await app.state.notifier.drain()
    app.dependency_overrides.clear()


@pytest.fixture
async def authenticated_client(client, test_user):
    """Client signed in as a customer"""
    token = create_access_token(test_user)
    client.headers["Authorization"] = f"Bearer {token}"
    return client


@pytest.fixture
async def staff_client(client, test_staff_user):
    token = create_access_token(test_staff_user)
    client.headers["Authorization"] = f"Bearer {token}"
    return client


@pytest.fixture
async def manager_client(client, test_manager_user):
    token = create_access_token(test_manager_user)
    client.headers["Authorization"] = f"Bearer {token}"
    return client


@pytest.fixture
def reservation_payload(future_date):
    """Request body for POST /api/reservations"""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+15551234567",
        "date": future_date.isoformat(),
        "time": "19:00",
        "guests": 2,
        "occasion": "Anniversary",
    }
