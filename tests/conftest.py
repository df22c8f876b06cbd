"""
Test configuration and fixtures for the lender ledger tests.
"""
import pytest
from typing import AsyncGenerator
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from app.core.database import Base, get_db, get_redis
from app.core.security import create_access_token
from app.modules.lenders.models import Lender, LenderStatus
from app.modules.loans.models import TakenLoan, LoanStatus
from main import app


BORROWER_ID = "user-1"
OTHER_BORROWER_ID = "user-2"


# ============================================================
# Database Fixtures
# ============================================================

# Use SQLite for testing (in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create test database engine"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for each test"""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session() as session:
        yield session
        await session.rollback()


# ============================================================
# Redis Fixtures
# ============================================================

class FakeRedis:
    """In-memory stand-in for the revoked token lookups"""

    def __init__(self):
        self.store = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value):
        self.store[key] = value


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


# ============================================================
# Client Fixtures
# ============================================================

@pytest.fixture
async def client(db_session, fake_redis) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database and redis overrides"""

    async def override_get_db():
        yield db_session

    async def override_get_redis():
        return fake_redis

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = override_get_redis

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def make_auth_headers(user_id: str) -> dict:
    token = create_access_token(data={"sub": user_id})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Generate auth headers for the borrower"""
    return make_auth_headers(BORROWER_ID)


@pytest.fixture
def other_auth_headers():
    """Generate auth headers for a second borrower"""
    return make_auth_headers(OTHER_BORROWER_ID)


# ============================================================
# Loan and Lender Fixtures
# ============================================================

async def get_lender(db: AsyncSession, lender_id: str):
    result = await db.execute(select(Lender).where(Lender.lender_id == lender_id))
    return result.scalar_one_or_none()


@pytest.fixture
def make_lender(db_session):
    """Factory for lender profiles"""

    async def _make_lender(
        lender_id: str = "L1",
        added_by: str = BORROWER_ID,
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        **kwargs
    ) -> Lender:
        lender = Lender(
            lender_id=lender_id,
            added_by=added_by,
            first_name=first_name,
            last_name=last_name,
            status=kwargs.pop("status", LenderStatus.ACTIVE),
            **kwargs
        )
        db_session.add(lender)
        await db_session.commit()
        return lender

    return _make_lender


@pytest.fixture
def make_loan(db_session):
    """Factory for loan records"""

    async def _make_loan(lender_id: str = "L1", borrowed_by: str = BORROWER_ID, **kwargs) -> TakenLoan:
        loan = TakenLoan(
            lender_id=lender_id,
            borrowed_by=borrowed_by,
            status=kwargs.pop("status", LoanStatus.ACTIVE),
            principal_amount=kwargs.pop("principal_amount", Decimal("5000.00")),
            interest_rate=kwargs.pop("interest_rate", Decimal("12.00")),
            accrued_interest=kwargs.pop("accrued_interest", Decimal("150.00")),
            interest_stopped=kwargs.pop("interest_stopped", False),
            **kwargs
        )
        db_session.add(loan)
        await db_session.commit()
        return loan

    return _make_loan


@pytest.fixture
async def test_lender(make_lender):
    """Create a lender profile added by the borrower"""
    return await make_lender()


@pytest.fixture
async def test_loan(make_loan, test_lender):
    """Create an active loan from the test lender"""
    return await make_loan(lender_id=test_lender.lender_id)
