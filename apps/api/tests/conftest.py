"""
Test configuration and fixtures.

Provides:
- In-memory SQLite database, schema rebuilt for each test
- Bearer token minting for authenticated tests
- HTTPX AsyncClient with the Authorization header set
"""
import os
from dataclasses import dataclass
from typing import AsyncGenerator, Generator

# Settings are read at import time, so the environment goes first
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["TESTING"] = "1"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["TIMEZONE"] = "UTC"
os.environ["JWT_SECRET"] = "test-jwt-secret-with-enough-bytes-for-hs256"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.orm import Session

from contacts_api.main import app
from contacts_api.db.base import Base
from contacts_api.db.session import engine, SessionLocal
from contacts_api.core.deps import get_db
from contacts_api.core.security import create_access_token, hash_password
from contacts_api.db.models import Account, Organization, User

TEST_PASSWORD = "password"


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """
    Creates a database session on a fresh schema.

    App code commits freely; the schema is dropped after each test.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()

    yield session

    session.rollback()
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_account(db: Session) -> Account:
    """Create a test account."""
    account = Account(name="Acme Corporation")
    db.add(account)
    db.commit()
    return account


@pytest.fixture(scope="function")
def test_user(db: Session, test_account: Account) -> User:
    """Create the account owner with a known password."""
    user = User(
        account_id=test_account.id,
        first_name="John",
        last_name="Doe",
        email="johndoe@example.com",
        password=hash_password(TEST_PASSWORD),
        owner=True,
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture(scope="function")
def test_organization(db: Session, test_account: Account) -> Organization:
    """Create an organization in the test account."""
    organization = Organization(account_id=test_account.id, name="Acme Inc.")
    db.add(organization)
    db.commit()
    return organization


@pytest.fixture(scope="function")
def other_account(db: Session) -> Account:
    """A second tenant, for isolation checks."""
    account = Account(name="Globex")
    db.add(account)
    db.commit()
    return account


# =============================================================================
# Auth Fixtures
# =============================================================================

@dataclass
class TestAuth:
    """Test authentication context."""
    user: User
    account: Account
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture(scope="function")
def test_auth(test_user: User, test_account: Account) -> TestAuth:
    """Create bearer token for test user."""
    token = create_access_token(
        user_id=test_user.id,
        account_id=test_account.id,
        token_version=test_user.token_version,
    )
    return TestAuth(
        user=test_user,
        account=test_account,
        token=token,
    )


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture(scope="function")
async def client(db: Session) -> AsyncGenerator[AsyncClient, None]:
    """
    Create unauthenticated AsyncClient for testing public endpoints.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def authed_client(
    db: Session,
    test_auth: TestAuth,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create AsyncClient that sends the test user's bearer token.
    """
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=test_auth.headers,
    ) as c:
        yield c

    app.dependency_overrides.clear()
