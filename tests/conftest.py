"""
Classroom Hub - Pytest Configuration and Fixtures
Shared fixtures for all test modules
"""
import os
import pytest
from unittest.mock import MagicMock, patch

# Set test environment before importing settings - use in-memory DB to avoid permission issues
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"


# ================== Database Fixtures ==================

@pytest.fixture
def test_db_session():
    """
    Create a test database session with isolated SQLite.
    StaticPool keeps a single connection so the in-memory database survives
    across the session's queries.
    """
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool
    from src.database.models import Base

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    Base.metadata.create_all(bind=engine)

    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


# ================== Firebase Mock Fixtures ==================

@pytest.fixture
def mock_firebase_token():
    """Mock decoded Firebase ID token."""
    return {
        "uid": "test-firebase-uid-123",
        "email": "test@example.com",
        "email_verified": True,
        "name": "Test User",
        "picture": "https://example.com/avatar.jpg",
        "firebase": {
            "sign_in_provider": "password"
        }
    }


@pytest.fixture
def mock_firebase_verify(mock_firebase_token):
    """
    Patch Firebase token verification to return mock token.
    Patches in both locations: where defined and where imported.
    """
    with patch('api.auth.firebase.verify_firebase_token', return_value=mock_firebase_token):
        with patch('api.auth.deps.verify_firebase_token', return_value=mock_firebase_token):
            with patch('api.auth.firebase.get_firebase_app', return_value=MagicMock()):
                yield mock_firebase_token


# ================== Test User Fixtures ==================

def create_user(db, uid: str, email: str, full_name: str, is_active: bool = True, **extra):
    """Insert a user row and return it."""
    from src.database.models import User

    user = User(
        firebase_uid=uid,
        email=email,
        full_name=full_name,
        is_active=is_active,
        is_verified=True,
        **extra
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_user(test_db_session):
    """Factory fixture: make_user(uid, email, full_name, **extra)."""
    def _make_user(uid, email, full_name, **extra):
        return create_user(test_db_session, uid, email, full_name, **extra)
    return _make_user


@pytest.fixture
def test_user(test_db_session, mock_firebase_token):
    """The user behind mock_firebase_token."""
    from src.database.models import User

    existing = test_db_session.query(User).filter(
        User.firebase_uid == mock_firebase_token["uid"]
    ).first()
    if existing:
        return existing

    return create_user(
        test_db_session,
        uid=mock_firebase_token["uid"],
        email=mock_firebase_token["email"],
        full_name=mock_firebase_token["name"],
        avatar_url=mock_firebase_token.get("picture"),
    )


@pytest.fixture
def other_user(test_db_session):
    return create_user(test_db_session, "other-uid-456", "other@example.com", "Other User")


@pytest.fixture
def third_user(test_db_session):
    return create_user(test_db_session, "third-uid-789", "third@example.com", "Third User")


@pytest.fixture
def test_user_inactive(test_db_session):
    """Create an inactive test user."""
    return create_user(
        test_db_session, "inactive-user-uid", "inactive@example.com", "Inactive User",
        is_active=False
    )


# ================== FastAPI Test Client Fixtures ==================

@pytest.fixture
def test_client(test_db_session):
    """
    FastAPI TestClient with the database dependency overridden.
    Authentication is NOT overridden - requests need mock_firebase_verify.
    """
    from fastapi.testclient import TestClient
    from api.main import app
    from src.database.db import get_db

    def override_get_db():
        yield test_db_session

    app.dependency_overrides[get_db] = override_get_db

    # Not used as a context manager, so the lifespan (init_db, logging) does not run
    client = TestClient(app, raise_server_exceptions=False)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def as_user(test_client):
    """
    Returns a function that authenticates the shared test client as a user.

        as_user(alice).post("/api/classroom/", json={...})
    """
    from api.main import app
    from api.auth.deps import get_current_user, get_current_active_user

    def _as_user(user):
        async def override_current_user():
            return user

        app.dependency_overrides[get_current_user] = override_current_user
        app.dependency_overrides[get_current_active_user] = override_current_user
        return test_client

    return _as_user


@pytest.fixture
def authenticated_client(as_user, test_user, test_db_session):
    """Returns (client, user, db) with the client authenticated as test_user."""
    return as_user(test_user), test_user, test_db_session


@pytest.fixture
def auth_headers():
    """Authorization headers for authenticated requests."""
    return {"Authorization": "Bearer mock-firebase-token"}


# ================== Classroom Fixtures ==================

@pytest.fixture
def classroom_payload():
    return {
        "title": "Algebra",
        "subject": "Math",
        "subCode": "M101",
        "cover": "https://example.com/covers/algebra.png"
    }


@pytest.fixture
def classroom_service(test_db_session):
    from src.classroom.service import ClassroomService
    return ClassroomService(test_db_session)


@pytest.fixture
def test_classroom(classroom_service, test_user):
    """A classroom authored by test_user."""
    return classroom_service.create(
        test_user, title="Algebra", subject="Math", sub_code="M101"
    )
