"""
Pytest configuration and fixtures for backend tests
"""

import pytest
from datetime import datetime, timezone
from starlette.testclient import TestClient
from scholarbase.main import app
from scholarbase.core.store import store
from scholarbase.core.security import create_access_token


@pytest.fixture(autouse=True)
def reset_store():
    """Every test starts from the seed data"""
    store.reset()
    yield store
    store.reset()


@pytest.fixture
def client():
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Bearer header; accepted but never verified by the API"""
    token = create_access_token({"sub": "user_123"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def mock_course():
    """A third course unlike the seeded ones"""
    return {
        "id": "course_3",
        "title": "Data Science with Python",
        "description": "Pandas, NumPy and plotting for analysis work",
        "instructor": "Dr. Amara Okafor",
        "author": "tutor_3",
        "price": 79.0,
        "original_price": None,
        "rating": 4.5,
        "review_count": 40,
        "student_count": 2000,
        "thumbnail": "/placeholder.jpg",
        "category": "Data Science",
        "level": "Intermediate",
        "featured": False,
        "is_published": True,
        "created_at": datetime(2024, 3, 1, tzinfo=timezone.utc),
        "duration_hours": 30,
        "lesson_count": 20,
        "tags": ["Python", "Pandas"],
    }


@pytest.fixture
def catalogue(reset_store, mock_course):
    """Seed catalogue plus ``mock_course``"""
    reset_store.courses.insert(mock_course)
    return reset_store
