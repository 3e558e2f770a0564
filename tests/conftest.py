# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Swaps the Supabase client for the in-memory fake in tests/fakes.py
# - Provides users, content rows and an authenticated TestClient helper
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-sessions")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("CERTIFICATE_TEMPLATE_PATH", "tests/missing-template.png")

import pytest
from fastapi.testclient import TestClient

from app.auth.tokens import create_session_token
from lib.passwords import hash_password
from lib.supabase_client import SupabaseClient
from tests.fakes import FakeSupabase

TEST_PASSWORD = "password123"
FUTURE_DATE = "2999-12-31"
PAST_DATE = "2000-01-01"

_password_hash: str | None = None


def password_hash() -> str:
    """scrypt is slow on purpose; hash the shared test password once."""
    global _password_hash
    if _password_hash is None:
        _password_hash = hash_password(TEST_PASSWORD)
    return _password_hash


def user_row(username: str, role: str = "citizen", **overrides) -> dict:
    """A complete users / pending_approvals row."""
    row = {
        "username": username,
        "password": password_hash(),
        "role": role,
        "first_name": "Rahim",
        "last_name": "Uddin",
        "id_type": "nid",
        "id_number": f"ID-{username}",
        "building": "12/A",
        "floor": None,
        "street": "Road 5",
        "thana": "Dhanmondi",
        "city": "Dhaka",
        "postal_code": "1205",
        "country": "Bangladesh",
        "mobile": f"017-{username}",
    }
    row.update(overrides)
    return row


def auth_headers(user: dict) -> dict:
    return {"Authorization": f"Bearer {create_session_token(user)}"}


# =============================================================================
# Data layer
# =============================================================================

@pytest.fixture
def fake_db(monkeypatch) -> FakeSupabase:
    """In-memory database installed as the SupabaseClient singleton."""
    db = FakeSupabase()
    monkeypatch.setattr(SupabaseClient, "_instance", db)
    return db


@pytest.fixture
def citizen(fake_db) -> dict:
    return fake_db.add("users", user_row("citizen@example.com"))


@pytest.fixture
def other_citizen(fake_db) -> dict:
    return fake_db.add(
        "users",
        user_row("karim@example.com", first_name="Karim", last_name="Hasan", thana="Mirpur"),
    )


@pytest.fixture
def official(fake_db) -> dict:
    return fake_db.add(
        "users",
        user_row("officer@gov.bd", role="governmental", first_name="Nasrin", last_name="Akter"),
    )


@pytest.fixture
def project(fake_db) -> dict:
    return fake_db.add("projects", {
        "title_bn": "ঢাকা মেট্রোরেল প্রকল্প",
        "title_en": "Dhaka Metro Rail Project",
        "description_bn": "দ্রুতগতির গণপরিবহন",
        "description_en": "Rapid mass transit",
        "category": "Infrastructure",
        "budget": "৳ ৩৩,৪৭২ কোটি",
        "status": "Active",
        "image_url": "https://example.com/metro.jpg",
        "upvotes": 5,
    })


def event_row(date: str, **overrides) -> dict:
    row = {
        "title_bn": "জাতীয় বৃক্ষরোপণ অভিযান",
        "title_en": "National Tree Plantation Campaign",
        "description_bn": "দেশব্যাপী বৃক্ষরোপণ",
        "description_en": "Nationwide tree plantation",
        "category": "Environment",
        "date": date,
        "location": "Dhaka",
        "image_url": "https://example.com/tree.jpg",
        "volunteers": 0,
        "going": 0,
        "helpful": 0,
    }
    row.update(overrides)
    return row


@pytest.fixture
def upcoming_event(fake_db) -> dict:
    return fake_db.add("events", event_row(FUTURE_DATE))


@pytest.fixture
def past_event(fake_db) -> dict:
    return fake_db.add("events", event_row(PAST_DATE, title_en="Digital Literacy Drive"))


@pytest.fixture
def thread(fake_db, citizen) -> dict:
    return fake_db.add("threads", {
        "title_bn": "রাস্তার বাতি",
        "title_en": "Street lights on Road 5",
        "content_bn": "রাস্তার বাতি নষ্ট",
        "content_en": "Half the street lights are out",
        "category": "Infrastructure",
        "author_id": citizen["id"],
    })


# =============================================================================
# HTTP
# =============================================================================

@pytest.fixture
def client(fake_db) -> TestClient:
    """TestClient against the app, backed by fake_db."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def citizen_client(client, citizen) -> TestClient:
    client.headers.update(auth_headers(citizen))
    return client


@pytest.fixture
def official_client(client, official) -> TestClient:
    client.headers.update(auth_headers(official))
    return client
