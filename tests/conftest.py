"""
Test configuration and fixtures for the LeadHub API.

Every app built here gets its own storage, so tests never share state. Route
tests run once per storage backend to prove the two are interchangeable.
"""

import os
import tempfile
from typing import Generator

os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="leadhub-logs-")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from leadhub.features.auth.dependencies import get_current_user_id
from leadhub.main import create_app
from leadhub.platform.storage import DatabaseStorage, MemoryStorage

MOCK_USER_ID = "user-123"


def override_get_current_user_id():
    """Mock dependency that always returns a fixed authenticated user id."""
    return MOCK_USER_ID


def make_storage(backend: str, tmp_path):
    if backend == "memory":
        return MemoryStorage(seed=False)
    return DatabaseStorage(f"sqlite+aiosqlite:///{tmp_path / 'leadhub-test.db'}")


@pytest.fixture(params=["memory", "database"])
def storage(request, tmp_path):
    return make_storage(request.param, tmp_path)


@pytest_asyncio.fixture(params=["memory", "database"])
async def store(request, tmp_path):
    """Initialised storage for direct (non-HTTP) tests."""
    storage = make_storage(request.param, tmp_path)
    await storage.init()
    yield storage
    await storage.close()


@pytest.fixture
def test_app(storage):
    return create_app(storage=storage)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Clean TestClient per test; entering the context runs startup so database
    tables exist before the first request.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(test_app, client):
    """Client with the get_current_user_id dependency overridden for authenticated tests."""
    test_app.dependency_overrides[get_current_user_id] = override_get_current_user_id

    yield client

    test_app.dependency_overrides.pop(get_current_user_id, None)


def make_lead(**overrides) -> dict:
    payload = {
        "name": "Sarah Johnson",
        "email": "sarah.johnson@email.com",
        "phone": "+1 (555) 123-4567",
        "source": "LinkedIn Quiz",
        "status": "hot",
        "score": 95,
        "tags": ["fitness", "premium"],
    }
    payload.update(overrides)
    return payload


def make_lead_magnet(**overrides) -> dict:
    payload = {
        "title": "Ultimate Fitness Challenge Guide",
        "type": "eBook",
        "industry": "Fitness",
        "description": "A comprehensive guide to fitness challenges",
        "status": "active",
        "leads": 234,
        "conversion": 24,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def lead_payload():
    return make_lead


@pytest.fixture
def lead_magnet_payload():
    return make_lead_magnet
