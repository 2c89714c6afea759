"""
Pytest configuration and fixtures for the parking dashboard backend.
"""
import copy
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from data.parking_lots import PARKING_LOTS  # noqa: E402
from services.catalog_service import get_catalog  # noqa: E402
from utils import session_manager  # noqa: E402
from utils.config import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_sessions():
    session_manager._sessions.clear()
    yield
    session_manager._sessions.clear()


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def lot_record():
    """Return a fresh, mutable copy of a catalog record by position."""
    def _make(index=0):
        return copy.deepcopy(PARKING_LOTS[index])
    return _make


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
