import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from kleaners.main import app

FIXED_NOW = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def client_no_raise():
    """Test client that returns HTTP responses instead of raising server exceptions."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
