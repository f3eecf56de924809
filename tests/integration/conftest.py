# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

# Keep test output free of access lines
os.environ["FUNDRAISING_ACCESS_LOG"] = "false"
os.environ["FUNDRAISING_DEFAULT_CURRENCY"] = "EUR"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """FastAPI TestClient with settings rebuilt from the test environment."""
    from fundraising.infrastructure.config import get_settings
    get_settings.cache_clear()

    from fundraising.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
