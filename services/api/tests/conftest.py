import pytest
from fastapi.testclient import TestClient

from metric_imperial.main import app
from metric_imperial.rate_limit import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with an empty limiter storage."""
    limiter.reset()
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
