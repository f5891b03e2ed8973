"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Register pytest-asyncio plugin explicitly
pytest_plugins = ["pytest_asyncio"]

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from linkfeed.index import build_app  # noqa: E402
from linkfeed.links import LinkStore  # noqa: E402
from linkfeed.settings import Settings  # noqa: E402


@pytest.fixture
def store():
    """A freshly seeded link store"""
    return LinkStore.seeded()


@pytest.fixture
def settings():
    return Settings(graphiql=False)


@pytest.fixture
def app(store, settings):
    return build_app(settings, logging_enabled=False, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
