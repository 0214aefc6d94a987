# backend/tests/conftest.py

import os

# keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from famapp.core.cache import TTLCache
from famapp.services.external_data_service import ExternalDataService
from fakes import FakeClock, FakeSession


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_service(clock):
    """Build an ExternalDataService over a FakeSession and an isolated cache."""
    def _make(routes=None):
        session = FakeSession(routes)
        service = ExternalDataService(cache=TTLCache(clock=clock), session=session)
        return service, session
    return _make


@pytest.fixture
def offline_service(make_service):
    service, _ = make_service()
    return service
