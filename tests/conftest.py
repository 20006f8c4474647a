"""
PyTest configuration and fixtures
"""
import logging

import pytest
from fastapi.testclient import TestClient

from jarvis_backend.api import create_app
from jarvis_backend.config import Settings
from jarvis_backend.metrics import HostSample

from .helpers import GB, FakeSampler

# Disable logging during tests
logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def fake_sample():
    return HostSample(
        cpu_usage_percent=12.5,
        memory_total_bytes=16 * GB,
        memory_used_bytes=4 * GB,
        memory_available_bytes=12 * GB,
        cpu_core_count=8,
    )


@pytest.fixture
def fake_sampler(fake_sample):
    return FakeSampler(fake_sample)


@pytest.fixture
def app(fake_sampler):
    return create_app(sampler=fake_sampler, settings=Settings())


@pytest.fixture
def client(app):
    """
    Test client fixture for the FastAPI app
    """
    with TestClient(app) as test_client:
        yield test_client
