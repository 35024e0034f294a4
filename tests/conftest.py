"""Fixtures for the test suite."""

import pytest

from mailchimp_lists.clients.dummy import DummyClient
from mailchimp_lists.repository import ListRepository


@pytest.fixture(name="dummy_client")
def fixture_dummy_client():
    """Generate a client recording its calls."""
    return DummyClient()


@pytest.fixture(name="repository")
def fixture_repository(dummy_client):
    """Generate a list repository using the dummy client."""
    return ListRepository(dummy_client)
