"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from market.services import get_services, reset_services


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_state():
    reset_services()
    yield
    reset_services()


@pytest.fixture
def services():
    return get_services()
