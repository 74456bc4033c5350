"""Shared fixtures for the intake engine tests."""

import httpx
import pytest

from onswift.client import ApplicationClient
from onswift.models import Application

BASE_URL = "http://backend.test"


def words(n: int) -> str:
    """A whitespace-separated answer of exactly n words."""
    return " ".join(f"word{i}" for i in range(n))


@pytest.fixture
def valid_application():
    """A fully valid Application that also passes the auto-reject gate."""
    return Application(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="+1 555 123 4567",
        category="frontend-dev",
        experience="10+",
        portfolio="https://x.com",
        project1="Rebuilt a checkout flow in React",
        project2="Led a design system migration",
        project3="Shipped an offline-first PWA",
        hourly_rate="50-80",
        availability="30-40",
        why_on_swift=words(60),
    )


@pytest.fixture
def make_client():
    """Factory: ApplicationClient backed by a MockTransport handler.

    Captured requests are appended to the returned list.
    """

    def _create(handler):
        requests = []

        def _record(request: httpx.Request):
            requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return ApplicationClient(BASE_URL, http_client=http), requests

    return _create
