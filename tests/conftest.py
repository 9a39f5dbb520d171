"""Shared pytest fixtures for checklib tests (no network required)."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from checklib.core.logging import setup_logging
from checklib.engines.update_checker.http_client import RegistryHttpClient

Route = httpx.Response | Exception


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Route diagnostics to the current stderr so they never mix with report output.

    Re-applied per test because CLI tests rebind the handler to CliRunner streams.
    """
    setup_logging("WARNING")


@pytest.fixture
def make_http() -> Callable[[dict[str, Route]], RegistryHttpClient]:
    """Build a RegistryHttpClient backed by canned responses keyed by full URL.

    Unknown URLs answer 404. A route holding an exception raises it.
    """

    def _make(routes: dict[str, Route]) -> RegistryHttpClient:
        def handler(request: httpx.Request) -> httpx.Response:
            route = routes.get(str(request.url))
            if route is None:
                return httpx.Response(404, json={"error": "not found"})
            if isinstance(route, Exception):
                raise route
            return route

        return RegistryHttpClient(timeout=1.0, transport=httpx.MockTransport(handler))

    return _make
