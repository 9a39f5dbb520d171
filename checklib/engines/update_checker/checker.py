"""Update checker — one independent registry lookup per reference."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Sequence

import httpx
import structlog

# Ensure registry clients are registered before any lookup runs.
import checklib.engines.update_checker.providers  # noqa: F401
from checklib.core.config import DEFAULT_TIMEOUT
from checklib.engines.reference_extractor.models import Reference
from checklib.engines.update_checker.http_client import RegistryHttpClient
from checklib.engines.update_checker.models import UpdateOutcome
from checklib.engines.update_checker.registry import get_client
from checklib.exceptions import RegistryLookupError

log = structlog.get_logger("checklib.engine")

# Timeouts, transport errors and non-2xx are httpx.HTTPError; bad JSON is ValueError.
_LOOKUP_ERRORS = (httpx.HTTPError, httpx.InvalidURL, ValueError, RegistryLookupError)


async def check_one(reference: Reference, http: RegistryHttpClient) -> UpdateOutcome:
    """Look up the latest version of *reference* and classify it.

    Lookup problems never propagate; they become a ``lookup_failed`` outcome.
    """
    try:
        client = get_client(reference.provider)
        latest = await client.latest_version(http, reference.name)
    except _LOOKUP_ERRORS as exc:
        err = f"{type(exc).__name__}: {exc}"
        log.warning(
            "checker.lookup_failed",
            name=reference.name,
            provider=reference.provider,
            error=err,
        )
        return UpdateOutcome(reference=reference, status="lookup_failed", error=err)

    log.debug(
        "checker.lookup_ok",
        name=reference.name,
        provider=reference.provider,
        declared=reference.declared_version,
        latest=latest,
    )
    if latest == reference.declared_version:
        return UpdateOutcome(reference=reference, status="current")
    return UpdateOutcome(reference=reference, status="outdated", latest_version=latest)


async def iter_outcomes(
    references: Sequence[Reference],
    http: RegistryHttpClient,
) -> AsyncIterator[UpdateOutcome]:
    """Yield one outcome per reference, in completion order.

    All lookups are started up front. If the consumer stops iterating
    early, the remaining lookups are cancelled and awaited before this
    generator finishes, so the HTTP client can be closed safely afterwards.
    """
    tasks = [asyncio.ensure_future(check_one(ref, http)) for ref in references]
    try:
        for next_done in asyncio.as_completed(tasks):
            yield await next_done
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def check_all(
    references: Sequence[Reference],
    *,
    http: RegistryHttpClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[UpdateOutcome]:
    """Check every reference concurrently and return all outcomes.

    When *http* is omitted a client is created for this call and closed
    afterwards.
    """
    if http is not None:
        return [outcome async for outcome in iter_outcomes(references, http)]
    async with RegistryHttpClient(timeout) as own_http:
        return [outcome async for outcome in iter_outcomes(references, own_http)]
