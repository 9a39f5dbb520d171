"""Pipeline: HTML text -> references -> concurrent lookups -> terminal report."""

from __future__ import annotations

import structlog

from checklib.core.config import DEFAULT_TIMEOUT
from checklib.engines.reference_extractor import scan_document
from checklib.engines.update_checker import RegistryHttpClient, UpdateOutcome, iter_outcomes
from checklib.reporter import TerminalReporter

log = structlog.get_logger("checklib.engine")


async def run(
    html_text: str,
    warnings_only: bool = False,
    *,
    http: RegistryHttpClient | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    color: bool | None = None,
) -> list[UpdateOutcome]:
    """Check one document and report every outcome as soon as it arrives.

    ``warnings_only`` only affects rendering; the full outcome list is
    always returned.
    """
    reporter = TerminalReporter(warnings_only, color=color)
    extraction = scan_document(html_text)

    if not extraction.script_tags:
        reporter.info("No scripts found")
    if not extraction.link_tags:
        reporter.info("No links found")
    for skipped in extraction.skipped:
        reporter.warning(f"Skipped {skipped.url}: {skipped.reason}")

    references = extraction.references
    if not references:
        reporter.info("No CDN references found")
        return []

    log.info("runner.checking", references=len(references), skipped=len(extraction.skipped))

    outcomes: list[UpdateOutcome] = []
    own_http = http is None
    client = RegistryHttpClient(timeout) if http is None else http
    try:
        async for outcome in iter_outcomes(references, client):
            outcomes.append(outcome)
            reporter.outcome(outcome)
    finally:
        if own_http:
            await client.close()

    reporter.summary(outcomes)
    return outcomes
