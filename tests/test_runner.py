"""Tests for the terminal reporter and the end-to-end pipeline runner."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from checklib.engines.reference_extractor.models import Reference
from checklib.core.config import DEFAULT_TIMEOUT
from checklib.engines.update_checker.http_client import RegistryHttpClient
from checklib.engines.update_checker.models import UpdateOutcome
from checklib.reporter import TerminalReporter
from checklib.runner import run

LODASH = Reference("lodash", "4.17.21", "unpkg", "script")

PAGE = "\n".join(
    [
        "<html><head>",
        '<link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/bootstrap/5.3.0/css/bootstrap.min.css">',
        '<script src="https://unpkg.com/lodash@4.17.21/lodash.js"></script>',
        '<script src="https://cdn.jsdelivr.net/npm/vue@3.2.0/dist/vue.global.js"></script>',
        '<script src="/local/app.js"></script>',
        "</head></html>",
    ]
)

def _routes() -> dict:
    return {
        "https://api.cdnjs.com/libraries/bootstrap?fields=version": httpx.Response(
            200, json={"version": "5.3.3"}
        ),
        "https://unpkg.com/lodash/package.json": httpx.Response(200, json={"version": "4.17.21"}),
        "https://cdn.jsdelivr.net/npm/vue/package.json": httpx.ConnectError("unreachable"),
    }


# ── TerminalReporter ─────────────────────────────────────────────────────


class TestTerminalReporter:
    def test_outdated_line(self, capsys):
        TerminalReporter(color=False).outcome(UpdateOutcome(LODASH, "outdated", latest_version="4.18.0"))
        out = capsys.readouterr().out
        assert out == "! Update available for lodash 4.17.21 -> 4.18.0 on unpkg\n"

    def test_current_line(self, capsys):
        TerminalReporter(color=False).outcome(UpdateOutcome(LODASH, "current"))
        assert capsys.readouterr().out == "✔ lodash is up to date! (unpkg)\n"

    def test_failed_line(self, capsys):
        TerminalReporter(color=False).outcome(UpdateOutcome(LODASH, "lookup_failed", error="x"))
        assert capsys.readouterr().out == "✖ Couldn't fetch lodash\n"

    def test_warnings_only_hides_current(self, capsys):
        reporter = TerminalReporter(warnings_only=True, color=False)
        reporter.outcome(UpdateOutcome(LODASH, "current"))
        reporter.outcome(UpdateOutcome(LODASH, "lookup_failed"))
        assert capsys.readouterr().out == "✖ Couldn't fetch lodash\n"

    def test_info_and_warning_prefixes(self, capsys):
        reporter = TerminalReporter(color=False)
        reporter.info("No scripts found")
        reporter.warning("Skipped x")
        assert capsys.readouterr().out == "[i] No scripts found\n[!] Skipped x\n"

    def test_summary(self, capsys):
        TerminalReporter(color=False).summary(
            [
                UpdateOutcome(LODASH, "current"),
                UpdateOutcome(LODASH, "outdated", latest_version="5"),
                UpdateOutcome(LODASH, "outdated", latest_version="5"),
            ]
        )
        assert "3 checked: 2 outdated, 1 up to date, 0 failed" in capsys.readouterr().out

    def test_color_codes_when_enabled(self, capsys):
        TerminalReporter(color=True).outcome(UpdateOutcome(LODASH, "lookup_failed"))
        assert "\x1b[31m" in capsys.readouterr().out


# ── run ──────────────────────────────────────────────────────────────────


class TestRun:
    @pytest.mark.anyio
    async def test_full_page(self, make_http, capsys):
        async with make_http(_routes()) as http:
            outcomes = await run(PAGE, http=http, color=False)
        out = capsys.readouterr().out

        statuses = {o.reference.name: o.status for o in outcomes}
        assert statuses == {"bootstrap": "outdated", "lodash": "current", "vue": "lookup_failed"}
        assert "! Update available for bootstrap 5.3.0 -> 5.3.3 on cdnjs" in out
        assert "✔ lodash is up to date! (unpkg)" in out
        assert "✖ Couldn't fetch vue" in out
        assert "3 checked: 1 outdated, 1 up to date, 1 failed" in out
        assert "[i]" not in out

    @pytest.mark.anyio
    async def test_warnings_only_still_returns_everything(self, make_http, capsys):
        async with make_http(_routes()) as http:
            outcomes = await run(PAGE, warnings_only=True, http=http, color=False)
        out = capsys.readouterr().out
        assert len(outcomes) == 3
        assert "up to date!" not in out
        assert "Update available for bootstrap" in out

    @pytest.mark.anyio
    async def test_no_tags(self, make_http, capsys):
        async with make_http({}) as http:
            outcomes = await run("<p>plain</p>", http=http, color=False)
        out = capsys.readouterr().out
        assert outcomes == []
        assert "[i] No scripts found" in out
        assert "[i] No links found" in out
        assert "[i] No CDN references found" in out

    @pytest.mark.anyio
    async def test_tags_but_no_cdn_references(self, make_http, capsys):
        async with make_http({}) as http:
            outcomes = await run('<script src="/a.js"></script>', http=http, color=False)
        out = capsys.readouterr().out
        assert outcomes == []
        assert "No scripts found" not in out
        assert "[i] No links found" in out
        assert "[i] No CDN references found" in out

    @pytest.mark.anyio
    async def test_parse_error_reported_as_warning(self, make_http, capsys):
        html = "\n".join(
            [
                '<script src="https://unpkg.com/lodash/lodash.js"></script>',
                '<script src="https://unpkg.com/lodash@4.17.21/lodash.js"></script>',
            ]
        )
        async with make_http(_routes()) as http:
            outcomes = await run(html, http=http, color=False)
        out = capsys.readouterr().out
        assert "[!] Skipped https://unpkg.com/lodash/lodash.js: no version pinned" in out
        assert [o.status for o in outcomes] == ["current"]

    @pytest.mark.anyio
    @pytest.mark.parametrize(("kwargs", "expected"), [({"timeout": 4.0}, 4.0), ({}, DEFAULT_TIMEOUT)])
    async def test_own_client_gets_timeout(self, kwargs, expected, capsys):
        def canned(timeout: float) -> RegistryHttpClient:
            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(200, json={"version": "4.17.21"})

            return RegistryHttpClient(timeout, transport=httpx.MockTransport(handler))

        html = '<script src="https://unpkg.com/lodash@4.17.21/lodash.js"></script>'
        with patch("checklib.runner.RegistryHttpClient", side_effect=canned) as factory:
            outcomes = await run(html, color=False, **kwargs)
        factory.assert_called_once_with(expected)
        assert [o.status for o in outcomes] == ["current"]
