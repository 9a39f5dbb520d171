"""Reference extractor — pure text scanning, no network or file I/O."""

from __future__ import annotations

import structlog

from checklib.engines.reference_extractor.grammars import match_grammar, parse_cdn_url
from checklib.engines.reference_extractor.models import (
    ExtractionResult,
    Reference,
    SkippedUrl,
)
from checklib.engines.reference_extractor.tags import scan_tags
from checklib.exceptions import ReferenceParseError

log = structlog.get_logger("checklib.engine")


def cdn_tokens(value: str) -> list[str]:
    """Whitespace-separated tokens of *value* that start with a known CDN base URL."""
    return [token for token in value.split() if match_grammar(token) is not None]


def scan_document(html_text: str) -> ExtractionResult:
    """Scan one document snapshot for CDN references.

    Only the first CDN token of each tag is considered. A token that
    matches a CDN host but not its path grammar is recorded in
    ``skipped`` and does not stop the scan.
    """
    result = ExtractionResult()

    for tag in scan_tags(html_text):
        if tag.asset_type == "script":
            result.script_tags += 1
        else:
            result.link_tags += 1

        tokens = cdn_tokens(tag.value)
        if not tokens:
            continue

        url = tokens[0]
        try:
            ref = parse_cdn_url(url, tag.asset_type)
        except ReferenceParseError as exc:
            log.warning(
                "extractor.parse_error",
                url=url,
                line=tag.line,
                reason=exc.reason,
            )
            result.skipped.append(SkippedUrl(url=url, reason=exc.reason, asset_type=tag.asset_type))
            continue

        log.debug(
            "extractor.reference",
            name=ref.name,
            version=ref.declared_version,
            provider=ref.provider,
            asset_type=ref.asset_type,
        )
        result.references.append(ref)

    return result


def extract(html_text: str) -> list[Reference]:
    """Return the CDN references in *html_text*, in document order."""
    return scan_document(html_text).references
