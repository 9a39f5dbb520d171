"""Regex tag scanner — raw HTML text to ``(asset_type, attribute value)`` pairs.

Matching is line-oriented: a tag whose attributes are split across lines
is not found.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from checklib.engines.reference_extractor.models import AssetType

# <script ... src="..."> and <link ... href="...">, single line, either quote style
SCRIPT_TAG_RE = re.compile(
    r"""<script\b[^>\n]*?\ssrc\s*=\s*(?P<q>["'])(?P<value>[^\n]*?)(?P=q)""",
    re.IGNORECASE,
)
LINK_TAG_RE = re.compile(
    r"""<link\b[^>\n]*?\shref\s*=\s*(?P<q>["'])(?P<value>[^\n]*?)(?P=q)""",
    re.IGNORECASE,
)

_TAG_PATTERNS: tuple[tuple[AssetType, re.Pattern[str]], ...] = (
    ("script", SCRIPT_TAG_RE),
    ("link", LINK_TAG_RE),
)


class TagMatch(NamedTuple):
    asset_type: AssetType
    value: str
    line: int  # 1-based
    column: int  # 0-based offset of the tag within its line


def scan_tags(html_text: str) -> list[TagMatch]:
    """Return every script/link tag match in document order."""
    matches: list[TagMatch] = []
    for lineno, line in enumerate(html_text.splitlines(), start=1):
        for asset_type, pattern in _TAG_PATTERNS:
            for m in pattern.finditer(line):
                matches.append(TagMatch(asset_type, m.group("value"), lineno, m.start()))
    matches.sort(key=lambda t: (t.line, t.column))
    return matches
