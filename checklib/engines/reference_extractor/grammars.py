"""CDN URL grammars — one parser per provider, keyed by provider name."""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from urllib.parse import urlsplit

from checklib.engines.reference_extractor.models import AssetType, Provider, Reference
from checklib.exceptions import ReferenceParseError

UNPKG_BASE_URL = "https://unpkg.com/"
CDNJS_BASE_URL = "https://cdnjs.cloudflare.com/ajax/libs"
JSDELIVR_BASE_URL = "https://cdn.jsdelivr.net/npm/"


@runtime_checkable
class UrlGrammar(Protocol):
    """Interface that every CDN URL grammar must satisfy."""

    provider: Provider
    base_url: str

    def parse(self, url: str, asset_type: AssetType) -> Reference: ...


URL_GRAMMARS: dict[str, UrlGrammar] = {}


def register_grammar(grammar: UrlGrammar) -> None:
    """Register a grammar instance by its provider name."""
    URL_GRAMMARS[grammar.provider] = grammar


def match_grammar(url: str) -> UrlGrammar | None:
    """Return the grammar whose base URL prefixes *url*, if any."""
    for grammar in URL_GRAMMARS.values():
        if url.startswith(grammar.base_url):
            return grammar
    return None


def parse_cdn_url(url: str, asset_type: AssetType) -> Reference:
    """Parse *url* with the grammar of whichever CDN it belongs to."""
    grammar = match_grammar(url)
    if grammar is None:
        raise ReferenceParseError(url, "no known CDN base URL")
    return grammar.parse(url, asset_type)


def _path_segments(url: str, base_url: str) -> list[str]:
    """Path segments following *base_url*, query string and fragment dropped."""
    base_path = urlsplit(base_url).path.rstrip("/")
    path = urlsplit(url).path
    if not path.startswith(base_path + "/"):
        raise ReferenceParseError(url, f"path does not continue below {base_url}")
    return path[len(base_path) + 1 :].split("/")


def split_package_spec(segments: list[str], url: str) -> tuple[str, str]:
    """Split ``name@version`` (or ``@scope/name@version``) off the leading segments.

    A leading ``@scope`` segment consumes the following segment; the
    version is then whatever follows the last ``@`` of that segment.
    """
    first = segments[0] if segments else ""
    if not first:
        raise ReferenceParseError(url, "missing package segment")

    if first.startswith("@"):
        if len(segments) < 2 or not segments[1]:
            raise ReferenceParseError(url, f"scoped package {first!r} has no name")
        bare_name, sep, version = segments[1].rpartition("@")
        name = f"{first}/{bare_name}" if bare_name else ""
    else:
        name, sep, version = first.partition("@")

    if not name:
        raise ReferenceParseError(url, "empty package name")
    if not sep or not version:
        raise ReferenceParseError(url, "no version pinned")
    return name, version


class NpmStyleGrammar:
    """``<base><name>@<version>/...`` — shared by unpkg and jsdelivr."""

    def __init__(self, provider: Provider, base_url: str) -> None:
        self.provider = provider
        self.base_url = base_url

    def parse(self, url: str, asset_type: AssetType) -> Reference:
        name, version = split_package_spec(_path_segments(url, self.base_url), url)
        return Reference(
            name=name,
            declared_version=version,
            provider=self.provider,
            asset_type=asset_type,
            url=url,
        )


class CdnjsGrammar:
    """``https://cdnjs.cloudflare.com/ajax/libs/<name>/<version>/...``"""

    provider: Provider = "cdnjs"
    base_url = CDNJS_BASE_URL

    def parse(self, url: str, asset_type: AssetType) -> Reference:
        segments = _path_segments(url, self.base_url)
        if len(segments) < 2 or not segments[0] or not segments[1]:
            raise ReferenceParseError(url, "expected <name>/<version> after ajax/libs")
        return Reference(
            name=segments[0],
            declared_version=segments[1],
            provider=self.provider,
            asset_type=asset_type,
            url=url,
        )


register_grammar(NpmStyleGrammar("unpkg", UNPKG_BASE_URL))
register_grammar(CdnjsGrammar())
register_grammar(NpmStyleGrammar("jsdelivr", JSDELIVR_BASE_URL))
