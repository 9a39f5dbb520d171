"""unpkg serves the latest ``package.json`` of an npm package."""

from __future__ import annotations

from checklib.engines.reference_extractor.grammars import UNPKG_BASE_URL
from checklib.engines.update_checker.registry import PackageJsonRegistry, register_client


class UnpkgRegistry(PackageJsonRegistry):
    provider = "unpkg"

    def metadata_url(self, name: str) -> str:
        return f"{UNPKG_BASE_URL}{name}/package.json"


register_client(UnpkgRegistry())
