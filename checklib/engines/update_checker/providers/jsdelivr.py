"""jsDelivr mirrors npm; the unversioned ``package.json`` is the latest release."""

from __future__ import annotations

from checklib.engines.reference_extractor.grammars import JSDELIVR_BASE_URL
from checklib.engines.update_checker.registry import PackageJsonRegistry, register_client


class JsdelivrRegistry(PackageJsonRegistry):
    provider = "jsdelivr"

    def metadata_url(self, name: str) -> str:
        return f"{JSDELIVR_BASE_URL}{name}/package.json"


register_client(JsdelivrRegistry())
