"""cdnjs library metadata API."""

from __future__ import annotations

from checklib.engines.update_checker.registry import PackageJsonRegistry, register_client

CDNJS_API_URL = "https://api.cdnjs.com/libraries/"


class CdnjsRegistry(PackageJsonRegistry):
    provider = "cdnjs"

    def metadata_url(self, name: str) -> str:
        return f"{CDNJS_API_URL}{name}?fields=version"


register_client(CdnjsRegistry())
