"""Registry clients — one per CDN provider, selected by provider name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from checklib.engines.update_checker.http_client import RegistryHttpClient
from checklib.exceptions import RegistryLookupError


@runtime_checkable
class RegistryClient(Protocol):
    """Interface that every provider's registry client must satisfy."""

    provider: str

    def metadata_url(self, name: str) -> str: ...

    async def latest_version(self, http: RegistryHttpClient, name: str) -> str: ...


REGISTRY_CLIENTS: dict[str, RegistryClient] = {}


def register_client(client: RegistryClient) -> None:
    """Register a client instance by its provider name."""
    REGISTRY_CLIENTS[client.provider] = client


def get_client(provider: str) -> RegistryClient:
    try:
        return REGISTRY_CLIENTS[provider]
    except KeyError:
        raise RegistryLookupError(provider, f"no registry client for provider {provider!r}") from None


def read_version(payload: Any, name: str) -> str:
    """Pull the ``version`` field out of a registry JSON document."""
    if not isinstance(payload, dict):
        raise RegistryLookupError(name, f"expected a JSON object, got {type(payload).__name__}")
    version = payload.get("version")
    if not isinstance(version, str) or not version:
        raise RegistryLookupError(name, "response has no 'version' field")
    return version


class PackageJsonRegistry(ABC):
    """Base for registries that answer with a JSON document carrying ``version``."""

    provider: str

    @abstractmethod
    def metadata_url(self, name: str) -> str:
        """Registry URL whose JSON body carries the latest ``version`` of *name*."""

    async def latest_version(self, http: RegistryHttpClient, name: str) -> str:
        payload = await http.get_json(self.metadata_url(name))
        return read_version(payload, name)
