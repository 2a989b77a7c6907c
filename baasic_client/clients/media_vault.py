"""Media vault client (``media_vault_module``)."""

from typing import List, Optional

from ..types import HttpResponse, JSONObject, JSONValue, Options, as_payload
from .common import ModuleClient, Namespace, StreamsNamespace


class MediaVaultBatchNamespace(Namespace):
    """Batch media entry operations."""

    async def update(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: List[JSONValue]) -> HttpResponse:
        """Remove media entries; each item is an id or an ``{id, fileFormat}`` object."""
        return await self._module.remove(data)


class MediaVaultSettingsNamespace(Namespace):
    """Media vault settings."""

    async def get(self) -> HttpResponse:
        return await self._module.get()

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)


class MediaVaultProcessingProviderSettingsNamespace(Namespace):
    """Settings of the media processing providers."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)


class MediaVaultClient(ModuleClient):
    """Media entries, their streams and the vault settings."""

    module_name = "media_vault_module"

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find media vault entries matching the given criteria."""
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Remove a media entry, or only one of its derived formats."""
        return await self._module.remove(data, as_payload(options))

    @property
    def batch(self) -> MediaVaultBatchNamespace:
        return MediaVaultBatchNamespace(self._module.batch)

    @property
    def streams(self) -> StreamsNamespace:
        return StreamsNamespace(self._module.streams)

    @property
    def settings(self) -> MediaVaultSettingsNamespace:
        return MediaVaultSettingsNamespace(self._module.settings)

    @property
    def processing_provider_settings(self) -> MediaVaultProcessingProviderSettingsNamespace:
        return MediaVaultProcessingProviderSettingsNamespace(self._module.processing_provider_settings)
