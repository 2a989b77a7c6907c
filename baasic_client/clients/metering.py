"""Metering client (``metering_module``)."""

from typing import List, Optional

from ..types import HttpResponse, JSONObject, Options, as_payload
from .common import (
    ACLNamespace,
    BatchNamespace,
    ModuleClient,
    Namespace,
    ResourceNamespace,
    SettingsNamespace,
)


class MeteringStatisticsNamespace(Namespace):
    """Aggregated metering statistics."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find statistics; options carry category, rate and date range."""
        return await self._module.find(as_payload(options))


class MeteringCategoryBatchNamespace(Namespace):
    """Batch metering category operations."""

    async def create(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.create(data)

    async def update(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.update(data)

    async def delete(self, ids: List[str]) -> HttpResponse:
        return await self._module.delete(ids)


class MeteringCategoryNamespace(ResourceNamespace):
    """Metering categories."""

    @property
    def batch(self) -> MeteringCategoryBatchNamespace:
        return MeteringCategoryBatchNamespace(self._module.batch)


class MeteringClient(ModuleClient, ResourceNamespace):
    """Metering data, statistics, categories and settings."""

    module_name = "metering_module"

    async def purge(self) -> HttpResponse:
        """Remove all metering data."""
        return await self._module.purge()

    @property
    def batch(self) -> BatchNamespace:
        return BatchNamespace(self._module.batch)

    @property
    def statistics(self) -> MeteringStatisticsNamespace:
        return MeteringStatisticsNamespace(self._module.statistics)

    @property
    def acl(self) -> ACLNamespace:
        return ACLNamespace(self._module.acl)

    @property
    def settings(self) -> SettingsNamespace:
        return SettingsNamespace(self._module.settings)

    @property
    def category(self) -> MeteringCategoryNamespace:
        return MeteringCategoryNamespace(self._module.category)
