"""Value set client (``value_set_module``)."""

from typing import Optional

from ..types import HttpResponse, JSONObject, Options, as_payload
from .common import ModuleClient, Namespace, ResourceNamespace


class ValueSetItemsNamespace(Namespace):
    """Items belonging to a value set."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find value set items; options must carry the set name."""
        return await self._module.find(as_payload(options))

    async def get(self, set_name: str, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(set_name, id, as_payload(options))

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)


class ValueSetClient(ModuleClient, ResourceNamespace):
    """Value sets addressed by set name, and their items."""

    module_name = "value_set_module"

    async def get(self, set_name: str, options: Optional[Options] = None) -> HttpResponse:
        """Get a value set by its name or id."""
        return await self._module.get(set_name, as_payload(options))

    @property
    def items(self) -> ValueSetItemsNamespace:
        return ValueSetItemsNamespace(self._module.items)
