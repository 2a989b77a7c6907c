"""Dynamic resource client (``dynamic_resource_module``)."""

from typing import Optional

from ..types import HttpResponse, JSONObject, JSONValue, Options, as_payload
from .common import ModuleClient, Namespace, ResourceNamespace


class DynamicResourceSchemaNamespace(ResourceNamespace):
    """Resource schemas, addressed by schema name."""

    async def get(self, name: str, options: Optional[Options] = None) -> HttpResponse:
        """Get a schema by name."""
        return await self._module.get(name, as_payload(options))

    async def generate(self, data: JSONValue) -> HttpResponse:
        """Generate a JSON schema from a sample object."""
        return await self._module.generate(data)


class DynamicResourceACLNamespace(Namespace):
    """Access control for dynamic resources; options carry schema name and id."""

    async def get(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(as_payload(options))

    async def update(self, options: Options) -> HttpResponse:
        return await self._module.update(as_payload(options))

    async def remove_by_user(self, action: str, user: str, data: Options) -> HttpResponse:
        return await self._module.remove_by_user(action, user, as_payload(data))

    async def remove_by_role(self, action: str, role: str, data: Options) -> HttpResponse:
        return await self._module.remove_by_role(action, role, as_payload(data))


class DynamicResourceClient(ModuleClient):
    """Schema-less resources stored under a named schema."""

    module_name = "dynamic_resource_module"

    async def find(self, schema_name: str, options: Optional[Options] = None) -> HttpResponse:
        """Find resources of a schema matching the given criteria."""
        return await self._module.find(schema_name, as_payload(options))

    async def get(self, schema_name: str, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(schema_name, id, as_payload(options))

    async def create(self, schema_name: str, data: JSONObject) -> HttpResponse:
        return await self._module.create(schema_name, data)

    async def update(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Replace a resource (HAL enabled)."""
        return await self._module.update(data, as_payload(options))

    async def patch(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Partially update a resource (HAL enabled)."""
        return await self._module.patch(data, as_payload(options))

    async def remove(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.remove(data, as_payload(options))

    @property
    def schema(self) -> DynamicResourceSchemaNamespace:
        return DynamicResourceSchemaNamespace(self._module.schema)

    @property
    def acl(self) -> DynamicResourceACLNamespace:
        return DynamicResourceACLNamespace(self._module.acl)
