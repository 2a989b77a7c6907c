"""
Namespace shapes shared by several domain clients.

A namespace wraps one SDK object and forwards each call to the method of the
same name, reshaping option models into plain mappings on the way.
"""

from typing import Any, List, Optional

from ..types import HttpResponse, JSONObject, JSONValue, Options, as_payload


class Namespace:
    """Base for all client namespaces."""

    def __init__(self, module: Any) -> None:
        self._module = module

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._module!r})"


class ResourceNamespace(Namespace):
    """find/get/create/update/remove over a single resource type."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find resources matching the given criteria."""
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        """Get a single resource by id."""
        return await self._module.get(id, as_payload(options))

    async def create(self, data: JSONObject) -> HttpResponse:
        """Create a new resource."""
        return await self._module.create(data)

    async def update(self, data: JSONObject) -> HttpResponse:
        """Update a resource (HAL enabled)."""
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        """Remove a resource (HAL enabled)."""
        return await self._module.remove(data)


class BatchNamespace(Namespace):
    """Batch create/update/remove."""

    async def create(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.create(data)

    async def update(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, ids: List[str]) -> HttpResponse:
        return await self._module.remove(ids)


class BatchedResourceNamespace(ResourceNamespace):
    """Resource namespace that also exposes batch operations."""

    @property
    def batch(self) -> BatchNamespace:
        return BatchNamespace(self._module.batch)


class ACLNamespace(Namespace):
    """Access control list operations for a resource."""

    async def get(self, options: Optional[Options] = None) -> HttpResponse:
        """Get the ACL policies for a resource."""
        return await self._module.get(as_payload(options))

    async def update(self, options: Options) -> HttpResponse:
        """Replace the ACL policies of a resource."""
        return await self._module.update(as_payload(options))

    async def remove_by_user(self, id: str, action: str, user: str, data: Optional[Options] = None) -> HttpResponse:
        """Remove the ACL policy applied to a user for an action."""
        return await self._module.remove_by_user(id, action, user, as_payload(data))

    async def remove_by_role(self, id: str, action: str, role: str, data: Optional[Options] = None) -> HttpResponse:
        """Remove the ACL policy applied to a role for an action."""
        return await self._module.remove_by_role(id, action, role, as_payload(data))


class StreamsNamespace(Namespace):
    """Binary stream operations (get, get_blob, create, update)."""

    async def get(self, data: JSONValue) -> HttpResponse:
        """Get the stream for a file entry, id or sized request."""
        return await self._module.get(data)

    async def get_blob(self, data: JSONValue) -> HttpResponse:
        """Get the stream as a blob."""
        return await self._module.get_blob(data)

    async def create(self, data: JSONValue, stream: Any) -> HttpResponse:
        """Upload a new stream."""
        return await self._module.create(data, stream)

    async def update(self, data: JSONValue, stream: Any) -> HttpResponse:
        """Replace an existing stream."""
        return await self._module.update(data, stream)


class SettingsNamespace(Namespace):
    """Module settings (get, update)."""

    async def get(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)


class ModuleClient:
    """Base for the per-module clients; resolves the SDK module lazily."""

    module_name: str = ""

    def __init__(self, app: Any) -> None:
        self._app = app

    @property
    def _module(self) -> Any:
        return getattr(self._app, self.module_name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(module={self.module_name!r})"
