"""Files client (``file_module``)."""

from typing import List, Optional

from ..types import HttpResponse, JSONObject, Options, as_payload
from .common import ACLNamespace, ModuleClient, Namespace, StreamsNamespace


class FilesBatchNamespace(Namespace):
    """Batch file entry operations."""

    async def update(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.update(data)

    async def link(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.link(data)

    async def unlink(self, data: List[JSONObject]) -> HttpResponse:
        """Unlink file entries; each item is an id or an ``{id, fileFormat}`` object."""
        return await self._module.unlink(data)


class FilesClient(ModuleClient):
    """File entries, their streams and access control."""

    module_name = "file_module"

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find file entries matching the given criteria."""
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        """Get a single file entry."""
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def unlink(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Unlink a file entry; the file is removed once no derived formats remain."""
        return await self._module.unlink(data, as_payload(options))

    async def link(self, data: JSONObject) -> HttpResponse:
        """Link an existing file to a new file entry."""
        return await self._module.link(data)

    @property
    def batch(self) -> FilesBatchNamespace:
        return FilesBatchNamespace(self._module.batch)

    @property
    def streams(self) -> StreamsNamespace:
        return StreamsNamespace(self._module.streams)

    @property
    def acl(self) -> ACLNamespace:
        return ACLNamespace(self._module.acl)
