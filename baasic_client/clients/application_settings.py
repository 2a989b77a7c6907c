"""Application settings client (``application_setting_module``)."""

from typing import Optional

from ..types import HttpResponse, JSONObject, Options, as_payload
from .common import ModuleClient


class ApplicationSettingsClient(ModuleClient):
    """Read and update the application's settings."""

    module_name = "application_setting_module"

    async def get(self, options: Optional[Options] = None) -> HttpResponse:
        """Get the application settings resource."""
        return await self._module.get(as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        """Update the application settings resource."""
        return await self._module.update(data)
