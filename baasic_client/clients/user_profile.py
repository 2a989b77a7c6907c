"""User profile client (``user_profile_module``)."""

from typing import Any, Optional

from ..types import HttpResponse, JSONObject, JSONValue, Options, as_payload
from .common import (
    ACLNamespace,
    BatchedResourceNamespace,
    ModuleClient,
    Namespace,
    ResourceNamespace,
)


class AvatarStreamsNamespace(Namespace):
    """Avatar image streams."""

    async def get(self, data: JSONValue) -> HttpResponse:
        """Get an avatar stream by profile id or ``{id, width, height}``."""
        return await self._module.get(data)

    async def get_blob(self, data: JSONValue) -> HttpResponse:
        return await self._module.get_blob(data)

    async def create(self, id: str, data: JSONValue, stream: Any) -> HttpResponse:
        """Upload a new avatar for a profile."""
        return await self._module.create(id, data, stream)

    async def update(self, data: JSONValue, stream: Any) -> HttpResponse:
        return await self._module.update(data, stream)


class AvatarNamespace(Namespace):
    """Profile avatars."""

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def link(self, id: str, data: JSONObject) -> HttpResponse:
        """Link an existing file as the profile's avatar."""
        return await self._module.link(id, data)

    async def unlink(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.unlink(data, as_payload(options))

    @property
    def streams(self) -> AvatarStreamsNamespace:
        return AvatarStreamsNamespace(self._module.streams)


class ProfileNamespace(ResourceNamespace):
    """User profiles with education, skills, work history and avatar."""

    @property
    def acl(self) -> ACLNamespace:
        return ACLNamespace(self._module.acl)

    @property
    def education(self) -> ResourceNamespace:
        return ResourceNamespace(self._module.education)

    @property
    def avatar(self) -> AvatarNamespace:
        return AvatarNamespace(self._module.avatar)

    @property
    def skill(self) -> ResourceNamespace:
        return ResourceNamespace(self._module.skill)

    @property
    def work(self) -> ResourceNamespace:
        return ResourceNamespace(self._module.work)


class UserProfileClient(ModuleClient):
    """Profiles and the company, organization and skill lookups."""

    module_name = "user_profile_module"

    @property
    def profile(self) -> ProfileNamespace:
        return ProfileNamespace(self._module.profile)

    @property
    def company(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.company)

    @property
    def organization(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.organization)

    @property
    def skill(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.skill)
