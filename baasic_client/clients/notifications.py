"""Notifications client (``notification_module``)."""

from typing import List

from ..types import HttpResponse, JSONObject
from .common import BatchNamespace, ModuleClient, Namespace, ResourceNamespace


class PublishBatchNamespace(Namespace):

    async def create(self, data: List[JSONObject]) -> HttpResponse:
        """Publish several notifications at once."""
        return await self._module.create(data)


class PublishNamespace(Namespace):
    """Notification publishing."""

    async def create(self, data: JSONObject) -> HttpResponse:
        """Publish a notification to its channels."""
        return await self._module.create(data)

    @property
    def batch(self) -> PublishBatchNamespace:
        return PublishBatchNamespace(self._module.batch)


class AudienceNamespace(ResourceNamespace):
    """Subscriptions or registrations of one audience (anonymous or users)."""

    @property
    def batch(self) -> BatchNamespace:
        return BatchNamespace(self._module.batch)


class AudiencesNamespace(Namespace):
    """Groups the anonymous and user audiences."""

    @property
    def anonymous(self) -> AudienceNamespace:
        return AudienceNamespace(self._module.anonymous)

    @property
    def users(self) -> AudienceNamespace:
        return AudienceNamespace(self._module.users)


class NotificationsSettingsNamespace(Namespace):
    """Per-provider notification settings."""

    async def get(self, provider: str) -> HttpResponse:
        return await self._module.get(provider)

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)


class NotificationsClient(ModuleClient):
    """Publishing, subscriptions, registrations and provider settings."""

    module_name = "notification_module"

    @property
    def publish(self) -> PublishNamespace:
        return PublishNamespace(self._module.publish)

    @property
    def subscriptions(self) -> AudiencesNamespace:
        return AudiencesNamespace(self._module.subscriptions)

    @property
    def registrations(self) -> AudiencesNamespace:
        return AudiencesNamespace(self._module.registrations)

    @property
    def settings(self) -> NotificationsSettingsNamespace:
        return NotificationsSettingsNamespace(self._module.settings)
