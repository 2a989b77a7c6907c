"""Membership client (``membership_module``)."""

from typing import Any, List, Optional

from ..types import HttpResponse, JSONObject, Options, as_payload
from .common import ModuleClient, Namespace, ResourceNamespace


class LoginNamespace(Namespace):
    """Username/password login and session teardown."""

    async def login(self, data: JSONObject) -> Any:
        """
        Log a user in.

        Args:
            data: ``username``, ``password`` and optional ``options``
                (for example ``["session", "sliding"]``)
        """
        return await self._module.login(data)

    async def load_user_data(self, data: Optional[JSONObject] = None) -> Any:
        """Load the logged in user's data."""
        return await self._module.load_user_data(data)

    async def logout(self, token: str, type: str) -> None:
        """Invalidate an access token."""
        return await self._module.logout(token, type)


class LoginSocialNamespace(Namespace):
    """Login through a social network provider."""

    async def get(self, provider: str, return_url: str) -> HttpResponse:
        """Get the provider's authorization URL."""
        return await self._module.get(provider, return_url)

    async def post(self, provider: str, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Complete a social login with the provider's response."""
        return await self._module.post(provider, data, as_payload(options))

    def parse_response(self, provider: str, return_url: str) -> Any:
        """Parse the provider's redirect into login data. Synchronous."""
        return self._module.parse_response(provider, return_url)


class PasswordRecoveryNamespace(Namespace):

    async def request_reset(self, data: JSONObject) -> HttpResponse:
        """Send a password recovery e-mail."""
        return await self._module.request_reset(data)

    async def reset(self, data: JSONObject) -> HttpResponse:
        """Set a new password using a recovery token."""
        return await self._module.reset(data)


class RegisterNamespace(Namespace):
    """Self-registration of users."""

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def activate(self, data: str) -> Any:
        """Activate a registered account with its activation token."""
        return await self._module.activate(data)


class UserSocialLoginNamespace(Namespace):
    """Social logins connected to a user."""

    async def get(self, username: str) -> HttpResponse:
        return await self._module.get(username)

    async def remove(self, username: str, provider: Any) -> HttpResponse:
        return await self._module.remove(username, provider)


class UserNamespace(ResourceNamespace):
    """Application users."""

    async def exists(self, username: str, options: Optional[Options] = None) -> HttpResponse:
        """Check whether a username is taken."""
        return await self._module.exists(username, as_payload(options))

    async def unlock(self, data: JSONObject) -> HttpResponse:
        return await self._module.unlock(data)

    async def lock(self, data: JSONObject) -> HttpResponse:
        return await self._module.lock(data)

    async def approve(self, data: JSONObject) -> HttpResponse:
        return await self._module.approve(data)

    async def disapprove(self, data: JSONObject) -> HttpResponse:
        return await self._module.disapprove(data)

    async def change_password(self, username: str, data: JSONObject) -> HttpResponse:
        """Change a user's password; ``data`` holds the new password."""
        return await self._module.change_password(username, data)

    @property
    def social_login(self) -> UserSocialLoginNamespace:
        return UserSocialLoginNamespace(self._module.social_login)


class PermissionsNamespace(Namespace):
    """
    Access policies and permission helpers.

    ``find``, ``get_actions``, ``get_permission_subjects``, ``create`` and
    ``remove`` call the API; the remaining helpers work on permission data
    already held by the SDK and are synchronous.
    """

    async def find(self, section: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(section, as_payload(options))

    async def get_actions(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get_actions(as_payload(options))

    async def get_permission_subjects(self, options: Optional[Options] = None) -> Any:
        """Get the users and roles a permission can be granted to."""
        return await self._module.get_permission_subjects(as_payload(options))

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    def create_permission(self, section: str, actions: List[JSONObject], membership_item: Any) -> Any:
        return self._module.create_permission(section, actions, membership_item)

    def find_permission(self, permission: JSONObject, permission_collection: Any) -> Any:
        return self._module.find_permission(permission, permission_collection)

    def exists(self, permission: JSONObject, permission_collection: Any) -> Any:
        return self._module.exists(permission, permission_collection)

    def toggle_permission(self, permission: JSONObject, action: str) -> Any:
        return self._module.toggle_permission(permission, action)

    def get_module_permissions(self, section: Any) -> Any:
        return self._module.get_module_permissions(section)

    def reset_permissions(self) -> None:
        self._module.reset_permissions()

    def has_permission(self, authorization: str) -> bool:
        """Check the current user's permission, e.g. ``"article.read"``."""
        return self._module.has_permission(authorization)


class LookupsNamespace(Namespace):

    async def get(self, options: Optional[Options] = None) -> HttpResponse:
        """Get membership lookups (access actions, sections, ...)."""
        return await self._module.get(as_payload(options))


class MembershipClient(ModuleClient):
    """Login, registration, users, roles and permissions."""

    module_name = "membership_module"

    @property
    def login(self) -> LoginNamespace:
        return LoginNamespace(self._module.login)

    @property
    def login_social(self) -> LoginSocialNamespace:
        return LoginSocialNamespace(self._module.login_social)

    @property
    def password_recovery(self) -> PasswordRecoveryNamespace:
        return PasswordRecoveryNamespace(self._module.password_recovery)

    @property
    def register(self) -> RegisterNamespace:
        return RegisterNamespace(self._module.register)

    @property
    def role(self) -> ResourceNamespace:
        return ResourceNamespace(self._module.role)

    @property
    def user(self) -> UserNamespace:
        return UserNamespace(self._module.user)

    @property
    def permissions(self) -> PermissionsNamespace:
        return PermissionsNamespace(self._module.permissions)

    @property
    def lookups(self) -> LookupsNamespace:
        return LookupsNamespace(self._module.lookups)
