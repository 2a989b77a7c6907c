"""
Baasic Application

Composition root: builds the default transport, storage, event and URL
adapters, hands them to the SDK application object as configuration, and
exposes the per-module domain clients.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from .clients import (
    ApplicationSettingsClient,
    ArticleClient,
    CommerceClient,
    DynamicResourceClient,
    FilesClient,
    KeyValueClient,
    MediaVaultClient,
    MembershipClient,
    MeteringClient,
    NotificationsClient,
    TemplatingClient,
    UserProfileClient,
    ValueSetClient,
)
from .errors import ConfigurationError
from .events import EventHandler
from .http import HttpClient, create_url
from .storage import InMemoryStorageHandler
from .types import BaasicOptions, SdkAppFactory


logger = logging.getLogger("baasic_client")

OptionsInput = Union[BaasicOptions, Mapping[str, Any], None]


class BaasicApp:
    """
    Baasic application - SDK entry point.

    Args:
        api_key: Application identifier issued by the platform
        options: Partial configuration overrides; absent adapter slots fall
            back to the defaults owned by this instance
        sdk_factory: Callable ``(api_key, options) -> app`` constructing the
            platform SDK application object
    """

    def __init__(
        self,
        api_key: str,
        options: OptionsInput = None,
        *,
        sdk_factory: SdkAppFactory,
    ) -> None:
        """Initialize the application and its domain clients."""
        self._validate(api_key, sdk_factory)

        self._options = self._coerce_options(options)
        self._debug = self._options.debug

        # Adapters owned by this instance
        self._storage = InMemoryStorageHandler()
        self._events = EventHandler()

        self._app = sdk_factory(api_key, self.get_options())

        # Domain clients
        self.application_settings = ApplicationSettingsClient(self._app)
        self.article = ArticleClient(self._app)
        self.commerce = CommerceClient(self._app)
        self.dynamic_resource = DynamicResourceClient(self._app)
        self.files = FilesClient(self._app)
        self.key_value = KeyValueClient(self._app)
        self.media_vault = MediaVaultClient(self._app)
        self.membership = MembershipClient(self._app)
        self.metering = MeteringClient(self._app)
        self.notifications = NotificationsClient(self._app)
        self.templating = TemplatingClient(self._app)
        self.user_profile = UserProfileClient(self._app)
        self.value_set = ValueSetClient(self._app)

        self._log("BaasicApp initialized")

    def _validate(self, api_key: str, sdk_factory: Any) -> None:
        """Validate constructor arguments."""
        if not api_key:
            raise ConfigurationError("api_key is required")
        if not callable(sdk_factory):
            raise ConfigurationError("sdk_factory must be callable")

    @staticmethod
    def _coerce_options(options: OptionsInput) -> BaasicOptions:
        if options is None:
            return BaasicOptions()
        if isinstance(options, BaasicOptions):
            return options
        return BaasicOptions.from_dict(options)

    def _log(self, message: str, *args: Any) -> None:
        """Log debug message."""
        if self._debug:
            logger.debug(f"[Baasic] {message}", *args)

    def get_options(self) -> Dict[str, Any]:
        """Return the options handed to the SDK, with defaults filled in."""
        defaults: Dict[str, Any] = {
            "http_client": HttpClient,
            "storage_handler": lambda: self._storage,
            "event_handler": lambda: self._events,
            "url_factory": create_url,
        }
        overrides = self._options.to_dict()
        for slot in defaults:
            if slot in overrides:
                self._log("Using custom %s", slot)
        return {**defaults, **overrides}

    # =========================================================================
    # Default adapters
    # =========================================================================

    @property
    def storage(self) -> InMemoryStorageHandler:
        """The default storage adapter owned by this instance."""
        return self._storage

    @property
    def events(self) -> EventHandler:
        """The default event adapter owned by this instance."""
        return self._events

    @property
    def sdk(self) -> Any:
        """The underlying SDK application object."""
        return self._app

    # =========================================================================
    # State Methods
    # =========================================================================

    def get_access_token(self) -> Any:
        """Get the current access token."""
        return self._app.get_access_token()

    def update_access_token(self, token: Any) -> None:
        """Replace the current access token."""
        self._app.update_access_token(token)

    def get_api_key(self) -> str:
        return self._app.get_api_key()

    def get_api_url(self) -> Any:
        """Get the base API URL."""
        return self._app.get_api_url()

    def get_user(self) -> Any:
        """Get the current user."""
        return self._app.get_user()

    def set_user(self, user: Any) -> None:
        """Set the current user."""
        self._app.set_user(user)


# =============================================================================
# Factory Functions
# =============================================================================

def create_baasic_app(
    api_key: str,
    options: OptionsInput = None,
    *,
    sdk_factory: SdkAppFactory,
) -> BaasicApp:
    """Create a new Baasic application."""
    return BaasicApp(api_key, options, sdk_factory=sdk_factory)
