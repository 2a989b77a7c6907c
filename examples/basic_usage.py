"""
Baasic Client for Python - Basic Usage Example

This example wires the client to a minimal stand-in for the platform SDK so
the adapters can be seen in action. A real application passes the platform
SDK's own factory instead.
"""

import asyncio
from typing import Any, Dict

from baasic_client import (
    BaasicApp,
    HttpRequest,
    InMemoryStorageHandler,
    QueryOptions,
)
from baasic_client.types import as_payload


class KeyValueModule:
    """Tiny key/value module that talks to the API through the transport."""

    def __init__(self, app: "DemoSdkApp") -> None:
        self._app = app

    async def find(self, options: Any = None) -> Any:
        query = "&".join(f"{key}={value}" for key, value in (options or {}).items())
        url = self._app.url_factory(f"/key-values?{query}", self._app.get_api_url())
        return await self._app.http_client.request(HttpRequest(url=url))


class DemoSdkApp:
    """Stand-in for the platform SDK application object."""

    def __init__(self, api_key: str, options: Dict[str, Any]) -> None:
        self._api_key = api_key
        self._options = options
        self.http_client = options["http_client"]()
        self.storage = options["storage_handler"]()
        self.events = options["event_handler"]()
        self.url_factory = options["url_factory"]
        self.key_value_module = KeyValueModule(self)

    def get_api_key(self) -> str:
        return self._api_key

    def get_api_url(self) -> str:
        scheme = "https" if self._options["use_ssl"] else "http"
        return f"{scheme}://{self._options['api_root_url']}/{self._options['api_version']}/{self._api_key}"

    def get_access_token(self) -> Any:
        return self.storage.get("token")

    def update_access_token(self, token: Any) -> None:
        self.storage.set("token", token)
        self.events.trigger_event("tokenUpdated", token)

    def get_user(self) -> Any:
        return self.storage.get("user")

    def set_user(self, user: Any) -> None:
        self.storage.set("user", user)


def state_example():
    """Token and user state example."""
    print("=== State Example ===\n")

    app = BaasicApp("example-app", {"debug": True}, sdk_factory=DemoSdkApp)

    app.events.add_event("tokenUpdated", lambda token: print(f"Token updated: {token}"))
    app.update_access_token({"token": "abc", "type": "bearer"})

    print(f"API key: {app.get_api_key()}")
    print(f"API URL: {app.get_api_url()}")
    print(f"Access token: {app.get_access_token()}")


def custom_storage_example():
    """Custom storage adapter example."""
    print("\n=== Custom Storage Example ===\n")

    shared = InMemoryStorageHandler()
    first = BaasicApp("app-one", {"storageHandler": lambda: shared}, sdk_factory=DemoSdkApp)
    second = BaasicApp("app-two", {"storageHandler": lambda: shared}, sdk_factory=DemoSdkApp)

    first.set_user({"userName": "jane"})
    print(f"User seen by second app: {second.get_user()}")


async def request_example():
    """Transport example (fails without network access)."""
    print("\n=== Request Example ===\n")

    app = BaasicApp("example-app", sdk_factory=DemoSdkApp)

    options = as_payload(QueryOptions(page_number=1, page_size=10))
    print(f"Query options sent to the SDK: {options}")

    try:
        response = await app.key_value.find(QueryOptions(page_number=1, page_size=10))
        print(f"Status: {response.status_code} {response.status_text}")
        print(f"Data: {response.data}")
    except Exception as e:
        print(f"Error (expected without network): {type(e).__name__}")


if __name__ == "__main__":
    state_example()
    custom_storage_example()
    asyncio.run(request_example())

    print("\nExamples completed!")
