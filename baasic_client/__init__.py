"""
Baasic Client for Python

An asyncio client facade over the Baasic backend-as-a-service SDK: per-module
domain clients plus the default HTTP transport, in-memory storage and event
adapters the SDK runs on.
"""

from .app import BaasicApp, create_baasic_app
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
from .types import (
    BaasicOptions,
    HttpRequest,
    HttpResponse,
    HttpClientProtocol,
    StorageHandlerProtocol,
    EventHandlerProtocol,
    QueryOptions,
    GetRequestOptions,
    ACLOptions,
    ACLPolicy,
)
from .errors import (
    BaasicError,
    ConfigurationError,
    HttpResponseError,
    is_baasic_error,
)
from .http import HttpClient, PooledHttpClient, create_url, resolve_port
from .storage import InMemoryStorageHandler
from .events import EventHandler

__version__ = "1.0.0"
__all__ = [
    # Application
    "BaasicApp",
    "create_baasic_app",
    # Clients
    "ApplicationSettingsClient",
    "ArticleClient",
    "CommerceClient",
    "DynamicResourceClient",
    "FilesClient",
    "KeyValueClient",
    "MediaVaultClient",
    "MembershipClient",
    "MeteringClient",
    "NotificationsClient",
    "TemplatingClient",
    "UserProfileClient",
    "ValueSetClient",
    # Types
    "BaasicOptions",
    "HttpRequest",
    "HttpResponse",
    "HttpClientProtocol",
    "StorageHandlerProtocol",
    "EventHandlerProtocol",
    "QueryOptions",
    "GetRequestOptions",
    "ACLOptions",
    "ACLPolicy",
    # Errors
    "BaasicError",
    "ConfigurationError",
    "HttpResponseError",
    "is_baasic_error",
    # Adapters
    "HttpClient",
    "PooledHttpClient",
    "create_url",
    "resolve_port",
    "InMemoryStorageHandler",
    "EventHandler",
]
