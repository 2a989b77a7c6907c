"""
Baasic Client Type Definitions

Request/response envelopes, adapter interfaces, configuration options and
the query option models accepted by the domain clients.
"""

from dataclasses import dataclass, field, fields
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

import httpx


# Parsed JSON payloads are passed through without schema validation
JSONValue = Any
JSONObject = Dict[str, Any]


@dataclass(frozen=True)
class HttpRequest:
    """A single outgoing request built by the SDK."""

    url: httpx.URL
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    data: JSONValue = None

    def __post_init__(self) -> None:
        if not isinstance(self.url, httpx.URL):
            object.__setattr__(self, "url", httpx.URL(self.url))
        object.__setattr__(self, "method", self.method.upper())


@dataclass
class HttpResponse:
    """Response envelope delivered for exactly one request."""

    request: HttpRequest
    headers: Dict[str, str]
    status_code: int
    status_text: str
    data: JSONValue = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the platform's response envelope shape."""
        return {
            "request": self.request,
            "headers": self.headers,
            "statusCode": self.status_code,
            "statusText": self.status_text,
            "data": self.data,
        }


@runtime_checkable
class HttpClientProtocol(Protocol):
    """Transport interface consumed by the SDK."""

    async def request(self, request: HttpRequest) -> HttpResponse:
        """Perform one request and return its response."""
        ...


@runtime_checkable
class StorageHandlerProtocol(Protocol):
    """Key/value storage interface for custom implementations."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, data: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...


@runtime_checkable
class EventHandlerProtocol(Protocol):
    """Named-channel publish/subscribe interface."""

    def add_event(self, event_name: str, func: Callable[[Any], Any]) -> None:
        ...

    def trigger_event(self, event_name: str, data: Any = None) -> None:
        ...

    def push_message(self, message: Any, args: Any = None) -> None:
        ...


UrlFactory = Callable[..., httpx.URL]
SdkAppFactory = Callable[[str, Dict[str, Any]], Any]


# Option fields and their wire names; unknown option keys pass through to the SDK
OPTION_ALIASES = {
    "httpClient": "http_client",
    "storageHandler": "storage_handler",
    "eventHandler": "event_handler",
    "urlFactory": "url_factory",
    "apiRootUrl": "api_root_url",
    "apiVersion": "api_version",
    "useSSL": "use_ssl",
    "enableHALJsonFormat": "enable_hal_json_format",
}


@dataclass
class BaasicOptions:
    """Configuration overrides for the composition root."""

    # Factory returning the transport used for every request
    http_client: Optional[Callable[[], HttpClientProtocol]] = None
    # Factory returning the token/session storage
    storage_handler: Optional[Callable[[], StorageHandlerProtocol]] = None
    # Factory returning the event handler notified of token/session changes
    event_handler: Optional[Callable[[], EventHandlerProtocol]] = None
    # Function (path, base=None) -> httpx.URL
    url_factory: Optional[UrlFactory] = None
    # API host (default: api.baasic.com)
    api_root_url: str = "api.baasic.com"
    # API version segment (default: beta)
    api_version: str = "beta"
    # Use https (default: True)
    use_ssl: bool = True
    # Request HAL+JSON responses (default: True)
    enable_hal_json_format: bool = True
    # Enable debug logging (default: False)
    debug: bool = False
    # Additional SDK options passed through unchanged
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BaasicOptions":
        """Create from a mapping with snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = dict(data.get("extra") or {})
        for key, value in data.items():
            if key == "extra":
                continue
            name = OPTION_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                extra[key] = value
        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the options mapping handed to the SDK; unset factories are omitted."""
        result: Dict[str, Any] = dict(self.extra)
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = value
        return result


@dataclass
class QueryOptions:
    """Paging, ordering and search options for find operations."""

    page_number: Optional[int] = None
    page_size: Optional[int] = None
    order_by: Optional[str] = None
    order_direction: Optional[str] = None
    search: Optional[str] = None
    embed: Optional[str] = None
    fields: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API requests."""
        result: Dict[str, Any] = {}
        if self.page_number is not None:
            result["pageNumber"] = self.page_number
        if self.page_size is not None:
            result["pageSize"] = self.page_size
        if self.order_by is not None:
            result["orderBy"] = self.order_by
        if self.order_direction is not None:
            result["orderDirection"] = self.order_direction
        if self.search is not None:
            result["search"] = self.search
        if self.embed is not None:
            result["embed"] = self.embed
        if self.fields is not None:
            result["fields"] = self.fields
        result.update(self.extra)
        return result


@dataclass
class GetRequestOptions:
    """Embed and field selection for get operations."""

    embed: Optional[str] = None
    fields: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.embed is not None:
            result["embed"] = self.embed
        if self.fields is not None:
            result["fields"] = self.fields
        return result


@dataclass
class ACLPolicy:
    """A single access policy entry."""

    action_id: Optional[str] = None
    role_id: Optional[str] = None
    user_id: Optional[str] = None
    action: Optional[Dict[str, Any]] = None
    role: Optional[Dict[str, Any]] = None
    user: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.action_id is not None:
            result["actionId"] = self.action_id
        if self.role_id is not None:
            result["roleId"] = self.role_id
        if self.user_id is not None:
            result["userId"] = self.user_id
        if self.action is not None:
            result["action"] = self.action
        if self.role is not None:
            result["role"] = self.role
        if self.user is not None:
            result["user"] = self.user
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ACLPolicy":
        return cls(
            action_id=data.get("actionId"),
            role_id=data.get("roleId"),
            user_id=data.get("userId"),
            action=data.get("action"),
            role=data.get("role"),
            user=data.get("user"),
        )


@dataclass
class ACLOptions:
    """Resource identifier and the policies that apply to it."""

    id: Optional[str] = None
    policies: List[ACLPolicy] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        if self.policies:
            result["policies"] = [policy.to_dict() for policy in self.policies]
        return result


Options = Union[QueryOptions, GetRequestOptions, ACLOptions, ACLPolicy, Mapping[str, Any]]


def as_payload(value: Any) -> Any:
    """Reshape option models into plain mappings; everything else passes through."""
    if value is None:
        return None
    if isinstance(value, (QueryOptions, GetRequestOptions, ACLOptions, ACLPolicy)):
        return value.to_dict()
    if isinstance(value, list):
        return [as_payload(item) for item in value]
    return value
