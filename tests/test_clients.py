"""
Domain Client Forwarding Tests

Every client namespace forwards each call to the SDK method of the same
name with the same arguments and returns the SDK's result unchanged. The
client tree is walked by introspection so new namespaces are covered
automatically.
"""

import inspect
import re
from typing import Any, Iterator, List, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
from hypothesis import given, settings, strategies as st

from baasic_client import (
    ACLOptions,
    ACLPolicy,
    BaasicApp,
    GetRequestOptions,
    QueryOptions,
)
from baasic_client.clients.common import ModuleClient, Namespace
from baasic_client.types import as_payload


CLIENT_ATTRIBUTES = [
    "application_settings",
    "article",
    "commerce",
    "dynamic_resource",
    "files",
    "key_value",
    "media_vault",
    "membership",
    "metering",
    "notifications",
    "templating",
    "user_profile",
    "value_set",
]

# Platform method names and the Python names the clients expose
PLATFORM_TO_PYTHON_METHOD_MAP = {
    "saveDraft": "save_draft",
    "removeByUser": "remove_by_user",
    "removeByRole": "remove_by_role",
    "removeAll": "remove_all",
    "findByUser": "find_by_user",
    "unlinkByArticle": "unlink_by_article",
    "getBlob": "get_blob",
    "isSubscribed": "is_subscribed",
    "unSubscribe": "unsubscribe",
    "validateVAT": "validate_vat",
    "loadUserData": "load_user_data",
    "parseResponse": "parse_response",
    "requestReset": "request_reset",
    "changePassword": "change_password",
    "getActions": "get_actions",
    "getPermissionSubjects": "get_permission_subjects",
    "createPermission": "create_permission",
    "findPermission": "find_permission",
    "togglePermission": "toggle_permission",
    "getModulePermissions": "get_module_permissions",
    "resetPermissions": "reset_permissions",
    "hasPermission": "has_permission",
}

SNAKE_CASE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")


# =============================================================================
# Helpers
# =============================================================================

def iter_namespaces(obj: Any, path: str) -> Iterator[Tuple[str, Any]]:
    """Yield (path, namespace) for a client and every namespace below it."""
    yield path, obj
    for name, attr in inspect.getmembers(type(obj)):
        if name.startswith("_") or not isinstance(attr, property):
            continue
        child = getattr(obj, name)
        if isinstance(child, (Namespace, ModuleClient)):
            yield from iter_namespaces(child, f"{path}.{name}")


def public_methods(obj: Any) -> Iterator[Tuple[str, Any]]:
    for name, attr in inspect.getmembers(type(obj)):
        if name.startswith("_") or isinstance(attr, property):
            continue
        if inspect.isfunction(attr):
            yield name, attr


def positional_args(func: Any) -> List[str]:
    params = list(inspect.signature(func).parameters)[1:]
    return [f"{name}-value" for name in params]


def all_namespaces(app: BaasicApp) -> List[Tuple[str, Any]]:
    result = []
    for attribute in CLIENT_ATTRIBUTES:
        result.extend(iter_namespaces(getattr(app, attribute), attribute))
    return result


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def sdk() -> AsyncMock:
    """SDK application object whose methods are awaitable."""
    return AsyncMock(name="sdk_app")


@pytest.fixture
def app(sdk: AsyncMock) -> BaasicApp:
    return BaasicApp("test-app", sdk_factory=lambda api_key, options: sdk)


# =============================================================================
# Forwarding Tests
# =============================================================================

class TestForwarding:
    """Generic forwarding checks over the whole client tree."""

    def test_all_clients_present(self, app: BaasicApp, sdk: AsyncMock):
        """Test every domain client is bound to its SDK module."""
        for attribute in CLIENT_ATTRIBUTES:
            client = getattr(app, attribute)
            assert isinstance(client, ModuleClient)
            assert client._module is getattr(sdk, client.module_name)

    def test_nested_namespaces_reachable(self, app: BaasicApp):
        """Test deeply nested namespaces are exposed."""
        paths = {path for path, _ in all_namespaces(app)}

        for expected in [
            "article.articles.comments.replies",
            "article.articles.files.streams",
            "article.articles.subscriptions.comment_requires_moderation",
            "article.tags.subscriptions",
            "commerce.customers.payment_methods",
            "commerce.invoices.streams",
            "commerce.lookups.invoice_statuses.batch",
            "dynamic_resource.schema",
            "media_vault.processing_provider_settings",
            "membership.user.social_login",
            "metering.category.batch",
            "notifications.registrations.users.batch",
            "user_profile.profile.avatar.streams",
            "value_set.items",
        ]:
            assert expected in paths

    def test_namespaces_bound_to_sdk_paths(self, app: BaasicApp):
        """Test each namespace wraps the SDK object at its own attribute path."""
        for path, namespace in all_namespaces(app):
            client_attribute, *rest = path.split(".")
            module_name = getattr(app, client_attribute).module_name
            expected = ".".join(["sdk_app", module_name, *rest])

            assert namespace._module._extract_mock_name() == expected, path

    def test_instance_and_module_comments_distinct(self, app: BaasicApp, sdk: AsyncMock):
        assert app.article.comments._module is sdk.article_module.comments
        assert app.article.articles.comments._module is sdk.article_module.articles.comments

    @pytest.mark.asyncio
    async def test_async_methods_forward_same_name(self, app: BaasicApp):
        """Test each async method awaits the same-named SDK method with the same arguments."""
        checked = 0
        for path, namespace in all_namespaces(app):
            for name, method in public_methods(namespace):
                if not inspect.iscoroutinefunction(method):
                    continue
                args = positional_args(method)
                target = getattr(namespace._module, name)
                target.reset_mock()
                target.return_value = {"forwarded": f"{path}.{name}"}

                result = await getattr(namespace, name)(*args)

                target.assert_awaited_once_with(*args)
                assert result == {"forwarded": f"{path}.{name}"}
                checked += 1

        assert checked > 200

    def test_sync_methods_forward_same_name(self, app: BaasicApp):
        """Test synchronous helpers call the same-named SDK method directly."""
        checked = 0
        for path, namespace in all_namespaces(app):
            for name, method in public_methods(namespace):
                if inspect.iscoroutinefunction(method):
                    continue
                args = positional_args(method)
                target = MagicMock(return_value=f"{path}.{name}")
                setattr(namespace._module, name, target)

                result = getattr(namespace, name)(*args)

                target.assert_called_once_with(*args)
                if name != "reset_permissions":
                    assert result == f"{path}.{name}"
                checked += 1

        assert checked == 8

    def test_method_names_snake_case(self, app: BaasicApp):
        """Test every exposed method and namespace uses snake_case."""
        for path, namespace in all_namespaces(app):
            for segment in path.split("."):
                assert SNAKE_CASE.match(segment), path
            for name, _ in public_methods(namespace):
                assert SNAKE_CASE.match(name), f"{path}.{name}"

    @pytest.mark.parametrize("platform_name, python_name", PLATFORM_TO_PYTHON_METHOD_MAP.items())
    def test_platform_method_exposed(self, app: BaasicApp, platform_name: str, python_name: str):
        """Test platform method names are exposed under their Python names."""
        exposed = {
            name
            for _, namespace in all_namespaces(app)
            for name, _ in public_methods(namespace)
        }
        assert python_name in exposed, platform_name


# =============================================================================
# Per-Module Tests
# =============================================================================

class TestArticle:
    """Tests for the article client."""

    @pytest.mark.asyncio
    async def test_save_draft(self, app: BaasicApp, sdk: AsyncMock):
        draft = {"title": "Draft", "content": "..."}
        sdk.article_module.articles.save_draft.return_value = {"id": "article_123", "status": 1}

        result = await app.article.articles.save_draft(draft)

        sdk.article_module.articles.save_draft.assert_awaited_once_with(draft)
        assert result["status"] == 1

    @pytest.mark.asyncio
    async def test_comment_reply_get(self, app: BaasicApp, sdk: AsyncMock):
        await app.article.articles.comments.replies.get("article_1", "comment_2", "reply_3")

        sdk.article_module.articles.comments.replies.get.assert_awaited_once_with(
            "article_1", "comment_2", "reply_3", None
        )

    @pytest.mark.asyncio
    async def test_tag_subscription(self, app: BaasicApp, sdk: AsyncMock):
        tag = {"id": "tag_1"}
        await app.article.tags.subscriptions.subscribe(tag, {"userId": "user_1"})

        sdk.article_module.tags.subscriptions.subscribe.assert_awaited_once_with(
            tag, {"userId": "user_1"}
        )

    def test_comment_statuses(self, app: BaasicApp, sdk: AsyncMock):
        """Test statuses are read straight from the SDK."""
        sdk.article_module.comments.statuses = {"approved": 1, "reported": 4}
        assert app.article.comments.statuses == {"approved": 1, "reported": 4}


class TestCommerce:
    """Tests for the commerce client."""

    @pytest.mark.asyncio
    async def test_lookup_payment_method_update(self, app: BaasicApp, sdk: AsyncMock):
        """Test the lookup update calls update, not get."""
        method = {"id": "pm_1", "name": "Card"}

        await app.commerce.lookups.payment_methods.update(method)

        sdk.commerce_module.lookups.payment_methods.update.assert_awaited_once_with(method)
        sdk.commerce_module.lookups.payment_methods.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_validate_vat(self, app: BaasicApp, sdk: AsyncMock):
        sdk.commerce_module.validate_vat.return_value = {"valid": True}

        result = await app.commerce.validate_vat("HR", "12345678901")

        sdk.commerce_module.validate_vat.assert_awaited_once_with("HR", "12345678901")
        assert result == {"valid": True}


class TestMembership:
    """Tests for the membership client."""

    @pytest.mark.asyncio
    async def test_login(self, app: BaasicApp, sdk: AsyncMock):
        credentials = {"username": "jane", "password": "secret", "options": ["session", "sliding"]}
        sdk.membership_module.login.login.return_value = {"access_token": "abc"}

        result = await app.membership.login.login(credentials)

        sdk.membership_module.login.login.assert_awaited_once_with(credentials)
        assert result == {"access_token": "abc"}

    def test_has_permission_is_synchronous(self, app: BaasicApp, sdk: AsyncMock):
        sdk.membership_module.permissions.has_permission = MagicMock(return_value=True)

        assert app.membership.permissions.has_permission("article.read") is True

    def test_parse_response_is_synchronous(self, app: BaasicApp, sdk: AsyncMock):
        sdk.membership_module.login_social.parse_response = MagicMock(
            return_value={"code": "xyz", "oauth_token": None}
        )

        result = app.membership.login_social.parse_response("google", "https://example.com/cb")

        assert result["code"] == "xyz"

    @pytest.mark.asyncio
    async def test_sdk_error_propagates(self, app: BaasicApp, sdk: AsyncMock):
        """Test SDK failures reach the caller unchanged."""
        failure = RuntimeError("invalid_grant")
        sdk.membership_module.login.login.side_effect = failure

        with pytest.raises(RuntimeError) as exc_info:
            await app.membership.login.login({"username": "jane", "password": "wrong"})

        assert exc_info.value is failure


class TestDynamicResource:
    """Tests for the dynamic resource client."""

    @pytest.mark.asyncio
    async def test_find_by_schema(self, app: BaasicApp, sdk: AsyncMock):
        await app.dynamic_resource.find("products", QueryOptions(search="shoe", page_size=5))

        sdk.dynamic_resource_module.find.assert_awaited_once_with(
            "products", {"search": "shoe", "pageSize": 5}
        )

    @pytest.mark.asyncio
    async def test_acl_remove_by_user(self, app: BaasicApp, sdk: AsyncMock):
        await app.dynamic_resource.acl.remove_by_user(
            "Read", "jane", {"schemaName": "products", "id": "p_1"}
        )

        sdk.dynamic_resource_module.acl.remove_by_user.assert_awaited_once_with(
            "Read", "jane", {"schemaName": "products", "id": "p_1"}
        )


class TestValueSet:

    @pytest.mark.asyncio
    async def test_item_get(self, app: BaasicApp, sdk: AsyncMock):
        await app.value_set.items.get("colors", "item_1", GetRequestOptions(embed="set"))

        sdk.value_set_module.items.get.assert_awaited_once_with("colors", "item_1", {"embed": "set"})


# =============================================================================
# Option Model Tests
# =============================================================================

class TestOptionModels:
    """Option models are reshaped into the mappings the SDK expects."""

    @pytest.mark.asyncio
    async def test_query_options_forwarded_as_mapping(self, app: BaasicApp, sdk: AsyncMock):
        options = QueryOptions(page_number=2, page_size=10, order_by="dateCreated", order_direction="desc")

        await app.key_value.find(options)

        sdk.key_value_module.find.assert_awaited_once_with({
            "pageNumber": 2,
            "pageSize": 10,
            "orderBy": "dateCreated",
            "orderDirection": "desc",
        })

    @pytest.mark.asyncio
    async def test_acl_options_forwarded_as_mapping(self, app: BaasicApp, sdk: AsyncMock):
        options = ACLOptions(
            id="file_1",
            policies=[ACLPolicy(action_id="Read", role_id="Anonymous")],
        )

        await app.files.acl.update(options)

        sdk.file_module.acl.update.assert_awaited_once_with({
            "id": "file_1",
            "policies": [{"actionId": "Read", "roleId": "Anonymous"}],
        })

    @pytest.mark.asyncio
    async def test_plain_mapping_unchanged(self, app: BaasicApp, sdk: AsyncMock):
        options = {"page": 1, "rpp": 20}

        await app.templating.find(options)

        sdk.templating_module.find.assert_awaited_once_with(options)

    def test_acl_policy_from_dict(self):
        policy = ACLPolicy.from_dict({"actionId": "Update", "userId": "user_1"})
        assert policy.action_id == "Update"
        assert policy.user_id == "user_1"
        assert policy.role_id is None

    @settings(max_examples=50)
    @given(
        page_number=st.one_of(st.none(), st.integers(min_value=1)),
        page_size=st.one_of(st.none(), st.integers(min_value=1, max_value=1000)),
        search=st.one_of(st.none(), st.text()),
    )
    def test_query_options_keys(self, page_number, page_size, search):
        """Property: only set fields appear, under their platform names."""
        payload = as_payload(QueryOptions(page_number=page_number, page_size=page_size, search=search))

        expected = {
            key: value
            for key, value in [("pageNumber", page_number), ("pageSize", page_size), ("search", search)]
            if value is not None
        }
        assert payload == expected

    def test_as_payload_list(self):
        policies = [ACLPolicy(action_id="Read"), {"actionId": "Create"}]
        assert as_payload(policies) == [{"actionId": "Read"}, {"actionId": "Create"}]

    def test_as_payload_none(self):
        assert as_payload(None) is None
