"""
Article client (``article_module``).

Two families of namespaces are exposed:

- module level (``comments``, ``files``, ``ratings``, ``tags`` ...) which
  address resources directly by id;
- article instance level (``articles.comments``, ``articles.files`` ...)
  which address resources through their owning article.
"""

from typing import Any, List, Optional

from ..types import HttpResponse, JSONObject, JSONValue, Options, as_payload
from .common import ACLNamespace, ModuleClient, Namespace, SettingsNamespace, StreamsNamespace


# =============================================================================
# Shared shapes
# =============================================================================

class CommentModerationNamespace(Namespace):
    """Moderation workflow shared by comments and comment replies."""

    @property
    def statuses(self) -> Any:
        """Comment status values known to the SDK (approved, reported, ...)."""
        return self._module.statuses

    async def approve(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Approve a comment; options carry the notification configuration."""
        return await self._module.approve(data, as_payload(options))

    async def unapprove(self, data: JSONObject) -> HttpResponse:
        return await self._module.unapprove(data)

    async def flag(self, data: JSONObject) -> HttpResponse:
        return await self._module.flag(data)

    async def unflag(self, data: JSONObject) -> HttpResponse:
        return await self._module.unflag(data)

    async def report(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        """Report a comment; options carry the notification configuration."""
        return await self._module.report(data, as_payload(options))

    async def unreport(self, data: JSONObject) -> HttpResponse:
        return await self._module.unreport(data)

    async def spam(self, data: JSONObject) -> HttpResponse:
        """Mark as spam."""
        return await self._module.spam(data)

    async def unspam(self, data: JSONObject) -> HttpResponse:
        return await self._module.unspam(data)

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)


class SubscriptionNamespace(Namespace):
    """subscribe / is_subscribed / unsubscribe for one notification type."""

    async def subscribe(self, data: JSONObject) -> HttpResponse:
        return await self._module.subscribe(data)

    async def is_subscribed(self, data: JSONObject) -> HttpResponse:
        return await self._module.is_subscribed(data)

    async def unsubscribe(self, data: JSONObject) -> HttpResponse:
        return await self._module.unsubscribe(data)


class TargetedSubscriptionNamespace(Namespace):
    """Subscriptions scoped to a target resource (an article or a tag)."""

    async def subscribe(self, target: JSONObject, data: JSONValue) -> HttpResponse:
        return await self._module.subscribe(target, data)

    async def is_subscribed(self, target: JSONObject, data: JSONValue) -> HttpResponse:
        return await self._module.is_subscribed(target, data)

    async def unsubscribe(self, target: JSONObject, data: JSONValue) -> HttpResponse:
        return await self._module.unsubscribe(target, data)


# =============================================================================
# Article instance namespaces
# =============================================================================

class ArticleInstanceCommentRepliesNamespace(CommentModerationNamespace):

    async def create(self, article_id: str, data: JSONObject) -> HttpResponse:
        return await self._module.create(article_id, data)

    async def find(self, article_id: str, comment_id: str, options: Optional[Options] = None) -> HttpResponse:
        """Find the replies to a comment of an article."""
        return await self._module.find(article_id, comment_id, as_payload(options))

    async def get(
        self,
        article_id: str,
        comment_id: str,
        reply_id: str,
        options: Optional[Options] = None,
    ) -> HttpResponse:
        return await self._module.get(article_id, comment_id, reply_id, as_payload(options))

    async def remove_all(self, data: JSONObject) -> HttpResponse:
        """Remove every reply of the given article."""
        return await self._module.remove_all(data)


class ArticleInstanceCommentsNamespace(CommentModerationNamespace):
    """Comments of a specific article."""

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def find(self, article_id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(article_id, as_payload(options))

    async def get(self, article_id: str, comment_id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(article_id, comment_id, as_payload(options))

    async def remove_all(self, data: JSONObject) -> HttpResponse:
        """Remove every comment of the given article."""
        return await self._module.remove_all(data)

    @property
    def replies(self) -> ArticleInstanceCommentRepliesNamespace:
        return ArticleInstanceCommentRepliesNamespace(self._module.replies)


class ArticleInstanceFilesBatchNamespace(Namespace):

    async def unlink(self, article_id: str, data: List[JSONValue]) -> HttpResponse:
        return await self._module.unlink(article_id, data)

    async def update(self, article_id: str, data: List[JSONObject]) -> HttpResponse:
        return await self._module.update(article_id, data)

    async def link(self, article_id: str, data: List[JSONObject]) -> HttpResponse:
        return await self._module.link(article_id, data)


class ArticleInstanceFilesStreamsNamespace(Namespace):

    async def get(self, article_id: str, data: JSONValue) -> HttpResponse:
        return await self._module.get(article_id, data)

    async def get_blob(self, article_id: str, data: JSONValue) -> HttpResponse:
        return await self._module.get_blob(article_id, data)

    async def update(self, article_id: str, data: JSONValue, stream: Any) -> HttpResponse:
        return await self._module.update(article_id, data, stream)

    async def create(self, article_id: str, data: JSONObject, stream: Any) -> HttpResponse:
        return await self._module.create(article_id, data, stream)


class ArticleInstanceFilesNamespace(Namespace):
    """Files linked to a specific article."""

    async def find(self, article_id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(article_id, as_payload(options))

    async def get(self, article_id: str, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(article_id, id, as_payload(options))

    async def unlink(self, article_id: str, data: JSONValue, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.unlink(article_id, data, as_payload(options))

    async def unlink_by_article(
        self,
        article_id: str,
        data: JSONValue,
        options: Optional[Options] = None,
    ) -> HttpResponse:
        """Unlink every file entry of the article."""
        return await self._module.unlink_by_article(article_id, data, as_payload(options))

    async def update(self, article_id: str, data: JSONObject) -> HttpResponse:
        return await self._module.update(article_id, data)

    async def link(self, article_id: str, data: JSONObject) -> HttpResponse:
        return await self._module.link(article_id, data)

    @property
    def batch(self) -> ArticleInstanceFilesBatchNamespace:
        return ArticleInstanceFilesBatchNamespace(self._module.batch)

    @property
    def streams(self) -> ArticleInstanceFilesStreamsNamespace:
        return ArticleInstanceFilesStreamsNamespace(self._module.streams)


class ArticleInstanceRatingsNamespace(Namespace):
    """Ratings of a specific article."""

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def find(self, article_id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(article_id, as_payload(options))

    async def find_by_user(self, article_id: str, username: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find_by_user(article_id, username, as_payload(options))

    async def get(self, article_id: str, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(article_id, id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    async def remove_all(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove_all(data)


class ArticleInstanceSubscriptionsNamespace(Namespace):
    """Notification subscriptions tied to articles."""

    @property
    def comment_reported(self) -> SubscriptionNamespace:
        return SubscriptionNamespace(self._module.comment_reported)

    @property
    def article(self) -> TargetedSubscriptionNamespace:
        return TargetedSubscriptionNamespace(self._module.article)

    @property
    def comment_requires_moderation(self) -> SubscriptionNamespace:
        return SubscriptionNamespace(self._module.comment_requires_moderation)


class ArticleInstanceTagsNamespace(Namespace):
    """Tags of a specific article."""

    async def find(self, article_id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(article_id, as_payload(options))

    async def get(self, article_id: str, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(article_id, id, as_payload(options))

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    async def remove_all(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove_all(data)


class ArticlesNamespace(Namespace):
    """Articles and everything that hangs off a single article."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find articles matching the given criteria."""
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        """Get an article by slug or id."""
        return await self._module.get(id, as_payload(options))

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def save_draft(self, data: JSONObject) -> HttpResponse:
        """Create or update an article with draft status."""
        return await self._module.save_draft(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    async def archive(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.archive(data, as_payload(options))

    async def restore(self, data: JSONObject) -> HttpResponse:
        """Restore an archived article."""
        return await self._module.restore(data)

    async def unpublish(self, data: JSONObject) -> HttpResponse:
        return await self._module.unpublish(data)

    async def publish(self, data: JSONObject, article_options: Optional[Options] = None) -> HttpResponse:
        return await self._module.publish(data, as_payload(article_options))

    async def purge(self, options: Optional[Options] = None) -> HttpResponse:
        """Remove all article resources from the system."""
        return await self._module.purge(as_payload(options))

    @property
    def acl(self) -> ACLNamespace:
        return ACLNamespace(self._module.acl)

    @property
    def comments(self) -> ArticleInstanceCommentsNamespace:
        return ArticleInstanceCommentsNamespace(self._module.comments)

    @property
    def files(self) -> ArticleInstanceFilesNamespace:
        return ArticleInstanceFilesNamespace(self._module.files)

    @property
    def ratings(self) -> ArticleInstanceRatingsNamespace:
        return ArticleInstanceRatingsNamespace(self._module.ratings)

    @property
    def subscriptions(self) -> ArticleInstanceSubscriptionsNamespace:
        return ArticleInstanceSubscriptionsNamespace(self._module.subscriptions)

    @property
    def tags(self) -> ArticleInstanceTagsNamespace:
        return ArticleInstanceTagsNamespace(self._module.tags)


# =============================================================================
# Module level namespaces
# =============================================================================

class CommentRepliesNamespace(CommentModerationNamespace):

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))


class CommentsNamespace(CommentModerationNamespace):
    """Article comments addressed by comment id."""

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    @property
    def replies(self) -> CommentRepliesNamespace:
        return CommentRepliesNamespace(self._module.replies)


class ArticleFilesBatchNamespace(Namespace):

    async def unlink(self, data: List[JSONValue]) -> HttpResponse:
        return await self._module.unlink(data)

    async def update(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.update(data)

    async def link(self, data: List[JSONObject]) -> HttpResponse:
        return await self._module.link(data)


class ArticleFilesNamespace(Namespace):
    """Article file entries addressed by file id."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def unlink(self, data: JSONObject, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.unlink(data, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def link(self, data: JSONObject) -> HttpResponse:
        return await self._module.link(data)

    @property
    def batch(self) -> ArticleFilesBatchNamespace:
        return ArticleFilesBatchNamespace(self._module.batch)

    @property
    def streams(self) -> StreamsNamespace:
        return StreamsNamespace(self._module.streams)


class RatingsNamespace(Namespace):
    """Article ratings addressed by rating id."""

    async def create(self, data: JSONObject) -> HttpResponse:
        return await self._module.create(data)

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def find_by_user(self, username: str, options: Optional[Options] = None) -> HttpResponse:
        """Find the ratings given by a user."""
        return await self._module.find_by_user(username, as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)


class TagsNamespace(Namespace):
    """Article tags addressed by tag id or slug."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    @property
    def subscriptions(self) -> TargetedSubscriptionNamespace:
        """Subscriptions to articles carrying a tag."""
        return TargetedSubscriptionNamespace(self._module.subscriptions)


class ArticleClient(ModuleClient):
    """Articles, comments, files, ratings, subscriptions, tags and settings."""

    module_name = "article_module"

    @property
    def articles(self) -> ArticlesNamespace:
        return ArticlesNamespace(self._module.articles)

    @property
    def comments(self) -> CommentsNamespace:
        return CommentsNamespace(self._module.comments)

    @property
    def files(self) -> ArticleFilesNamespace:
        return ArticleFilesNamespace(self._module.files)

    @property
    def ratings(self) -> RatingsNamespace:
        return RatingsNamespace(self._module.ratings)

    @property
    def subscriptions(self) -> SubscriptionNamespace:
        return SubscriptionNamespace(self._module.subscriptions)

    @property
    def tags(self) -> TagsNamespace:
        return TagsNamespace(self._module.tags)

    @property
    def settings(self) -> SettingsNamespace:
        return SettingsNamespace(self._module.settings)
