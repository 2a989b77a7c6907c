"""
Baasic Domain Clients

One client per platform module. Each forwards its calls to the matching
namespace of the SDK application object.
"""

from .application_settings import ApplicationSettingsClient
from .article import ArticleClient
from .commerce import CommerceClient
from .dynamic_resource import DynamicResourceClient
from .files import FilesClient
from .key_value import KeyValueClient
from .media_vault import MediaVaultClient
from .membership import MembershipClient
from .metering import MeteringClient
from .notifications import NotificationsClient
from .templating import TemplatingClient
from .user_profile import UserProfileClient
from .value_set import ValueSetClient

__all__ = [
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
]
