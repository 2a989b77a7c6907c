"""Key value client (``key_value_module``)."""

from .common import ModuleClient, ResourceNamespace


class KeyValueClient(ModuleClient, ResourceNamespace):
    """Key value resources: find, get, create, update, remove."""

    module_name = "key_value_module"
