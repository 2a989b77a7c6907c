"""Templating client (``templating_module``)."""

from .common import BatchNamespace, ModuleClient, ResourceNamespace


class TemplatingClient(ModuleClient, ResourceNamespace):
    """Template resources with batch operations."""

    module_name = "templating_module"

    @property
    def batch(self) -> BatchNamespace:
        return BatchNamespace(self._module.batch)
