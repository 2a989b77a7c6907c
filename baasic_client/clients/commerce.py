"""Commerce client (``commerce_module``)."""

from typing import Optional

from ..types import HttpResponse, JSONObject, JSONValue, Options, as_payload
from .common import (
    BatchedResourceNamespace,
    ModuleClient,
    Namespace,
    ResourceNamespace,
)


class CustomerPaymentMethodsNamespace(ResourceNamespace):
    """Payment methods stored for customers."""


class CustomersNamespace(Namespace):
    """Commerce customers."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    @property
    def payment_methods(self) -> CustomerPaymentMethodsNamespace:
        return CustomerPaymentMethodsNamespace(self._module.payment_methods)


class InvoiceStreamsNamespace(Namespace):
    """Invoice documents."""

    async def get(self, data: JSONValue) -> HttpResponse:
        return await self._module.get(data)

    async def get_blob(self, data: JSONValue) -> HttpResponse:
        return await self._module.get_blob(data)


class InvoicesNamespace(Namespace):
    """Commerce invoices."""

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        return await self._module.get(id, as_payload(options))

    async def update(self, data: JSONObject) -> HttpResponse:
        return await self._module.update(data)

    async def remove(self, data: JSONObject) -> HttpResponse:
        return await self._module.remove(data)

    @property
    def streams(self) -> InvoiceStreamsNamespace:
        return InvoiceStreamsNamespace(self._module.streams)


class LookupsNamespace(Namespace):
    """Commerce lookup tables; each supports CRUD plus batch operations."""

    @property
    def address_types(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.address_types)

    @property
    def countries(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.countries)

    @property
    def country_states(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.country_states)

    @property
    def payment_methods(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.payment_methods)

    @property
    def payment_transaction_statuses(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.payment_transaction_statuses)

    @property
    def recurring_cycle_period_types(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.recurring_cycle_period_types)

    @property
    def subscription_statuses(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.subscription_statuses)

    @property
    def invoice_statuses(self) -> BatchedResourceNamespace:
        return BatchedResourceNamespace(self._module.invoice_statuses)


class CommerceClient(ModuleClient):
    """
    Commerce subscriptions, customers, invoices, products, payment
    transactions and lookups.
    """

    module_name = "commerce_module"

    async def find(self, options: Optional[Options] = None) -> HttpResponse:
        """Find commerce subscriptions matching the given criteria."""
        return await self._module.find(as_payload(options))

    async def get(self, id: str, options: Optional[Options] = None) -> HttpResponse:
        """Get a commerce subscription."""
        return await self._module.get(id, as_payload(options))

    async def validate_vat(self, country_code: str, vat_id: str) -> HttpResponse:
        """Validate a VAT number for a country."""
        return await self._module.validate_vat(country_code, vat_id)

    async def preprocess(self, data: JSONObject) -> HttpResponse:
        """Preprocess a subscription before it is submitted."""
        return await self._module.preprocess(data)

    async def subscribe(self, data: JSONObject) -> HttpResponse:
        """Subscribe a customer to a product."""
        return await self._module.subscribe(data)

    async def cancel(self, data: JSONObject) -> HttpResponse:
        """Cancel a subscription."""
        return await self._module.cancel(data)

    @property
    def customers(self) -> CustomersNamespace:
        return CustomersNamespace(self._module.customers)

    @property
    def invoices(self) -> InvoicesNamespace:
        return InvoicesNamespace(self._module.invoices)

    @property
    def products(self) -> ResourceNamespace:
        return ResourceNamespace(self._module.products)

    @property
    def payment_transactions(self) -> ResourceNamespace:
        return ResourceNamespace(self._module.payment_transactions)

    @property
    def lookups(self) -> LookupsNamespace:
        return LookupsNamespace(self._module.lookups)
