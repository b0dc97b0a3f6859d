"""Flattened commerce records returned to the model and the caller."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ProductImage(_Record):
    url: str
    alt_text: str | None = Field(default=None, alias="altText")


class ProductRecord(_Record):
    id: str
    title: str
    description: str | None = None
    # Shopify's Decimal scalar arrives as a string; kept verbatim.
    price: str
    currency: str
    image: ProductImage | None = None


class ProductSummary(_Record):
    id: str
    title: str
    description: str | None = None
    price: str
    currency: str


class TrackingRecord(_Record):
    company: str | None = None
    number: str | None = None
    url: str | None = None


class FulfillmentRecord(_Record):
    status: str | None = None
    estimated_delivery_at: str | None = Field(default=None, alias="estimatedDeliveryAt")
    tracking: list[TrackingRecord] = Field(default_factory=list)


class LineItemRecord(_Record):
    title: str
    quantity: int


class OrderRecord(_Record):
    id: str
    name: str
    processed_at: str | None = Field(default=None, alias="processedAt")
    total: str
    currency: str
    fulfillments: list[FulfillmentRecord] = Field(default_factory=list)
    items: list[LineItemRecord] = Field(default_factory=list)


class CustomerRecord(_Record):
    id: str
    name: str
    email: str | None = None
    orders: list[OrderRecord] = Field(default_factory=list)


class ProductSearchResult(_Record):
    """Result of `find_product`."""

    products: list[ProductRecord] = Field(default_factory=list)


class ProductListResult(_Record):
    """Result of `get_products`."""

    products: list[ProductSummary] = Field(default_factory=list)


class CustomerOrdersResult(_Record):
    """Result of `get_customer_orders`; empty when no customer matches."""

    customers: list[CustomerRecord] = Field(default_factory=list)


ToolResult = ProductSearchResult | ProductListResult | CustomerOrdersResult
