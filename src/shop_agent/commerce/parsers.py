"""Unwrap Shopify edge/node envelopes into flat result models."""

from __future__ import annotations

from typing import Any

from shop_agent.commerce.models import (
    CustomerOrdersResult,
    CustomerRecord,
    FulfillmentRecord,
    LineItemRecord,
    OrderRecord,
    ProductImage,
    ProductListResult,
    ProductRecord,
    ProductSearchResult,
    ProductSummary,
    TrackingRecord,
)
from shop_agent.commerce.queries import RESULT_LIMIT


def unwrap_edges(connection: dict[str, Any] | None, limit: int = RESULT_LIMIT) -> list[dict[str, Any]]:
    """Return the `node` of each edge, at most `limit` of them.

    A missing or null connection is treated as empty.
    """
    if not connection:
        return []
    nodes: list[dict[str, Any]] = []
    for edge in connection.get("edges") or []:
        node = edge.get("node") if isinstance(edge, dict) else None
        if node is not None:
            nodes.append(node)
    return nodes[:limit]


def parse_product_search(data: dict[str, Any]) -> ProductSearchResult:
    products = []
    for node in unwrap_edges(data.get("products")):
        price = _min_variant_price(node)
        images = unwrap_edges(node.get("images"), limit=1)
        image = (
            ProductImage(url=images[0]["url"], alt_text=images[0].get("altText"))
            if images
            else None
        )
        products.append(
            ProductRecord(
                id=node["id"],
                title=node["title"],
                description=node.get("description"),
                price=price["amount"],
                currency=price["currencyCode"],
                image=image,
            )
        )
    return ProductSearchResult(products=products)


def parse_product_list(data: dict[str, Any]) -> ProductListResult:
    products = []
    for node in unwrap_edges(data.get("products")):
        price = _min_variant_price(node)
        products.append(
            ProductSummary(
                id=node["id"],
                title=node["title"],
                description=node.get("description"),
                price=price["amount"],
                currency=price["currencyCode"],
            )
        )
    return ProductListResult(products=products)


def parse_customer_orders(data: dict[str, Any]) -> CustomerOrdersResult:
    customers = []
    for node in unwrap_edges(data.get("customers"), limit=1):
        name = f"{node.get('firstName') or ''} {node.get('lastName') or ''}".strip()
        customers.append(
            CustomerRecord(
                id=node["id"],
                name=name,
                email=node.get("email"),
                orders=[_parse_order(order) for order in unwrap_edges(node.get("orders"))],
            )
        )
    return CustomerOrdersResult(customers=customers)


def _parse_order(order: dict[str, Any]) -> OrderRecord:
    money = order["totalPriceSet"]["shopMoney"]
    fulfillments = [
        FulfillmentRecord(
            status=fulfillment.get("status"),
            estimated_delivery_at=fulfillment.get("estimatedDeliveryAt"),
            tracking=[
                TrackingRecord(
                    company=info.get("company"),
                    number=info.get("number"),
                    url=info.get("url"),
                )
                for info in (fulfillment.get("trackingInfo") or [])[:RESULT_LIMIT]
            ],
        )
        # Orders expose fulfillments as a plain list, not a connection.
        for fulfillment in (order.get("fulfillments") or [])[:1]
    ]
    items = [
        LineItemRecord(title=item["title"], quantity=item["quantity"])
        for item in unwrap_edges(order.get("lineItems"))
    ]
    return OrderRecord(
        id=order["id"],
        name=order["name"],
        processed_at=order.get("processedAt"),
        total=money["amount"],
        currency=money["currencyCode"],
        fulfillments=fulfillments,
        items=items,
    )


def _min_variant_price(node: dict[str, Any]) -> dict[str, Any]:
    return node["priceRange"]["minVariantPrice"]
