"""Commerce query adapter: one GraphQL round-trip per operation."""

from __future__ import annotations

from loguru import logger

from shop_agent.commerce.client import CommerceClient
from shop_agent.commerce.models import CustomerOrdersResult, ProductListResult, ProductSearchResult
from shop_agent.commerce.parsers import (
    parse_customer_orders,
    parse_product_list,
    parse_product_search,
)
from shop_agent.commerce.queries import (
    CUSTOMER_ORDERS_QUERY,
    PRODUCT_LIST_QUERY,
    PRODUCT_SEARCH_QUERY,
)


class CommerceQueryAdapter:
    def __init__(self, client: CommerceClient) -> None:
        self.client = client

    def find_products(self, query: str) -> ProductSearchResult:
        """Search titles and descriptions; at most five matches."""
        data = self.client.execute(PRODUCT_SEARCH_QUERY, {"queryString": query})
        result = parse_product_search(data)
        logger.info(f"Product search returned {len(result.products)} products")
        return result

    def get_customer_orders(self, email: str) -> CustomerOrdersResult:
        """Most recent orders for the customer with `email`.

        Shopify only returns the last 60 days of orders unless the app holds
        the `read_all_orders` scope.
        """
        data = self.client.execute(CUSTOMER_ORDERS_QUERY, {"email": email})
        result = parse_customer_orders(data)
        if not result.customers:
            logger.info("No customer matched the order lookup")
        return result

    def list_products(self) -> ProductListResult:
        data = self.client.execute(PRODUCT_LIST_QUERY)
        return parse_product_list(data)
