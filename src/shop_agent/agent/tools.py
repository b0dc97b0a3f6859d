"""Commerce tools exposed to the chat model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shop_agent.agent.registry import ToolName, ToolRegistry, ToolSpec
from shop_agent.commerce.models import CustomerOrdersResult, ProductListResult, ProductSearchResult
from shop_agent.commerce.service import CommerceQueryAdapter


class FindProductInput(BaseModel):
    query: str = Field(description="Search string provided by the user for finding products")


class CustomerOrdersInput(BaseModel):
    email: str = Field(description="The email address associated with the customer")


class ProductListInput(BaseModel):
    pass


def register_commerce_tools(registry: ToolRegistry, service: CommerceQueryAdapter) -> None:
    """Register the three commerce tools.

    Tools:
    - `find_product`: free-form product search.
    - `get_customer_orders`: recent orders for a customer email.
    - `get_products`: a generic product listing.
    """

    def _find_product(input_data: FindProductInput) -> ProductSearchResult:
        return service.find_products(input_data.query)

    def _get_customer_orders(input_data: CustomerOrdersInput) -> CustomerOrdersResult:
        return service.get_customer_orders(input_data.email)

    def _get_products(input_data: ProductListInput) -> ProductListResult:
        del input_data  # takes no arguments
        return service.list_products()

    registry.register(
        ToolSpec(
            name=ToolName.FIND_PRODUCT,
            description="Search for products based on a free-form query string",
            args_schema=FindProductInput,
            handler=_find_product,
        )
    )
    registry.register(
        ToolSpec(
            name=ToolName.GET_CUSTOMER_ORDERS,
            description="Retrieve recent orders for a customer by email address",
            args_schema=CustomerOrdersInput,
            handler=_get_customer_orders,
        )
    )
    registry.register(
        ToolSpec(
            name=ToolName.GET_PRODUCTS,
            description="Fetch a generic list of products when no specific search is provided",
            args_schema=ProductListInput,
            handler=_get_products,
        )
    )
