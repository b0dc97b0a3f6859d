"""Shared fakes for the chat model and the Shopify endpoint."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from langchain_core.messages import AIMessage

from shop_agent.agent.registry import ToolRegistry
from shop_agent.agent.tools import register_commerce_tools
from shop_agent.commerce.client import CommerceClient
from shop_agent.commerce.service import CommerceQueryAdapter
from shop_agent.config import CommerceConfig


class ScriptedChatModel:
    """Returns queued responses and records every call it receives."""

    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.bind_kwargs: dict[str, Any] = {}
        self.bound_tools: list[Any] = []

    def bind_tools(self, tools: list[Any], **kwargs: Any) -> "_BoundModel":
        self.bound_tools = list(tools)
        self.bind_kwargs = kwargs
        return _BoundModel(self)

    def invoke(self, messages: list[Any]) -> Any:
        return self._respond(messages, with_tools=False)

    def _respond(self, messages: list[Any], *, with_tools: bool) -> Any:
        self.calls.append({"messages": list(messages), "with_tools": with_tools})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class _BoundModel:
    def __init__(self, model: ScriptedChatModel) -> None:
        self.model = model

    def invoke(self, messages: list[Any]) -> Any:
        return self.model._respond(messages, with_tools=True)


class FakeShopify:
    """MockTransport handler serving queued GraphQL bodies."""

    def __init__(self, bodies: list[dict[str, Any]] | None = None, status_code: int = 200) -> None:
        self.bodies = list(bodies or [])
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.bodies.pop(0) if self.bodies else {"data": {}}
        return httpx.Response(self.status_code, json=body)

    def sent_payloads(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


def tool_call_message(name: str, args: dict[str, Any], call_id: str = "call_1") -> AIMessage:
    return AIMessage(content="", tool_calls=[{"name": name, "args": args, "id": call_id}])


def product_node(index: int, *, with_image: bool = True) -> dict[str, Any]:
    node: dict[str, Any] = {
        "id": f"gid://shopify/Product/{index}",
        "title": f"Coffee Blend {index}",
        "description": f"Roast number {index}",
        "priceRange": {"minVariantPrice": {"amount": f"1{index}.90", "currencyCode": "USD"}},
    }
    if with_image:
        node["images"] = {
            "edges": [
                {"node": {"url": f"https://cdn.example.com/{index}.jpg", "altText": f"Bag {index}"}},
                {"node": {"url": f"https://cdn.example.com/{index}-b.jpg", "altText": None}},
            ]
        }
    else:
        node["images"] = {"edges": []}
    return node


def products_body(count: int) -> dict[str, Any]:
    return {"data": {"products": {"edges": [{"node": product_node(i)} for i in range(count)]}}}


def order_node(index: int, *, line_items: int = 2, tracking: int = 1) -> dict[str, Any]:
    return {
        "id": f"gid://shopify/Order/{index}",
        "name": f"#10{index}",
        "processedAt": "2025-06-01T10:00:00Z",
        "totalPriceSet": {"shopMoney": {"amount": "42.50", "currencyCode": "EUR"}},
        "fulfillments": [
            {
                "status": "SUCCESS",
                "estimatedDeliveryAt": "2025-06-05T00:00:00Z",
                "trackingInfo": [
                    {"company": "DHL", "number": f"TRK{index}{t}", "url": f"https://track.example.com/{t}"}
                    for t in range(tracking)
                ],
            }
        ],
        "lineItems": {
            "edges": [{"node": {"title": f"Item {i}", "quantity": i + 1}} for i in range(line_items)]
        },
    }


def customers_body(orders: list[dict[str, Any]] | None) -> dict[str, Any]:
    if orders is None:
        return {"data": {"customers": {"edges": []}}}
    return {
        "data": {
            "customers": {
                "edges": [
                    {
                        "node": {
                            "id": "gid://shopify/Customer/7",
                            "firstName": "Ada",
                            "lastName": None,
                            "email": "ada@example.com",
                            "orders": {"edges": [{"node": order} for order in orders]},
                        }
                    }
                ]
            }
        }
    }


@pytest.fixture
def commerce_config() -> CommerceConfig:
    return CommerceConfig(store_domain="demo-store.myshopify.com", access_token="shpat_test")


@pytest.fixture
def make_client(commerce_config: CommerceConfig) -> Callable[[FakeShopify], CommerceClient]:
    def _make(fake: FakeShopify) -> CommerceClient:
        http_client = httpx.Client(transport=httpx.MockTransport(fake))
        return CommerceClient(commerce_config, http_client=http_client)

    return _make


@pytest.fixture
def make_registry(
    make_client: Callable[[FakeShopify], CommerceClient],
) -> Callable[[FakeShopify], ToolRegistry]:
    def _make(fake: FakeShopify) -> ToolRegistry:
        registry = ToolRegistry()
        register_commerce_tools(registry, CommerceQueryAdapter(make_client(fake)))
        return registry

    return _make
