"""Tool registry built on Pydantic v2 models."""

from __future__ import annotations

import json
from collections.abc import Callable
from enum import Enum
from time import perf_counter
from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, ConfigDict, ValidationError

from shop_agent.errors import ArgumentParseError, ConfigurationError, UnknownToolError
from shop_agent.types import ToolTrace


class ToolName(str, Enum):
    """The closed set of tools the model may call."""

    FIND_PRODUCT = "find_product"
    GET_CUSTOMER_ORDERS = "get_customer_orders"
    GET_PRODUCTS = "get_products"


class ToolSpec(BaseModel):
    """Declarative tool specification for registration and validation."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: ToolName
    description: str
    args_schema: type[BaseModel]
    handler: Callable[[Any], BaseModel]

    def invoke(self, payload: dict[str, Any]) -> BaseModel:
        try:
            data = self.args_schema.model_validate(payload)
        except ValidationError as exc:
            raise ArgumentParseError(
                f"Invalid arguments for {self.name.value}: {exc}",
                raw_arguments=json.dumps(payload),
            ) from exc
        return self.handler(data)


class ToolRegistry:
    """Stores tool specs and exports LangChain-compatible tool objects."""

    def __init__(self, *, observer: Callable[[ToolTrace], None] | None = None) -> None:
        self._tools: dict[ToolName, ToolSpec] = {}
        self._observer = observer

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool already registered: {spec.name.value}")
        self._tools[spec.name] = spec

    def ensure_complete(self) -> None:
        """Fail unless every `ToolName` has a registered handler."""
        missing = [name.value for name in ToolName if name not in self._tools]
        if missing:
            raise ConfigurationError(f"Tools without a handler: {', '.join(missing)}")

    def set_observer(self, observer: Callable[[ToolTrace], None] | None) -> None:
        """Set an optional callback invoked after each tool execution."""
        self._observer = observer

    def execute(self, name: str, payload: dict[str, Any]) -> BaseModel:
        try:
            tool_name = ToolName(name)
        except ValueError:
            raise UnknownToolError(name) from None
        spec = self._tools.get(tool_name)
        if spec is None:
            raise UnknownToolError(name)
        return self._execute_spec(spec, payload)

    def as_langchain_tools(self) -> list[StructuredTool]:
        tools: list[StructuredTool] = []
        for spec in self._tools.values():
            tools.append(
                StructuredTool.from_function(
                    name=spec.name.value,
                    description=spec.description,
                    args_schema=spec.args_schema,
                    func=self._build_function(spec),
                )
            )
        return tools

    def specs(self) -> list[ToolSpec]:
        return list(self._tools.values())

    def _build_function(self, spec: ToolSpec) -> Callable[..., dict[str, Any]]:
        def _callable(**kwargs: Any) -> dict[str, Any]:
            return self._execute_spec(spec, kwargs).model_dump(mode="json", by_alias=True)

        return _callable

    def _execute_spec(self, spec: ToolSpec, payload: dict[str, Any]) -> BaseModel:
        start = perf_counter()
        output = spec.invoke(payload)
        latency_ms = (perf_counter() - start) * 1000.0

        if self._observer is not None:
            self._observer(
                ToolTrace(
                    name=spec.name.value,
                    input_payload=payload,
                    output_preview=output.model_dump_json(by_alias=True)[:320],
                    latency_ms=latency_ms,
                )
            )
        return output
