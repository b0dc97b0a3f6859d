"""Shared request-scoped types."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from shop_agent.errors import ArgumentParseError


@dataclass(frozen=True, slots=True)
class ToolInvocation:
    """A tool call nominated by the model in its first response."""

    name: str
    raw_arguments: str
    call_id: str | None = None

    def parse_arguments(self) -> dict[str, Any]:
        if not self.raw_arguments.strip():
            return {}
        try:
            parsed = json.loads(self.raw_arguments)
        except json.JSONDecodeError as exc:
            raise ArgumentParseError(
                f"Failed to parse function arguments: {self.raw_arguments}",
                raw_arguments=self.raw_arguments,
            ) from exc
        if not isinstance(parsed, dict):
            raise ArgumentParseError(
                f"Function arguments must be a JSON object: {self.raw_arguments}",
                raw_arguments=self.raw_arguments,
            )
        return parsed


@dataclass(frozen=True, slots=True)
class Conversation:
    """Immutable message transcript replayed to the model.

    `extend` returns a new transcript, so the first-call transcript is still
    available after the tool result has been appended.
    """

    messages: tuple[BaseMessage, ...] = ()

    @classmethod
    def start(cls, system_prompt: str, user_message: str) -> "Conversation":
        return cls((SystemMessage(content=system_prompt), HumanMessage(content=user_message)))

    def extend(self, *messages: BaseMessage) -> "Conversation":
        return Conversation(self.messages + tuple(messages))

    def as_list(self) -> list[BaseMessage]:
        return list(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(slots=True)
class TurnResult:
    """Outcome of one chat turn."""

    reply: str
    data: dict[str, Any] | None = None
    tool_name: str | None = None

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"reply": self.reply}
        if self.data is not None:
            payload["data"] = self.data
        return payload


@dataclass(slots=True)
class ToolTrace:
    """Trace record for an executed tool call."""

    name: str
    input_payload: dict[str, Any]
    output_preview: str
    latency_ms: float
