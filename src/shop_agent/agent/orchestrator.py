"""Two-phase tool dispatch between the chat model and the commerce tools."""

from __future__ import annotations

import json
from typing import Any

from langchain_core.messages import AIMessage, ToolMessage
from loguru import logger

from shop_agent.agent.registry import ToolRegistry
from shop_agent.config import AgentConfig
from shop_agent.errors import ModelAPIError, ShopAgentError
from shop_agent.obs.tracing import Timer
from shop_agent.types import Conversation, ToolInvocation, TurnResult


class TurnOrchestrator:
    """Runs one chat turn with at most one tool call and two model calls."""

    def __init__(
        self,
        *,
        llm: Any,
        tool_registry: ToolRegistry,
        config: AgentConfig | None = None,
    ) -> None:
        self.llm = llm
        self.tool_registry = tool_registry
        self.config = config or AgentConfig()

        self.tool_registry.ensure_complete()
        self.tools = self.tool_registry.as_langchain_tools()
        self._tool_llm = self.llm.bind_tools(
            self.tools,
            tool_choice="auto",
            parallel_tool_calls=False,
        )

    def invoke(self, message: str) -> TurnResult:
        """Run one full turn.

        The first model call sees the tool catalog. If it nominates a tool, the
        tool runs once and a second model call, without tools, composes the
        reply from the tool result.
        """

        transcript = Conversation.start(self.config.system_prompt, message)
        with Timer() as timer:
            first = self._call_model(self._tool_llm, transcript)
            invocation = extract_tool_invocation(first)
            if invocation is None:
                result = TurnResult(reply=_message_text(first))
            else:
                result = self._run_tool_turn(transcript, first, invocation)

        logger.info(
            f"Turn completed in {timer.elapsed_ms:.0f}ms (tool={result.tool_name or 'none'})"
        )
        return result

    def _run_tool_turn(
        self,
        transcript: Conversation,
        first: AIMessage,
        invocation: ToolInvocation,
    ) -> TurnResult:
        logger.info(f"Model requested tool {invocation.name}")
        arguments = invocation.parse_arguments()
        output = self.tool_registry.execute(invocation.name, arguments)
        data = output.model_dump(mode="json", by_alias=True)

        followup = transcript.extend(
            _honored_call_message(first),
            ToolMessage(
                content=json.dumps(data),
                name=invocation.name,
                tool_call_id=invocation.call_id or invocation.name,
            ),
        )
        second = self._call_model(self.llm, followup)
        return TurnResult(reply=_message_text(second), data=data, tool_name=invocation.name)

    def _call_model(self, runnable: Any, transcript: Conversation) -> AIMessage:
        try:
            response = runnable.invoke(transcript.as_list())
        except ShopAgentError:
            raise
        except Exception as exc:
            raise ModelAPIError(f"Language model call failed: {exc}") from exc
        if not isinstance(response, AIMessage):
            raise ModelAPIError(
                f"Unexpected language model response type: {type(response).__name__}"
            )
        return response


def extract_tool_invocation(message: AIMessage) -> ToolInvocation | None:
    """Return the first tool call in `message`, if any.

    Calls whose arguments LangChain could not decode keep their raw argument
    string so that parsing fails with the original text.
    """
    if message.tool_calls:
        call = message.tool_calls[0]
        return ToolInvocation(
            name=call["name"],
            raw_arguments=json.dumps(call.get("args") or {}),
            call_id=call.get("id"),
        )
    if message.invalid_tool_calls:
        call = message.invalid_tool_calls[0]
        return ToolInvocation(
            name=call.get("name") or "",
            raw_arguments=call.get("args") or "",
            call_id=call.get("id"),
        )
    return None


def _honored_call_message(message: AIMessage) -> AIMessage:
    """Keep only the first tool call; it is the one answered by a tool message."""
    if len(message.tool_calls) <= 1 and not message.invalid_tool_calls:
        return message
    additional_kwargs = {
        key: value for key, value in message.additional_kwargs.items() if key != "tool_calls"
    }
    return message.model_copy(
        update={
            "tool_calls": message.tool_calls[:1],
            "invalid_tool_calls": [],
            "additional_kwargs": additional_kwargs,
        }
    )


def _message_text(message: AIMessage) -> str:
    content = message.content
    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            if isinstance(item, dict) and "text" in item:
                parts.append(str(item["text"]))
            elif isinstance(item, str):
                parts.append(item)
        return " ".join(parts).strip()
    return str(content or "")
