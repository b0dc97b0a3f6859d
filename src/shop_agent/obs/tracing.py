"""Turn timing and tool latency logging."""

from __future__ import annotations

import time

from loguru import logger

from shop_agent.types import ToolTrace


class Timer:
    """Simple context timer used by the orchestrator."""

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0


def log_tool_trace(trace: ToolTrace) -> None:
    """Registry observer that records each tool execution."""
    logger.info(f"Tool {trace.name} finished in {trace.latency_ms:.1f}ms")
    logger.debug(f"Tool {trace.name} input={trace.input_payload} output={trace.output_preview}")
