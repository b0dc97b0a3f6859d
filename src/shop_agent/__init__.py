"""Shopify chat agent package."""

from .config import AgentConfig, CommerceConfig, Settings

__all__ = ["AgentConfig", "CommerceConfig", "Settings"]
