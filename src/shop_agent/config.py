"""Configuration models for the shop agent."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shop_agent.errors import ConfigurationError

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant for an ecommerce store powered by Shopify. "
    "You can look up products and customer orders using functions. "
    "Ask follow-up questions when necessary and be concise."
)


class CommerceConfig(BaseModel):
    """Store-scoped credentials for the Shopify GraphQL Admin API."""

    model_config = ConfigDict(frozen=True)

    store_domain: str = Field(min_length=1)
    access_token: str = Field(min_length=1, repr=False)
    api_version: str = "2025-07"
    timeout_seconds: float = Field(default=30.0, gt=0.0)

    @property
    def graphql_url(self) -> str:
        domain = self.store_domain.strip().removeprefix("https://").rstrip("/")
        if "." not in domain:
            domain = f"{domain}.myshopify.com"
        return f"https://{domain}/admin/api/{self.api_version}/graphql.json"


class AgentConfig(BaseModel):
    """Configures the chat model used for both turns of a conversation."""

    model_config = ConfigDict(frozen=True)

    model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    system_prompt: str = DEFAULT_SYSTEM_PROMPT


class Settings(BaseSettings):
    """Process-wide settings read once from the environment (and `.env`)."""

    openai_api_key: str = Field(default="", repr=False)
    openai_model: str = "gpt-4o-mini"

    shopify_store: str = ""
    shopify_token: str = Field(default="", repr=False)
    shopify_api_version: str = "2025-07"
    shopify_timeout_seconds: float = Field(default=30.0, gt=0.0)

    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    def commerce_config(self) -> CommerceConfig:
        """Build the commerce credentials, failing before any query is sent."""
        missing = [
            env
            for env, value in (
                ("SHOPIFY_STORE", self.shopify_store),
                ("SHOPIFY_TOKEN", self.shopify_token),
            )
            if not value.strip()
        ]
        if missing:
            raise ConfigurationError(
                "Shopify store credentials are not set in environment variables: "
                + ", ".join(missing)
            )
        return CommerceConfig(
            store_domain=self.shopify_store.strip(),
            access_token=self.shopify_token.strip(),
            api_version=self.shopify_api_version,
            timeout_seconds=self.shopify_timeout_seconds,
        )

    def require_openai_key(self) -> str:
        if not self.openai_api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is not set in environment variables")
        return self.openai_api_key.strip()

    def agent_config(self) -> AgentConfig:
        return AgentConfig(model=self.openai_model)
