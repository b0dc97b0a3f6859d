"""Thin Shopify GraphQL Admin API client."""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from shop_agent.config import CommerceConfig
from shop_agent.errors import CommerceConnectionError, CommerceQueryError


class CommerceClient:
    """Sends one GraphQL document per call; no retries, no backoff."""

    def __init__(self, config: CommerceConfig, *, http_client: httpx.Client | None = None) -> None:
        self.config = config
        self.graphql_url = config.graphql_url
        self._client = http_client or httpx.Client(timeout=config.timeout_seconds)
        self._headers = {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": config.access_token,
        }
        logger.info(f"Initialized Shopify client for domain: {config.store_domain}")

    def close(self) -> None:
        self._client.close()

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Run `query` and return its `data` payload.

        Raises:
            CommerceQueryError: on a non-2xx status or a top-level `errors` list.
            CommerceConnectionError: when the endpoint cannot be reached.
        """
        payload = {"query": query, "variables": variables or {}}
        logger.debug(f"Making GraphQL request to {self.graphql_url}")
        try:
            response = self._client.post(self.graphql_url, json=payload, headers=self._headers)
        except httpx.TimeoutException as exc:
            logger.error(f"Timeout during GraphQL request: {exc}")
            raise CommerceConnectionError(f"Shopify request timeout: {exc}") from exc
        except httpx.TransportError as exc:
            logger.error(f"Network error during GraphQL request: {exc}")
            raise CommerceConnectionError(f"Shopify connection failed: {exc}") from exc

        if not response.is_success:
            logger.error(f"GraphQL request failed: {response.status_code} - {response.text}")
            raise CommerceQueryError(
                f"Shopify API error: HTTP {response.status_code} {response.text}",
                errors=_error_list(response),
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise CommerceQueryError(
                "Shopify API returned a non-JSON body",
                status_code=response.status_code,
            ) from exc

        errors = body.get("errors")
        if errors:
            logger.error(f"GraphQL errors: {errors}")
            raise CommerceQueryError(
                f"Shopify API error: {json.dumps(errors)}",
                errors=errors,
                status_code=response.status_code,
            )
        return body.get("data") or {}


def _error_list(response: httpx.Response) -> list[Any] | None:
    """`errors` from a failed response body, if it carries one."""
    try:
        body = response.json()
    except ValueError:
        return None
    errors = body.get("errors") if isinstance(body, dict) else None
    if errors is None:
        return None
    return errors if isinstance(errors, list) else [errors]
