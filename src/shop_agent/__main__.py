"""Run the chat server with uvicorn."""

from __future__ import annotations

import uvicorn

from shop_agent.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run("shop_agent.api.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
