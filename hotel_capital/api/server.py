"""
Command-line entry point for running the decision-engine API service.

Usage:
    python -m hotel_capital.api.server

Environment variables:
    HC_API_HOST    Host interface to bind (default: 127.0.0.1).
    HC_API_PORT    Port for the service (default: 8000).
    HC_API_RELOAD  Set to "1" to enable autoreload (development only).
"""

from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from hotel_capital.config.settings import load_settings


def main() -> None:
    """Boot the FastAPI application with configurable host/port."""

    load_dotenv()
    settings = load_settings()

    uvicorn.run(
        "hotel_capital.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        factory=False,
    )


if __name__ == "__main__":
    main()
