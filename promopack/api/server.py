"""
Command-line entry point for running the compliance API service.

Usage:
    python -m promopack.api.server

Environment variables:
    PROMOPACK_AUDIT_LOG      Path to the audit JSONL file.
    PROMOPACK_API_HOST       Host interface to bind (default: 127.0.0.1).
    PROMOPACK_API_PORT       Port for the service (default: 8000).
    PROMOPACK_API_RELOAD     Set to "1" to enable autoreload (development only).
"""

from __future__ import annotations

import uvicorn

from promopack.config.settings import load_settings


def main() -> None:
    """Boot the FastAPI application with configurable host/port."""

    settings = load_settings()
    uvicorn.run(
        "promopack.api.app:create_app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
        factory=True,
    )


if __name__ == "__main__":
    main()
