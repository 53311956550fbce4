"""
Runtime settings resolved from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_AUDIT_PATH = Path("project_bundle/compliance_audit.jsonl")


def env_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    """Service configuration entry."""

    audit_log_path: Path = DEFAULT_AUDIT_PATH
    audit_enabled: bool = True
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_reload: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read PROMOPACK_* variables (and a local .env file) into Settings."""

    load_dotenv()
    return Settings(
        audit_log_path=Path(os.getenv("PROMOPACK_AUDIT_LOG", str(DEFAULT_AUDIT_PATH))),
        audit_enabled=env_bool(os.getenv("PROMOPACK_AUDIT_ENABLED"), default=True),
        api_host=os.getenv("PROMOPACK_API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("PROMOPACK_API_PORT", "8000")),
        api_reload=env_bool(os.getenv("PROMOPACK_API_RELOAD"), default=False),
        log_level=os.getenv("PROMOPACK_LOG_LEVEL", "INFO").upper(),
    )


__all__ = ["Settings", "load_settings", "env_bool", "DEFAULT_AUDIT_PATH"]
