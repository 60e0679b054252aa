"""
Runtime settings read from the environment.

    PLAYERKIT_ENV                      dev | prod (default: dev)
    PLAYERKIT_SITE_URL                 base URL for file download links
    PLAYERKIT_PREFS_FILE               optional YAML/JSON preference overrides
    PLAYERKIT_FILES_FILE               optional YAML/JSON stored-file manifest
    PLAYERKIT_STRINGS_FILE             optional YAML/JSON translation overrides
    PLAYERKIT_SECURITY_HEADERS_ENABLED true/false (default: true in prod)
    PLAYERKIT_CORS_ORIGINS             comma separated, default "*"
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[2]

_TRUTHY = ("1", "true", "yes")


def env_name() -> str:
    return (os.getenv("PLAYERKIT_ENV") or "dev").strip().lower()


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def env_path(name: str, default_name: Optional[str] = None) -> Optional[Path]:
    """Path from env var, else <project_root>/<default_name> when given."""
    raw = (os.getenv(name) or "").strip()
    if raw:
        return Path(raw)
    if default_name:
        return PROJECT_ROOT / default_name
    return None


def site_url() -> str:
    url = (os.getenv("PLAYERKIT_SITE_URL") or "http://localhost/").strip()
    return url if url.endswith("/") else url + "/"


def cors_origins() -> List[str]:
    raw = (os.getenv("PLAYERKIT_CORS_ORIGINS") or "").strip()
    if not raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


def security_headers_enabled() -> bool:
    return env_flag("PLAYERKIT_SECURITY_HEADERS_ENABLED", default=env_name() == "prod")
