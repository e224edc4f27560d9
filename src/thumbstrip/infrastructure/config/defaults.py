"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "thumbstrip",
    "environment": "dev",
    "http": {
        "timeout_seconds": 10.0,
        "user_agent": "thumbstrip/0.1.0",
    },
    "innertube": {
        "base_url": "https://youtubei.googleapis.com/youtubei/v1/",
        "api_key": None,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "notifications": {
        "enabled": True,
    },
}
