from __future__ import annotations

import os

DEFAULT_CITYBIKE_URL = "https://data.foli.fi/citybike"


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def citybike_url() -> str:
    return _get_env("FOLI_CITYBIKE_URL", DEFAULT_CITYBIKE_URL)


def request_timeout_seconds() -> float:
    return float(_get_env("FOLI_REQUEST_TIMEOUT", "30"))


def snapshot_path() -> str | None:
    value = os.getenv("FOLI_CITYBIKE_SNAPSHOT")
    if not value:
        return None
    return value
