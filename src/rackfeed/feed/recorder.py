from __future__ import annotations

from pathlib import Path


def write_raw_payload(directory: Path, prefix: str, payload: bytes) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{prefix}_raw.json"
    path.write_bytes(payload)
    return path


def read_raw_payload(path: Path) -> bytes:
    return path.read_bytes()
