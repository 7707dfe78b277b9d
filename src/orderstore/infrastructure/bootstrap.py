"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from orderstore.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATA_FILE = _DATA_DIR / "order_management_data.json"


def store_repository(path: Path | None = None) -> JsonStoreRepository:
    return JsonStoreRepository(path if path is not None else DEFAULT_DATA_FILE)
