"""JSON-file-backed implementation of StoreRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from orderstore.domain.exceptions import CorruptDataError, PersistenceError
from orderstore.domain.repository.store_repository import StoreRepository
from orderstore.domain.service.order_store import OrderStore
from orderstore.infrastructure.persistence.store_codec import dump_store, load_store

logger = logging.getLogger(__name__)


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- StoreRepository interface --------------------------------------------

    def load(self) -> OrderStore:
        if not self._file_path.exists():
            logger.debug("No data file at %s, starting empty", self._file_path)
            return OrderStore()

        try:
            raw = self._file_path.read_bytes()
        except OSError as exc:
            logger.error("Failed to read %s: %s", self._file_path, exc)
            raise PersistenceError(f"Failed to load data: {exc}") from exc

        try:
            document = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise CorruptDataError(
                f"{self._file_path} is not valid UTF-8: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise CorruptDataError(
                f"{self._file_path} is not valid JSON: {exc}"
            ) from exc

        store = load_store(document)
        logger.debug(
            "Loaded %d customers, %d products, %d orders from %s",
            len(store.list_customers()),
            len(store.list_products()),
            len(store.list_all_orders()),
            self._file_path,
        )
        return store

    def save(self, store: OrderStore) -> None:
        payload = json.dumps(dump_store(store), indent=2) + "\n"
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", self._file_path, exc)
            raise PersistenceError(f"Failed to save data: {exc}") from exc
        logger.debug("Saved store to %s", self._file_path)
