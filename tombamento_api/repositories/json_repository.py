"""Store access helpers backed by the JSON document."""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Optional

from tombamento_api.domain.store import Record, Store, remove, upsert
from tombamento_api.repositories import json_storage


class JsonRepository:
    """
    CRUD helpers over an in-memory Store persisted to a JSON file.

    Route handlers run in FastAPI's threadpool, so every read and write of the
    store goes through `lock`. Services hold it across a change and its save
    so each request is applied and persisted as one step.
    """

    def __init__(self, data_file: Path | str, store: Store | None = None) -> None:
        self.data_file = Path(data_file)
        self.store = store if store is not None else Store()
        self.lock = threading.RLock()

    def load(self) -> Store:
        store = json_storage.load(self.data_file)
        with self.lock:
            self.store = store
        return store

    def save(self) -> bool:
        with self.lock:
            return json_storage.save(self.store, self.data_file)

    # ----------------------- tombamentos -----------------------
    def list_tombamentos(self) -> list[Any]:
        with self.lock:
            return list(self.store.tombamentos.values())

    def get_tombamento(self, code: str) -> Optional[Record]:
        with self.lock:
            return self.store.tombamentos.get(code)

    def upsert_tombamento(self, record: Record) -> bool:
        with self.lock:
            return upsert(self.store.tombamentos, record)

    def delete_tombamento(self, code: str) -> bool:
        with self.lock:
            return remove(self.store.tombamentos, code) > 0

    def clear_tombamentos(self) -> int:
        with self.lock:
            count = len(self.store.tombamentos)
            self.store.tombamentos.clear()
            return count

    # ------------------------- detalhes ------------------------
    def list_detalhes(self) -> list[Any]:
        with self.lock:
            return list(self.store.detalhes.values())

    def get_detalhe(self, code: str) -> Optional[Record]:
        with self.lock:
            return self.store.detalhes.get(code)

    def upsert_detalhe(self, record: Record) -> bool:
        with self.lock:
            return upsert(self.store.detalhes, record)

    # -------------------------- stats --------------------------
    def counts(self) -> tuple[int, int]:
        with self.lock:
            return len(self.store.tombamentos), len(self.store.detalhes)

    def status_distribution(self) -> dict[str, int]:
        with self.lock:
            return self.store.status_distribution()
