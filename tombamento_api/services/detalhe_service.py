"""Detalhe use cases: single and batch upserts keyed by code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from tombamento_api.core.errors import InvalidPayloadError, RecordNotFoundError
from tombamento_api.domain.store import Record
from tombamento_api.repositories.json_repository import JsonRepository
from tombamento_api.services._payload import require_code


@dataclass
class BatchResult:
    count: int
    created: int
    updated: int


class DetalheService:
    """Reads and upserts over the detalhes collection."""

    def __init__(self, repository: JsonRepository) -> None:
        self.repository = repository

    def list_all(self) -> list[Record]:
        records = self.repository.list_detalhes()
        logger.info(f"Enviando {len(records)} detalhes")
        return records

    def get(self, code: str) -> Record:
        record = self.repository.get_detalhe(code)
        if record is None:
            raise RecordNotFoundError("Detalhes não encontrados")
        return record

    def upsert(self, payload: Any) -> Record:
        code = require_code(payload)
        record = {**payload, "code": code}
        with self.repository.lock:
            created = self.repository.upsert_detalhe(record)
            self.repository.save()
        logger.info(f"Detalhe {'criado' if created else 'atualizado'}: {code}")
        return record

    def upsert_batch(self, payload: Any) -> BatchResult:
        items = payload.get("detalhes") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise InvalidPayloadError("Array de detalhes é obrigatório")

        # valida tudo antes de alterar o store
        records = []
        for position, item in enumerate(items):
            try:
                code = require_code(item)
            except InvalidPayloadError as exc:
                raise InvalidPayloadError(f"Detalhe na posição {position}: {exc.message}") from exc
            records.append({**item, "code": code})

        created = 0
        with self.repository.lock:
            for record in records:
                if self.repository.upsert_detalhe(record):
                    created += 1
            self.repository.save()
        updated = len(records) - created

        logger.info(f"Batch: {created} criados, {updated} atualizados")
        return BatchResult(count=len(records), created=created, updated=updated)
