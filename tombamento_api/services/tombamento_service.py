"""Tombamento use cases (upsert, status update, removal, statistics)."""

from __future__ import annotations

from typing import Any

from loguru import logger

from tombamento_api.core.errors import InvalidPayloadError, RecordNotFoundError
from tombamento_api.domain.store import Record
from tombamento_api.repositories.json_repository import JsonRepository
from tombamento_api.services._payload import require_code

NOT_FOUND_MESSAGE = "Tombamento não encontrado"


def _coerce_status(value: Any) -> int:
    # status ausente ou falsy vale 0
    if not value:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPayloadError("Status deve ser um número inteiro")
    return value


class TombamentoService:
    """Reads and mutations over the tombamentos collection."""

    def __init__(self, repository: JsonRepository) -> None:
        self.repository = repository

    def list_all(self) -> list[Record]:
        records = self.repository.list_tombamentos()
        logger.info(f"Enviando {len(records)} tombamentos")
        return records

    def get(self, code: str) -> Record:
        record = self.repository.get_tombamento(code)
        if record is None:
            raise RecordNotFoundError(NOT_FOUND_MESSAGE)
        return record

    def upsert(self, payload: Any) -> Record:
        code = require_code(payload)
        record = {"code": code, "status": _coerce_status(payload.get("status"))}
        with self.repository.lock:
            created = self.repository.upsert_tombamento(record)
            self.repository.save()
        logger.info(f"Tombamento {'criado' if created else 'atualizado'}: {code}")
        return dict(record)

    def update_status(self, code: str, payload: Any) -> Record:
        with self.repository.lock:
            record = self.repository.get_tombamento(code)
            if record is None:
                logger.info(f"Tombamento {code} não encontrado")
                raise RecordNotFoundError(NOT_FOUND_MESSAGE)
            if not isinstance(payload, dict) or payload.get("status") is None:
                raise InvalidPayloadError("Status é obrigatório")
            status = payload["status"]
            if isinstance(status, bool) or not isinstance(status, int):
                raise InvalidPayloadError("Status deve ser um número inteiro")
            record["status"] = status
            self.repository.save()
            updated = dict(record)
        logger.info(f"Tombamento {code} atualizado - Status: {status}")
        return updated

    def delete(self, code: str) -> None:
        with self.repository.lock:
            if not self.repository.delete_tombamento(code):
                logger.info(f"Tombamento {code} não encontrado")
                raise RecordNotFoundError(NOT_FOUND_MESSAGE)
            self.repository.save()
        logger.info(f"Tombamento {code} removido")

    def delete_all(self) -> int:
        with self.repository.lock:
            count = self.repository.clear_tombamentos()
            self.repository.save()
        logger.info(f"{count} tombamentos removidos")
        return count
