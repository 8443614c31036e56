"""
JSON document persistence for the store.

The whole store lives in one pretty-printed file shaped as
{"tombamentos": [...], "detalhes": [...]}. Both helpers are plain functions
over a Store so they can be exercised without an application instance.
"""

from __future__ import annotations

from pathlib import Path
import json
import os
import tempfile

from loguru import logger

from tombamento_api.domain.store import COLLECTIONS, Store


def db_defaults(db: dict) -> dict:
    for name in COLLECTIONS:
        if not isinstance(db.get(name), list):
            db[name] = []
    return db


def load(path: Path | str) -> Store:
    """Read the store from `path`. Any failure yields an empty store."""
    data_file = Path(path)
    if not data_file.exists():
        logger.info(f"Arquivo de dados {data_file} inexistente, iniciando vazio")
        return Store()
    try:
        with data_file.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"esperado objeto JSON, recebido {type(raw).__name__}")
        store = Store.from_dict(db_defaults(raw))
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Erro ao carregar dados de {data_file}: {e}")
        return Store()
    logger.info(
        f"Dados carregados do arquivo: {len(store.tombamentos)} tombamentos, "
        f"{len(store.detalhes)} detalhes"
    )
    return store


def save(store: Store, path: Path | str) -> bool:
    """
    Overwrite `path` with the full store. Returns False (and logs) on failure.

    The document is written to a temporary sibling first and then moved over
    the target, so readers never see a half-written file.
    """
    data_file = Path(path)
    payload = json.dumps(store.to_dict(), ensure_ascii=False, indent=2)
    tmp_name = None
    try:
        data_file.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{data_file.name}.", suffix=".tmp", dir=data_file.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp_name, data_file)
    except OSError as e:
        logger.error(f"Erro ao salvar dados em {data_file}: {e}")
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        return False
    logger.debug(f"Dados salvos em {data_file}")
    return True
