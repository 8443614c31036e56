from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote tombamento_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tombamento_api.repositories.json_repository import JsonRepository  # noqa: E402


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture()
def repo(data_file):
    return JsonRepository(data_file)
