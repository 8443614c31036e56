from __future__ import annotations

import json

import pytest

from tombamento_api.core.errors import InvalidPayloadError, RecordNotFoundError
from tombamento_api.services.detalhe_service import DetalheService
from tombamento_api.services.tombamento_service import TombamentoService


def test_upsert_defaults_status_and_drops_extra_fields(repo, data_file):
    svc = TombamentoService(repo)
    record = svc.upsert({"code": "A1", "extra": "ignorado"})

    assert record == {"code": "A1", "status": 0}
    assert json.loads(data_file.read_text(encoding="utf-8"))["tombamentos"] == [record]


def test_upsert_numeric_code_is_stored_as_text(repo):
    svc = TombamentoService(repo)
    assert svc.upsert({"code": 123, "status": 1})["code"] == "123"
    assert svc.get("123")["status"] == 1


@pytest.mark.parametrize("payload", [None, [], {}, {"code": ""}, {"status": 1}])
def test_upsert_without_code_is_rejected(repo, data_file, payload):
    svc = TombamentoService(repo)
    with pytest.raises(InvalidPayloadError):
        svc.upsert(payload)
    assert repo.list_tombamentos() == []
    assert not data_file.exists()


def test_upsert_rejects_non_integer_status(repo):
    with pytest.raises(InvalidPayloadError):
        TombamentoService(repo).upsert({"code": "A", "status": "ativo"})


def test_update_status_checks_existence_before_payload(repo):
    svc = TombamentoService(repo)
    with pytest.raises(RecordNotFoundError):
        svc.update_status("nada", {})

    svc.upsert({"code": "A", "status": 1})
    with pytest.raises(InvalidPayloadError):
        svc.update_status("A", {})
    assert svc.update_status("A", {"status": 3}) == {"code": "A", "status": 3}


def test_delete_unknown_code_raises(repo):
    with pytest.raises(RecordNotFoundError) as exc:
        TombamentoService(repo).delete("nada")
    assert exc.value.status_code == 404


def test_detalhe_upsert_keeps_arbitrary_fields(repo):
    svc = DetalheService(repo)
    svc.upsert({"code": "A", "sala": "101", "itens": [1, 2]})
    svc.upsert({"code": "A", "sala": "202"})

    assert svc.list_all() == [{"code": "A", "sala": "202"}]


def test_batch_counts_created_and_updated(repo):
    svc = DetalheService(repo)
    svc.upsert({"code": "A"})
    svc.upsert({"code": "B"})

    result = svc.upsert_batch({"detalhes": [{"code": "A"}, {"code": "C"}, {"code": "D"}, {"code": "B"}]})

    assert (result.count, result.created, result.updated) == (4, 2, 2)
    assert [d["code"] for d in svc.list_all()] == ["A", "B", "C", "D"]


@pytest.mark.parametrize("payload", [None, {}, {"detalhes": "x"}, {"detalhes": {"code": "A"}}])
def test_batch_requires_array(repo, payload):
    with pytest.raises(InvalidPayloadError):
        DetalheService(repo).upsert_batch(payload)


def test_batch_with_invalid_item_changes_nothing(repo):
    svc = DetalheService(repo)
    with pytest.raises(InvalidPayloadError) as exc:
        svc.upsert_batch({"detalhes": [{"code": "A"}, {"sala": "sem codigo"}]})

    assert "posição 1" in exc.value.message
    assert svc.list_all() == []


def test_integer_code_from_file_matches_request_code(repo, data_file):
    data_file.write_text(json.dumps({"tombamentos": [{"code": 5, "status": 1}]}), encoding="utf-8")
    repo.load()
    svc = TombamentoService(repo)

    assert svc.upsert({"code": 5, "status": 2}) == {"code": "5", "status": 2}
    assert svc.list_all() == [{"code": "5", "status": 2}]
    assert svc.get("5")["status"] == 2
