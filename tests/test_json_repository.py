from __future__ import annotations

import threading

from tombamento_api.domain.store import Store


def test_upsert_replaces_in_place(repo):
    assert repo.upsert_tombamento({"code": "A", "status": 1}) is True
    assert repo.upsert_tombamento({"code": "B", "status": 1}) is True
    assert repo.upsert_tombamento({"code": "A", "status": 5}) is False

    assert repo.list_tombamentos() == [
        {"code": "A", "status": 5},
        {"code": "B", "status": 1},
    ]


def test_delete_and_clear(repo):
    repo.upsert_tombamento({"code": "A", "status": 1})
    repo.upsert_tombamento({"code": "B", "status": 2})

    assert repo.delete_tombamento("A") is True
    assert repo.delete_tombamento("A") is False
    assert repo.clear_tombamentos() == 1
    assert repo.list_tombamentos() == []


def test_status_distribution_counts(repo):
    for code, status in (("A", 1), ("B", 2), ("C", 1), ("D", 0)):
        repo.upsert_tombamento({"code": code, "status": status})

    assert repo.status_distribution() == {"1": 2, "2": 1, "0": 1}


def test_load_and_save_round_through_file(repo, data_file):
    repo.upsert_detalhe({"code": "X", "sala": "101"})
    assert repo.save() is True

    repo.store = Store()
    repo.load()
    assert repo.get_detalhe("X") == {"code": "X", "sala": "101"}


def test_store_from_dict_keeps_repeated_codes_in_place():
    store = Store.from_dict({
        "tombamentos": [
            {"code": "A", "status": 1},
            {"code": "B", "status": 1},
            {"code": "A", "status": 9},
            "lixo",
        ],
    })
    assert store.to_dict()["tombamentos"] == [
        {"code": "A", "status": 1},
        {"code": "B", "status": 1},
        {"code": "A", "status": 9},
        "lixo",
    ]
    assert store.tombamentos["A"] == {"code": "A", "status": 1}


def test_delete_removes_repeated_codes_loaded_from_file(repo, data_file):
    data_file.write_text(
        '{"tombamentos": [{"code": "A", "status": 1}, {"code": "B", "status": 2}, {"code": "A", "status": 3}]}',
        encoding="utf-8",
    )
    repo.load()

    assert repo.delete_tombamento("A") is True
    assert repo.list_tombamentos() == [{"code": "B", "status": 2}]


def test_stats_stay_consistent_while_another_thread_writes(repo):
    from tombamento_api.services.stats_service import StatsService
    from tombamento_api.services.tombamento_service import TombamentoService

    tombamentos = TombamentoService(repo)
    stats = StatsService(repo)
    stop = threading.Event()
    errors = []

    def writer():
        n = 0
        while not stop.is_set():
            tombamentos.upsert({"code": f"T{n % 50}", "status": n % 4})
            if n % 25 == 0:
                tombamentos.delete_all()
            n += 1

    thread = threading.Thread(target=writer)
    thread.start()
    try:
        for _ in range(300):
            try:
                body = stats.stats()
            except RuntimeError as exc:
                errors.append(str(exc))
                continue
            if sum(body["statusDistribution"].values()) != body["totalTombamentos"]:
                errors.append("histograma inconsistente")
    finally:
        stop.set()
        thread.join()

    assert errors == []
