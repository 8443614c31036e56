"""Health and statistics snapshots of the store."""

from __future__ import annotations

from tombamento_api.core.utils import utc_timestamp
from tombamento_api.repositories.json_repository import JsonRepository


class StatsService:
    def __init__(self, repository: JsonRepository) -> None:
        self.repository = repository

    def health(self) -> dict:
        tombamentos, detalhes = self.repository.counts()
        return {
            "status": "ok",
            "timestamp": utc_timestamp(),
            "tombamentos": tombamentos,
            "detalhes": detalhes,
        }

    def stats(self) -> dict:
        """Totais e histograma de status; as contagens somam totalTombamentos."""
        with self.repository.lock:
            tombamentos, detalhes = self.repository.counts()
            distribution = self.repository.status_distribution()
        return {
            "totalTombamentos": tombamentos,
            "totalDetalhes": detalhes,
            "statusDistribution": distribution,
            "timestamp": utc_timestamp(),
        }
