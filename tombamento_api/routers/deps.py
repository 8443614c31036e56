"""Dependencies resolving the services stored on the application state."""
from __future__ import annotations

from fastapi import Request

from tombamento_api.services.detalhe_service import DetalheService
from tombamento_api.services.stats_service import StatsService
from tombamento_api.services.tombamento_service import TombamentoService


def _state_attr(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} nao configurado")
    return svc


def get_tombamento_service(request: Request) -> TombamentoService:
    return _state_attr(request, "tombamento_service")


def get_detalhe_service(request: Request) -> DetalheService:
    return _state_attr(request, "detalhe_service")


def get_stats_service(request: Request) -> StatsService:
    return _state_attr(request, "stats_service")
