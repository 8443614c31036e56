from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, Depends

from tombamento_api.routers.deps import get_detalhe_service
from tombamento_api.services.detalhe_service import DetalheService

router = APIRouter(prefix="/detalhes", tags=["detalhes"])


@router.get("")
def list_detalhes(svc: DetalheService = Depends(get_detalhe_service)):
    return svc.list_all()


@router.post("/batch", status_code=201)
def upsert_detalhes_batch(
    payload: Any = Body(None),
    svc: DetalheService = Depends(get_detalhe_service),
):
    return asdict(svc.upsert_batch(payload))


@router.get("/{code}")
def get_detalhe(code: str, svc: DetalheService = Depends(get_detalhe_service)):
    return svc.get(code)


@router.post("", status_code=201)
def upsert_detalhe(
    payload: Any = Body(None),
    svc: DetalheService = Depends(get_detalhe_service),
):
    return svc.upsert(payload)
