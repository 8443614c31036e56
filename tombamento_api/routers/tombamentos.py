from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from tombamento_api.routers.deps import get_tombamento_service
from tombamento_api.services.tombamento_service import TombamentoService

router = APIRouter(prefix="/tombamentos", tags=["tombamentos"])


@router.get("")
def list_tombamentos(svc: TombamentoService = Depends(get_tombamento_service)):
    return svc.list_all()


# declarada antes de /{code} para não ser tratada como código
@router.delete("/all", status_code=204)
def delete_all_tombamentos(svc: TombamentoService = Depends(get_tombamento_service)):
    svc.delete_all()
    return Response(status_code=204)


@router.get("/{code}")
def get_tombamento(code: str, svc: TombamentoService = Depends(get_tombamento_service)):
    return svc.get(code)


@router.post("", status_code=201)
def upsert_tombamento(
    payload: Any = Body(None),
    svc: TombamentoService = Depends(get_tombamento_service),
):
    return svc.upsert(payload)


@router.put("/{code}")
def update_tombamento(
    code: str,
    payload: Any = Body(None),
    svc: TombamentoService = Depends(get_tombamento_service),
):
    return svc.update_status(code, payload)


@router.delete("/{code}", status_code=204)
def delete_tombamento(code: str, svc: TombamentoService = Depends(get_tombamento_service)):
    svc.delete(code)
    return Response(status_code=204)
