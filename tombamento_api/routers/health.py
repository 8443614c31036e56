from fastapi import APIRouter, Depends

from tombamento_api.routers.deps import get_stats_service
from tombamento_api.services.stats_service import StatsService

router = APIRouter(tags=["health"])


@router.get("/health")
def health(svc: StatsService = Depends(get_stats_service)):
    return svc.health()


@router.get("/stats")
def stats(svc: StatsService = Depends(get_stats_service)):
    return svc.stats()
