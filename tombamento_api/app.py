from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.datastructures import Headers
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from tombamento_api import __version__
from tombamento_api.core.config import Settings, get_settings
from tombamento_api.core.errors import PayloadTooLargeError, StoreError
from tombamento_api.repositories.json_repository import JsonRepository
from tombamento_api.routers import detalhes as detalhes_router
from tombamento_api.routers import health as health_router
from tombamento_api.routers import tombamentos as tombamentos_router
from tombamento_api.services.detalhe_service import DetalheService
from tombamento_api.services.stats_service import StatsService
from tombamento_api.services.tombamento_service import TombamentoService

ENDPOINTS = (
    "GET    /health",
    "GET    /stats",
    "GET    /tombamentos",
    "GET    /tombamentos/{code}",
    "POST   /tombamentos",
    "PUT    /tombamentos/{code}",
    "DELETE /tombamentos/{code}",
    "DELETE /tombamentos/all",
    "GET    /detalhes",
    "GET    /detalhes/{code}",
    "POST   /detalhes",
    "POST   /detalhes/batch",
)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log every incoming request as `METHOD path`."""

    async def dispatch(self, request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)


def _too_large_response(exc: PayloadTooLargeError) -> JSONResponse:
    return JSONResponse({"error": exc.detail, "message": exc.message}, status_code=exc.status_code)


class BodySizeLimitMiddleware:
    """
    Reject request bodies above the configured limit.

    A declared Content-Length over the limit is refused before the app runs;
    bodies without it (chunked) are counted as they are received.
    """

    def __init__(self, app: ASGIApp, *, max_body_bytes: int) -> None:
        self.app = app
        self._max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared and declared.isdigit() and int(declared) > self._max_body_bytes:
            await _too_large_response(PayloadTooLargeError(self._max_body_bytes))(scope, receive, send)
            return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self._max_body_bytes:
                    raise PayloadTooLargeError(self._max_body_bytes)
            return message

        async def tracked_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracked_send)
        except PayloadTooLargeError as exc:
            if response_started:
                raise
            await _too_large_response(exc)(scope, receive, send)


def _log_banner(settings: Settings, repository: JsonRepository) -> None:
    tombamentos, detalhes = repository.counts()
    logger.info(f"API de Tombamentos rodando em http://{settings.host}:{settings.port}")
    logger.info(f"Tombamentos: {tombamentos} | Detalhes: {detalhes}")
    logger.info("Endpoints disponiveis: " + ", ".join(ENDPOINTS))


@asynccontextmanager
async def lifespan(app: FastAPI):
    repository: JsonRepository = app.state.repository
    repository.load()
    _log_banner(app.state.settings, repository)
    yield
    logger.info("Salvando dados antes de fechar...")
    repository.save()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 405 também vira "rota não encontrada": não existe rota para o par método/caminho
    if exc.status_code in (404, 405):
        return JSONResponse(
            {"error": "Rota não encontrada", "path": request.url.path, "method": request.method},
            status_code=404,
        )
    if isinstance(exc, PayloadTooLargeError):
        return _too_large_response(exc)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Corpo inválido") if errors else "Corpo inválido"
    return JSONResponse({"error": "Corpo da requisição inválido", "message": message}, status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Erro ao processar {request.method} {request.url.path}")
    return JSONResponse({"error": "Erro interno do servidor", "message": str(exc)}, status_code=500)


def create_app(settings: Settings | None = None, repository: JsonRepository | None = None) -> FastAPI:
    """Factory compatível com uvicorn; `repository` permite injetar um store isolado."""
    settings = settings or get_settings()
    repository = repository or JsonRepository(settings.data_file)

    app = FastAPI(title="Tombamentos API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.repository = repository
    app.state.tombamento_service = TombamentoService(repository)
    app.state.detalhe_service = DetalheService(repository)
    app.state.stats_service = StatsService(repository)

    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health_router.router)
    app.include_router(tombamentos_router.router)
    app.include_router(detalhes_router.router)
    return app


app = create_app()
