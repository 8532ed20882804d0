"""Główna aplikacja FastAPI."""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from sqlalchemy import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth import SessionStore
from .config import Settings, configure_logging, get_settings
from .database import build_engine, build_session_factory, init_db
from .dependencies import build_services
from .exceptions import RepositoryError, RepositoryTimeout
from .routers import admin_router, auth_router, registration_router
from .templating import BASE_DIR, templates

logger = logging.getLogger(__name__)


async def _sweep_sessions(store: SessionStore, interval: float) -> None:
    """Okresowo usuwaj wygasłe sesje z pamięci."""
    while True:
        await asyncio.sleep(interval)
        removed = store.purge_expired()
        if removed:
            logger.debug("Usunięto %d wygasłych sesji", removed)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Zbuduj aplikację.

    Brak wymaganych ustawień kończy się wyjątkiem jeszcze przed utworzeniem
    czegokolwiek innego.
    """
    settings = settings or get_settings()
    engine = engine if engine is not None else build_engine(settings.database_url)
    services = build_services(settings, build_session_factory(engine))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle aplikacji - inicjalizacja i cleanup."""
        init_db(engine)
        sweeper = None
        if settings.session_sweep_interval > 0:
            sweeper = asyncio.create_task(
                _sweep_sessions(services.sessions, settings.session_sweep_interval)
            )
        yield
        if sweeper is not None:
            sweeper.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sweeper

    app = FastAPI(
        title=settings.app_name,
        description="Lista podpisów pod petycją z panelem administracyjnym",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.services = services

    # Static files
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    # Routers
    app.include_router(auth_router)
    app.include_router(registration_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health_check():
        """Endpoint do sprawdzania stanu aplikacji."""
        return {"status": "ok", "version": "0.1.0"}

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 404:
            return await http_exception_handler(request, exc)
        return templates.TemplateResponse(
            request,
            "error.html",
            {"title": "Strona nie znaleziona"},
            status_code=404,
        )

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        # Szczegóły tylko w logach
        logger.error("Błąd repozytorium przy %s %s: %s", request.method, request.url.path, exc)
        if isinstance(exc, RepositoryTimeout):
            return templates.TemplateResponse(
                request,
                "error.html",
                {"title": "Usługa chwilowo niedostępna, spróbuj ponownie"},
                status_code=503,
                headers={"Retry-After": "1"},
            )
        return templates.TemplateResponse(
            request,
            "error.html",
            {"title": "Wystąpił błąd"},
            status_code=500,
        )

    return app


def run():
    """Uruchom serwer (dla CLI)."""
    import uvicorn

    try:
        settings = get_settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.ERROR)
        missing = ", ".join(str(e["loc"][0]).upper() for e in exc.errors())
        logger.critical("Brak wymaganej konfiguracji: %s", missing)
        raise SystemExit(1) from exc

    configure_logging(settings)
    uvicorn.run(
        "petition.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
