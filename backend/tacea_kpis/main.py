import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from tacea_kpis.api.api import api_router
from tacea_kpis.core.config import get_settings
from tacea_kpis.core.database import Base, SessionLocal, engine
from tacea_kpis.core.logging import configure_logging
from tacea_kpis.core.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from tacea_kpis.core.rate_limit import limiter
from tacea_kpis.models import kv  # noqa: F401
from tacea_kpis.services.persistence import SqlPersistenceGateway
from tacea_kpis.services.store import InputStateStore

logger = logging.getLogger(__name__)


def create_app(store: InputStateStore | None = None) -> FastAPI:
    """Build the API. Without an explicit store, one backed by ``DATABASE_URL`` is loaded at startup."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url="/docs" if settings.ENABLE_API_DOCS else None,
        redoc_url="/redoc" if settings.ENABLE_API_DOCS else None,
        openapi_url="/openapi.json" if settings.ENABLE_API_DOCS else None,
    )
    app.state.store = store
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "x-request-id"],
    )

    @app.on_event("startup")
    def on_startup() -> None:
        if app.state.store is not None:
            return
        Base.metadata.create_all(bind=engine)
        app.state.store = InputStateStore(SqlPersistenceGateway(SessionLocal), key=settings.STORE_KEY)
        app.state.store.load()
        logger.info("counters loaded from %s", engine.url.render_as_string(hide_password=True))

    @app.get("/health")
    @limiter.limit("60/minute")
    def health(request: Request):
        return {"status": "ok"}

    @app.get("/api", include_in_schema=False)
    def api_root():
        return {
            "name": settings.PROJECT_NAME,
            "version": "v1",
            "base": settings.API_V1_STR,
            "health": "/health",
        }

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
