from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .logging import configure_logging, logger
from .middleware import AccessLogAndMetricsMiddleware, RequestIDMiddleware
from .routers import config as cfg
from .routers import curve, health, plan


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers attached."""

    configure_logging()
    app = FastAPI(title="WordPlan API", version=__version__)

    configured_origins = list(settings.allowed_cors_origins)
    allow_credentials = bool(configured_origins)
    if not configured_origins:
        configured_origins = ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=configured_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Starlette では後から追加したミドルウェアが外側で実行される。
    # AccessLog（外側）が request_id を採番してログへ束縛し、
    # RequestID（内側）が同じ ID を X-Request-ID としてレスポンスへ付与する。
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(AccessLogAndMetricsMiddleware)

    app.include_router(plan.router, prefix="/api/plan")
    app.include_router(curve.router, prefix="/api/curve")
    app.include_router(cfg.router, prefix="/api")
    app.include_router(health.router)

    logger.info(
        "app_created",
        environment=settings.environment,
        max_total_words=settings.max_total_words,
        max_plan_days=settings.max_plan_days,
    )
    return app


app = create_app()
