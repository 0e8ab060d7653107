
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine

from civiltech.core.config import Settings, settings as default_settings
from civiltech.core.errors import register_exception_handlers
from civiltech.core.logging import RequestIdMiddleware, setup_logging
from civiltech.db.base import create_schema
from civiltech.db.features import probe_optional_features
from civiltech.db.session import build_session_factory, check_connection, create_db_engine
from civiltech.routers import (
    auth,
    companies,
    dashboard,
    documents,
    messages,
    progress,
    projects,
    resources,
    search,
    users,
)

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Builds the API. The engine is created in the lifespan unless one is handed in,
    and every request reaches it only through the session factory on app.state.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = engine or create_db_engine(settings)
        connected = check_connection(db_engine)
        if connected and settings.AUTO_CREATE_DB:
            create_schema(db_engine, include_optional=settings.CREATE_OPTIONAL_TABLES)

        app.state.engine = db_engine
        app.state.session_factory = build_session_factory(db_engine)
        app.state.features = probe_optional_features(db_engine)
        app.state.db_connected = connected
        Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
        logger.info("startup_complete", project=settings.PROJECT_NAME)
        yield
        if engine is None:
            db_engine.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, expose_db_errors=settings.EXPOSE_DB_ERRORS)

    # Uploaded files, served as-is; the directory is created in the lifespan
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    @app.get("/api/health", tags=["health"])
    def health(request: Request):
        return {
            "status": "ok",
            "database": "connected" if request.app.state.db_connected else "unavailable",
            "optional_tables": request.app.state.features.as_dict(),
        }

    app.include_router(projects.router)
    app.include_router(progress.router)
    app.include_router(documents.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(dashboard.router)
    app.include_router(companies.router)
    app.include_router(messages.router)
    app.include_router(resources.router)
    app.include_router(search.router)

    return app


app = create_app()
