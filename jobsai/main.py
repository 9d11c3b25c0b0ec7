# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from jobsai.config import is_sqlite_url, settings
from jobsai.database import create_core_tables, engine
from jobsai.errors import register_exception_handlers
from jobsai.api.routes.ai import router as ai_router
from jobsai.api.routes.candidates import router as candidates_router
from jobsai.api.routes.employer import router as employer_router
from jobsai.api.routes.health import router as health_router
from jobsai.api.routes.saved_searches import router as saved_searches_router
from jobsai.api.routes.watchlist import router as watchlist_router


logger = logging.getLogger("jobsai")


def create_app() -> FastAPI:
    logger.setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Local sqlite databases get the core schema on start-up; on-demand tables
        # (saved searches, watchlist) are created by their own endpoints.
        if is_sqlite_url(settings.db_url):
            create_core_tables(engine)
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(candidates_router, prefix=settings.api_prefix)
    application.include_router(employer_router, prefix=settings.api_prefix)
    application.include_router(saved_searches_router, prefix=settings.api_prefix)
    application.include_router(watchlist_router, prefix=settings.api_prefix)
    application.include_router(ai_router, prefix=settings.api_prefix)
    return application


app = create_app()
