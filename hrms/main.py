"""HRMS API — FastAPI Application Factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from hrms.auth.router import router as auth_router
from hrms.common.constants import HEALTH_MESSAGE
from hrms.common.exceptions import register_exception_handlers
from hrms.config import Settings, settings
from hrms.database import build_engine, build_session_factory, create_tables
from hrms.employees.router import router as employees_router
from hrms.leaves.router import router as leaves_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _make_lifespan(config: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Own the storage client for the lifetime of the process."""
        # Startup
        engine = build_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)
        if config.CREATE_TABLES:
            await create_tables(engine)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info("Storage client ready (%s)", engine.url.render_as_string(hide_password=True))
        yield
        # Shutdown
        await engine.dispose()
        logger.info("Storage client closed")

    return lifespan


def create_app(config: Settings = settings) -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(
        title="HRMS API",
        description="Employees, leave requests and password authentication",
        version="1.0.0",
        docs_url="/docs" if config.ENVIRONMENT != "production" else None,
        redoc_url="/redoc" if config.ENVIRONMENT != "production" else None,
        lifespan=_make_lifespan(config),
    )

    # Exception handlers (RFC 7807)
    register_exception_handlers(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Health check (no auth)
    @app.get("/", response_class=PlainTextResponse, tags=["system"])
    async def health_check():
        return HEALTH_MESSAGE

    # Register routers
    app.include_router(employees_router, prefix="/employees", tags=["employees"])
    app.include_router(leaves_router, prefix="/leaves", tags=["leaves"])
    app.include_router(auth_router, tags=["auth"])

    return app


app = create_app()
