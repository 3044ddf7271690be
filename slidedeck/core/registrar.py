from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from slidedeck import __version__
from slidedeck.app.router import router
from slidedeck.common.exception.exception_handler import register_exception
from slidedeck.common.log import log, set_custom_logfile, setup_logging
from slidedeck.core.conf import settings
from slidedeck.database.db import async_engine, create_tables


@asynccontextmanager
async def register_init(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application startup/shutdown

    :param app: FastAPI application
    :return:
    """
    if not settings.DATABASE_SKIP_CREATE_TABLES:
        await create_tables()
    log.info(f'Slide generator: {settings.SLIDE_GENERATOR}')

    yield

    await async_engine.dispose()


def register_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title=settings.FASTAPI_TITLE,
        version=__version__,
        description=settings.FASTAPI_DESCRIPTION,
        docs_url=settings.FASTAPI_DOCS_URL,
        redoc_url=settings.FASTAPI_REDOC_URL,
        openapi_url=settings.FASTAPI_OPENAPI_URL,
        lifespan=register_init,
    )

    register_logger()
    register_middleware(app)
    register_router(app)
    register_exception(app)

    return app


def register_logger() -> None:
    """Register logging"""
    setup_logging()
    if settings.LOG_FILE_ENABLED:
        set_custom_logfile()


def register_middleware(app: FastAPI) -> None:
    """
    Register middleware (executed from bottom to top)

    :param app: FastAPI application
    :return:
    """
    # Trace ID
    app.add_middleware(CorrelationIdMiddleware, header_name=settings.TRACE_ID_REQUEST_HEADER_KEY)

    # CORS: must be the outermost middleware
    if settings.MIDDLEWARE_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=['*'],
            allow_headers=['*'],
            expose_headers=settings.CORS_EXPOSE_HEADERS,
        )


def register_router(app: FastAPI) -> None:
    """
    Register routers

    :param app: FastAPI application
    :return:
    """
    app.include_router(router)
