"""
FastAPI application factory.

Startup opens the asyncpg pool (and creates the tables when configured);
shutdown closes it. Validation failures answer 400 instead of FastAPI's 422.
"""

import logging
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blogpessoal import postagem_controller, tema_controller, usuario_controller
from blogpessoal.config import Settings, get_settings
from blogpessoal.db_context import DatabaseManager
from blogpessoal.exceptions import EntityNotFoundError
from blogpessoal.log_config import configure_logging
from blogpessoal.schema import create_schema

logger = logging.getLogger(__name__)


def _setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not Found"}
        )

    @app.exception_handler(asyncpg.ForeignKeyViolationError)
    async def foreign_key_handler(
        request: Request, exc: asyncpg.ForeignKeyViolationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Referenced record does not exist"},
        )

    @app.exception_handler(asyncpg.UniqueViolationError)
    async def unique_handler(
        request: Request, exc: asyncpg.UniqueViolationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Duplicate value"},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        pool = await DatabaseManager.create_pool(
            settings.database_url,
            name=settings.pool_name,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        if settings.create_schema:
            await create_schema(pool)
        logger.info("blogpessoal started")
        yield
        await DatabaseManager.close_pool(settings.pool_name)

    app = FastAPI(title="Blog Pessoal", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _setup_exception_handlers(app)

    app.include_router(postagem_controller.create_router(settings.pool_name))
    app.include_router(tema_controller.create_router(settings.pool_name))
    app.include_router(usuario_controller.create_router(settings.pool_name))
    return app
