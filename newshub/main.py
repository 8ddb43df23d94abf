"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from newshub.config import Settings, get_settings
from newshub.infrastructure.database import Database
from newshub.infrastructure.database.repositories import SQLAlchemyArticleRepository
from newshub.infrastructure.imgbb import ImgBBImageHost
from newshub.infrastructure.logging.log_config import setup_logging
from newshub.infrastructure.seed import seed_sample_articles
from newshub.infrastructure.storage import InMemoryArticleRepository
from newshub.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _init_state(app: FastAPI, settings: Settings) -> None:
    """Attach the storage engine and collaborators owned by this application."""
    app.state.settings = settings
    app.state.database = None
    app.state.article_repository = None

    if settings.storage_backend == "database":
        app.state.database = Database(
            settings.database_url,
            echo=(settings.log_level_sql.upper() == "DEBUG"),
        )
    else:
        app.state.article_repository = InMemoryArticleRepository()

    app.state.image_host = None
    if settings.imgbb_api_key.strip():
        app.state.image_host = ImgBBImageHost(
            api_key=settings.imgbb_api_key,
            upload_url=settings.imgbb_upload_url,
            timeout=settings.image_upload_timeout,
        )
    else:
        logger.warning("IMGBB_API_KEY is not configured; image uploads are disabled.")


async def _seed_sample_data(app: FastAPI) -> None:
    database: Database | None = app.state.database
    if database is None:
        await seed_sample_articles(app.state.article_repository)
        return
    async with database.session() as session:
        await seed_sample_articles(SQLAlchemyArticleRepository(session))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, prepare storage, seed samples."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    # 1. Create tables for the database engine
    database: Database | None = app.state.database
    if database is not None:
        await database.create_all()
        logger.info("Database ready at %s", database.engine.url.render_as_string(hide_password=True))
    else:
        logger.info("Using in-memory article storage")

    # 2. Sample articles for demos
    if settings.seed_sample_data:
        await _seed_sample_data(app)

    yield

    # Shutdown
    if database is not None:
        await database.dispose()


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures as 400 with one entry per offending field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"message": "Validation error", "errors": errors}),
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    _init_state(app, settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "newshub.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
    )
