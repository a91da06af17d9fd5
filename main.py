from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import auth, document, health, summary
from db.sessions import open_database
from exceptions import BaseError
from settings import core_settings, logfire_settings, postgres_settings

logfire.configure(
    service_name=logfire_settings.service_name,
    send_to_logfire=logfire_settings.send_to_logfire,
)
logfire.instrument_httpx()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database for the lifetime of the application.

    Args:
        app: The application.

    """
    core_settings.upload_dir.mkdir(parents=True, exist_ok=True)

    async with open_database(
        url=postgres_settings.url, echo=postgres_settings.echo
    ) as database:
        logfire.instrument_sqlalchemy(engine=database.engine)
        app.state.database = database
        logfire.info("Application started")

        yield

    logfire.info("Application stopped")


async def base_error_handler(request: Request, exc: BaseError) -> JSONResponse:
    """Render a domain error.

    Args:
        request: The request.
        exc: The exception.

    Returns:
        The JSON response.

    """
    return JSONResponse(content={"detail": exc.message}, status_code=exc.status_code)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an unexpected error without leaking its details.

    Args:
        request: The request.
        exc: The exception.

    Returns:
        The JSON response.

    """
    logfire.exception(
        "Unhandled error on {method} {path}",
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(content={"detail": "Internal server error"}, status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="Summarizer API", lifespan=lifespan)

    logfire.instrument_fastapi(app=app)

    app.add_middleware(
        middleware_class=CORSMiddleware,
        allow_origins=core_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BaseError, base_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, internal_error_handler)

    app.include_router(router=health.router)
    app.include_router(router=auth.router)
    app.include_router(router=document.router)
    app.include_router(router=summary.router)

    return app


app = create_app()
