from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from shorty.api import shortener
from shorty.core.config import Settings, get_settings
from shorty.core.logging_config import configure_logging
from shorty.db.Connection import database
from shorty.db.storage import URLStore
from shorty.routers import health
from shorty.schemas import URLResponse
from shorty.services.shortener import URLService

logger = logging.getLogger(__name__)


def _error(status_code: int, msg: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=URLResponse.fail(msg).model_dump(exclude_none=True),
        headers=headers,
    )


def describe_validation_errors(errors) -> str:
    msgs = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if err.get("type") == "json_invalid":
            return "failed to decode request"
        if not loc:
            return "empty request"
        field = loc[-1]
        if err.get("type") == "missing":
            msgs.append(f'"{field}" field is mandatory')
        elif field == "url" or err.get("type", "").startswith("url_"):
            msgs.append(f'"{field}" is not a valid URL')
        else:
            msgs.append(f'"{field}" field is not valid')
    return ", ".join(msgs)


def create_app(settings: Optional[Settings] = None, store: Optional[URLStore] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application '%s' starting up (env=%s).", settings.PROJECT_NAME, settings.ENV)
        # An injected store belongs to the caller, who closes it
        owns_store = store is None
        url_store = database.create_store(settings) if owns_store else store
        app.state.service = URLService(
            url_store,
            alias_length=settings.ALIAS_LENGTH,
            max_attempts=settings.ALIAS_MAX_ATTEMPTS,
        )
        try:
            yield
        finally:
            logger.info("Shutting down gracefully...")
            if owns_store:
                url_store.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="URL shortening service",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(health.router)
    app.include_router(shortener.router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        msg = describe_validation_errors(exc.errors())
        logger.info("Invalid request to %s: %s", request.url.path, msg)
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, msg)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal error")

    return app


def run():
    settings = get_settings()
    configure_logging(settings.ENV)
    logger.info("Starting server on %s", settings.HTTP_ADDRESS)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=int(settings.HTTP_IDLE_TIMEOUT),
        timeout_graceful_shutdown=int(settings.HTTP_TIMEOUT),
        log_config=None,
    )


if __name__ == "__main__":
    run()
