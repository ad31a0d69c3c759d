import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from status_api import __version__
from status_api.api import api_router
from status_api.core.db import UserGateway, create_engine_from_config
from status_api.core.logging import configure_logging
from status_api.core.settings import Settings, get_settings

configure_logging()
logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or get_settings()
        engine = create_engine_from_config(resolved.database)
        app.state.gateway = UserGateway(engine)
        try:
            yield
        finally:
            await app.state.gateway.dispose()
            logger.info("Database pool disposed")

    app = FastAPI(title="DB Status API", version=__version__, lifespan=lifespan)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.include_router(api_router)
    return app


app = create_app()
