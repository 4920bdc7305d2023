"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from techscope import __version__
from techscope.api import router as api_router
from techscope.api.deps import AUTH_TOKEN_HEADER
from techscope.core.config import get_settings, settings
from techscope.core.database import SessionLocal, check_db_connected
from techscope.core.logging_config import configure_logging
from techscope.services.errors import STORAGE_FAULT, AccountError

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Refuse to start in prod without a signing key; report database reachability."""
    current = get_settings()
    if current.APP_ENV == "prod" and current.uses_default_jwt_key():
        logger.critical("FATAL ERROR: JWT_PRIVATE_KEY is not defined.")
        raise RuntimeError("FATAL ERROR: JWT_PRIVATE_KEY is not defined.")

    db = SessionLocal()
    try:
        if check_db_connected(db):
            logger.info("Connected to database...")
        else:
            logger.warning("Database is not reachable; requests touching users will fail.")
    finally:
        db.close()

    logger.info("Listening on port %s...", current.PORT)
    yield


app = FastAPI(
    title="Tech Scope API",
    version=__version__,
    description="All exposed endpoints of the Tech Scope store",
    docs_url="/api-docs",
    redoc_url="/api-docs/redoc",
    openapi_url="/api-docs/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[AUTH_TOKEN_HEADER],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError) -> PlainTextResponse:
    """Domain errors become plain-text responses. StorageFault is logged where it is raised."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> PlainTextResponse:
    """Database errors that escaped the store; never leak driver detail to clients."""
    logger.error(
        "Unhandled database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return PlainTextResponse(STORAGE_FAULT, status_code=500)


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    uvicorn.run(
        "techscope.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
