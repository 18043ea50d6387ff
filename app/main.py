import asyncio
from asyncio import exceptions
from contextlib import asynccontextmanager

import bugsnag
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from app.config import (
    BUGSNAG_API_KEY,
    BUGSNAG_ENABLED,
    BUGSNAG_RELEASE_STAGE,
    IS_DEV,
    LOG_LEVEL,
    REQUEST_TIMEOUT_SECS,
    URL_HOSTNAME,
)
from app.lib.error_messages import ErrorMessages
from app.lib.logs_handler import Action, LogsHandler, configure_logging, logger, request_id_var
from app.routers import healthcheck, translate
from app.services.bugsnag import BugsnagLogger
from app.services.translator import DictionaryError, get_translator


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan function that loads the dictionaries before the first request.

    Args:
        app (FastAPI): The FastAPI application instance

    Yields:
        None: Yields control to the main API code
    """
    logger.info("Loading translation dictionaries...")
    await LogsHandler.with_logging(Action.LOAD_DICTIONARIES, get_translator)

    yield


configure_logging(LOG_LEVEL)

app = FastAPI(title="American British Translator API", version="0.1.0", lifespan=lifespan)
app.openapi_version = "3.0.2"

# Configure CORS
if IS_DEV:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins in development
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[URL_HOSTNAME],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
# Setup Bugsnag logger
logger.info(f"BUGSNAG_ENABLED: {BUGSNAG_ENABLED}")
if BUGSNAG_ENABLED:
    bugsnag_logger = BugsnagLogger(BUGSNAG_API_KEY, BUGSNAG_RELEASE_STAGE)
    bugsnag_logger.setup_bugsnag(app)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID")
    if request_id:
        request_id_var.set(request_id)

    response = await call_next(request)
    return response


@app.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    """
    Returns robots.txt content to prevent web crawlers from indexing the API.

    Returns:
        str: robots.txt content disallowing all crawlers
    """
    return "User-agent: *\nDisallow: /"


@app.get("/", include_in_schema=False)
def root():
    """
    Redirects root URL to API documentation.

    Returns:
        RedirectResponse: Redirect to /docs endpoint
    """
    return RedirectResponse(url="/docs")


# Include routers
app.include_router(healthcheck.router, prefix="/healthcheck", tags=["Health Check"])
app.include_router(translate.router, prefix="/api", tags=["Translation"])


# exception handlers
@app.exception_handler(DictionaryError)
async def dictionary_exception_handler(request: Request, exc: DictionaryError):
    """
    Handles dictionary loading errors by returning an HTTP 500 response.

    Args:
        request (Request): The incoming request
        exc (DictionaryError): The dictionary error

    Returns:
        JSONResponse: With 500 status code and DICTIONARY_ERROR error code
    """
    bugsnag.notify(f"Dictionary Error: {exc}")
    LogsHandler.error(exc, "loading translation dictionaries")

    return JSONResponse(
        status_code=500,
        content={
            "status": "failed",
            "error_code": "DICTIONARY_ERROR",
            "status_message": ErrorMessages.default("loading translation dictionaries", exc),
        },
    )


@app.middleware("http")
async def set_global_timeout(request: Request, call_next):
    try:
        response = await asyncio.wait_for(call_next(request), timeout=REQUEST_TIMEOUT_SECS)
        return response
    except exceptions.TimeoutError:
        return JSONResponse(
            status_code=503,
            content={
                "status": "failed",
                "error_code": "REQUEST_TIMED_OUT",
                "status_message": "Server failed to process the request on time",
            },
        )
