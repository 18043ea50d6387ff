import logging

import bugsnag
import bugsnag.handlers
from bugsnag.asgi import BugsnagMiddleware
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# submitted text is user content and never leaves the service
FILTERED_PARAMS = ["text"]


def failed_response(status_code: int, error_code: str, status_message, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "failed", "error_code": error_code, "status_message": status_message, **extra},
    )


class BugsnagLogger:
    """
    Reports unhandled exceptions, rejected request bodies and ERROR logs of the translator API
    to Bugsnag. Whether it is enabled at all is decided by app.config.BUGSNAG_ENABLED.
    """

    def __init__(self, api_key: str, release_stage: str):
        bugsnag.configure(
            api_key=api_key,
            project_root=".",
            release_stage=release_stage,
            params_filters=FILTERED_PARAMS,
        )

    async def _unhandled_exception_handler(self, request: Request, exc: Exception) -> JSONResponse:
        bugsnag.notify(exc)
        return failed_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", "Internal server error")

    async def _invalid_body_handler(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        bugsnag.notify(exc)
        return failed_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "INVALID_REQUEST_BODY",
            "Request body could not be read",
            detail=exc.errors(),
        )

    def setup_bugsnag(self, app: FastAPI):
        """
        Wire Bugsnag into the app: request middleware, the two exception handlers above and
        a root log handler forwarding ERROR records.

        Args:
            app (FastAPI): The application to report on.
        """
        app.add_middleware(BugsnagMiddleware)
        app.add_exception_handler(Exception, self._unhandled_exception_handler)
        app.add_exception_handler(RequestValidationError, self._invalid_body_handler)

        error_handler = bugsnag.handlers.BugsnagHandler()
        error_handler.setLevel(logging.ERROR)
        logging.getLogger().addHandler(error_handler)
