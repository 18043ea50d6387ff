import asyncio
import contextvars
import logging
from enum import Enum, auto
from typing import Awaitable, Callable, TypeVar, Union

T = TypeVar("T")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
HANDLER_NAME = "request_id_stream"

# configure request-id context
request_id_var = contextvars.ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        # Add request_id from contextvar to the log record
        record.request_id = request_id_var.get()
        return True


# === Logging ===
logger = logging.getLogger()


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Handler:
    """
    Attach a stream handler stamping every record with the current request id to the root
    logger. Calling it again returns the handler already installed.
    """
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


class Action(str, Enum):
    LOAD_DICTIONARIES = auto()
    TRANSLATE_TEXT = auto()


class LogsHandler:
    @staticmethod
    def error(error: Exception, task: str = "unamed task"):
        err_message = f"Error occurred during {task}: {error}"
        logger.error(err_message)

    @staticmethod
    async def with_logging(
        action: Action,
        callback: Union[Callable[..., T], Awaitable[T]],
    ) -> T:
        """
        Executes a given callable and logs if any error occurs. It supports both
        synchronous callables and awaitables.

        Parameters:
            action (Action): The action being executed, used for logging context.
            callback (Union[Callable[..., T], Awaitable[T]]):
                A callable or a coroutine representing the action to execute.

        Returns:
            T: The result of the callback.

        Raises:
            Exception: Any exception raised during the callback execution,
            re-raised after logging.
        """
        try:
            logger.info("Executing %s", action)
            if asyncio.iscoroutine(callback):
                return await callback

            return callback()
        except Exception:
            logger.error("Got error executing action %s", action)
            raise
