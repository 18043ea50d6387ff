from .error_messages import ErrorMessages
from .logs_handler import Action, LogsHandler, configure_logging, logger

__all__ = ["Action", "ErrorMessages", "LogsHandler", "configure_logging", "logger"]
