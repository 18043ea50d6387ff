from .bugsnag_logger import BugsnagLogger

__all__ = ["BugsnagLogger"]
