from . import healthcheck, translate

__all__ = ["healthcheck", "translate"]
