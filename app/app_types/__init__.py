from .requests import TranslateRequest
from .responses import HealthCheckResponse, TranslateErrorResponse, TranslateResponse

__all__ = [
    "HealthCheckResponse",
    "TranslateErrorResponse",
    "TranslateRequest",
    "TranslateResponse",
]
