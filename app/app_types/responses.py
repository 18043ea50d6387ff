from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    status: str = "fine"


class TranslateResponse(BaseModel):
    text: str
    translation: str


class TranslateErrorResponse(BaseModel):
    error: str
