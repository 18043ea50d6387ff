from fastapi import APIRouter, status

from app.app_types import HealthCheckResponse

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_health_check() -> HealthCheckResponse:
    return HealthCheckResponse()
