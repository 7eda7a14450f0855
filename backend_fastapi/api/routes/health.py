from fastapi import APIRouter

from backend_fastapi.api.schemas import ServiceInfo

router = APIRouter(tags=["health"])


@router.get("/", response_model=ServiceInfo, summary="Liveness and service info")
def service_info() -> ServiceInfo:
    return ServiceInfo()
