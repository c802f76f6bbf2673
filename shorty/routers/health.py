from fastapi import APIRouter, Depends

from shorty.api.deps import get_service
from shorty.services.shortener import URLService

router = APIRouter(tags=["health"])


# simple liveness
@router.get("/health")
def health():
    return {"status": "ok"}


# readiness: can the store reach its backend
@router.get("/ready")
def readiness(service: URLService = Depends(get_service)):
    return {"ready": service.store.ping()}
