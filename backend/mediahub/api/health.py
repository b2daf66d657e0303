from fastapi import APIRouter, Depends

from mediahub.api.deps import get_provider
from mediahub.storage.base import BaseUploadProvider

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(provider: BaseUploadProvider = Depends(get_provider)) -> dict:
    return {"status": "healthy", "provider": provider.name}
