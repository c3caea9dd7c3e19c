from fastapi import APIRouter, Depends

from config import Settings
from core.dependencies import get_settings

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "repository": f"{settings.github_owner}/{settings.github_repo}",
        "dispatch_configured": bool(settings.github_token),
    }
