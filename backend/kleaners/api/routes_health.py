from fastapi import APIRouter, Depends

from kleaners.dependencies import get_app_settings
from kleaners.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def healthz(app_settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {"status": "ok", "service": app_settings.app_name}
