from fastapi import APIRouter, Depends

from app import dependencies as deps
from app.schemas.site import SiteConfig
from app.services.site_service import build_site_config
from app.settings import Settings

router = APIRouter()


@router.get("/site", response_model=SiteConfig)
def get_site_config(current_settings: Settings = Depends(deps.get_settings)):
    return build_site_config(current_settings)
