from fastapi import APIRouter, Depends
from typing import Optional

from pos.api.deps import get_settings_service
from pos.services.settings_service import SettingsService
from pos.schemas.setting import SettingsResponse, SettingsSave

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get(
    "/get",
    response_model=Optional[SettingsResponse],
    summary="Get store settings",
    description="Returns null until the settings are saved for the first time."
)
def get_store_settings(service: SettingsService = Depends(get_settings_service)):
    return service.get()


@router.post(
    "/post",
    response_model=SettingsResponse,
    summary="Save store settings",
    description="Creates the settings on first save, replaces them afterwards."
)
def save_store_settings(
    settings_data: SettingsSave,
    service: SettingsService = Depends(get_settings_service)
):
    return service.save(settings_data)
