from typing import Optional
import logging

from pos.models.setting import Setting, SETTINGS_ID
from pos.schemas.setting import SettingsSave
from pos.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class SettingsService:
    """Reads and writes the single store settings record."""

    def __init__(self, settings: RecordStore[Setting]):
        self.settings = settings

    def get(self) -> Optional[Setting]:
        """Get the store settings, or None before they're first saved."""
        return self.settings.find_one(id=SETTINGS_ID)

    def save(self, settings_data: SettingsSave) -> Setting:
        """Create the settings record, or replace it if it already exists."""
        values = settings_data.model_dump()

        if self.get() is None:
            setting = self.settings.insert(Setting(id=SETTINGS_ID, **values))
            logger.info("Settings created")
            return setting

        self.settings.update({"id": SETTINGS_ID}, values, replace=True)
        logger.info("Settings updated")
        return self.get()
