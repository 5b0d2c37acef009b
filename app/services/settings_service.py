"""System settings — the single admin-mutable configuration row."""
from typing import Any, Dict

from app.core.logging import get_logger
from app.core.repository_protocols import SettingsRepository
from app.models.system_settings_model import SystemSettings

logger = get_logger(__name__)


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self.settings = settings

    async def get(self) -> SystemSettings:
        return await self.settings.get()

    async def update(self, fields: Dict[str, Any]) -> SystemSettings:
        if fields.get("listing_price", 0) is None:
            fields = {k: v for k, v in fields.items() if k != "listing_price"}
        row = await self.settings.update(fields)
        logger.info("System settings updated: %s", ", ".join(sorted(fields)) or "nothing")
        return row
