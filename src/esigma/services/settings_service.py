"""
Settings service - system configuration values
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from esigma.database.mappers import SETTING_MAPPER
from esigma.database.query import OrderBy
from esigma.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class SettingsService(BaseService):
    """Service for system settings"""

    async def get_settings(self) -> ServiceResult:
        """List settings grouped by category"""
        if self.demo_mode:
            return self.demo_list("settings")

        try:
            rows = await self.db.select("system_settings", order_by=[OrderBy("category")])
            settings = [SETTING_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Settings fetched successfully", settings)

        except Exception as e:
            return self.failure("get_settings", e, "Failed to fetch settings", data=[])

    async def update_setting(
        self,
        setting_id: str,
        value: str,
        user_id: Optional[str] = None
    ) -> ServiceResult:
        """
        Store a new setting value

        Args:
            setting_id: Id of the setting
            value: New value, stored as an opaque string
            user_id: Editor recorded in updated_by

        Returns:
            ServiceResult without data
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            logger.info(f"Updating setting {setting_id}")
            await self.db.update(
                "system_settings",
                SETTING_MAPPER.to_row({
                    "value": value,
                    "updated_by": user_id,
                    "updated_at": datetime.now(timezone.utc)
                }),
                filters={"id": setting_id}
            )
            return ServiceResult.ok("Setting updated successfully")

        except Exception as e:
            return self.failure(
                "update_setting", e, "Failed to update setting",
                context={"setting_id": setting_id}
            )
