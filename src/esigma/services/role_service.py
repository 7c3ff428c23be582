"""
Role service - role definitions and menu access

Roles are fetched and edited here but never enforced; permission checks
belong to the presentation layer.
"""

import logging
from typing import Any, Dict, List, Union

from esigma.database.mappers import ROLE_MAPPER
from esigma.database.query import OrderBy
from esigma.models.enums import ErrorType
from esigma.models.user import RoleCreateRequest, RoleUpdateRequest
from esigma.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

# Level assigned to every role created through this service
NEW_ROLE_LEVEL = 5


class RoleService(BaseService):
    """Service for role management operations"""

    async def get_roles(self) -> ServiceResult:
        """List roles, highest authority (lowest level) first"""
        if self.demo_mode:
            return self.demo_list("roles")

        try:
            rows = await self.db.select("roles", order_by=[OrderBy("level")])
            roles = [ROLE_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Roles fetched successfully", roles)

        except Exception as e:
            return self.failure("get_roles", e, "Failed to fetch roles", data=[])

    async def create_role(
        self,
        role_data: Union[RoleCreateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Create an active role at the lowest authority level

        Args:
            role_data: Name and description

        Returns:
            ServiceResult with created Role
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(role_data, RoleCreateRequest)
            values = ROLE_MAPPER.to_row({
                **request.model_dump(),
                "level": NEW_ROLE_LEVEL,
                "is_active": True
            })

            logger.info(f"Creating role: {request.name}")
            row = await self.db.insert("roles", values)

            return ServiceResult.ok("Role created successfully", ROLE_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("create_role", e, "Failed to create role")

    async def update_role(
        self,
        role_id: str,
        role_data: Union[RoleUpdateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Update a role's name and/or description; level is preserved

        Args:
            role_id: Id of the role
            role_data: Partial update

        Returns:
            ServiceResult with updated Role
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(role_data, RoleUpdateRequest)
            values = ROLE_MAPPER.to_row(request.model_dump(exclude_unset=True))

            if not values:
                return ServiceResult.fail(
                    "No role fields provided to update",
                    ErrorType.VALIDATION_ERROR
                )

            logger.info(f"Updating role {role_id}")
            row = await self.db.update_one("roles", values, filters={"id": role_id})

            return ServiceResult.ok("Role updated successfully", ROLE_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("update_role", e, "Failed to update role")

    async def delete_role(self, role_id: str) -> ServiceResult:
        """Delete a role"""
        if self.demo_mode:
            return self.not_configured()

        try:
            logger.info(f"Deleting role {role_id}")
            await self.db.delete("roles", filters={"id": role_id})
            return ServiceResult.ok("Role deleted successfully")

        except Exception as e:
            return self.failure("delete_role", e, "Failed to delete role")

    async def update_role_menu_access(self, role_id: str, menu_access: List[str]) -> ServiceResult:
        """Replace the ordered list of menu identifiers a role can reach"""
        if self.demo_mode:
            return self.not_configured()

        try:
            logger.info(f"Updating menu access for role {role_id}: {len(menu_access)} entries")
            await self.db.update(
                "roles",
                ROLE_MAPPER.to_row({"menu_access": list(menu_access)}),
                filters={"id": role_id}
            )
            return ServiceResult.ok("Menu access updated successfully")

        except Exception as e:
            return self.failure("update_role_menu_access", e, "Failed to update menu access")
