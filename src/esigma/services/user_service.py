"""
User service - user account management
"""

import logging
from typing import Any, Dict, Optional, Union

from esigma.database.connection import Database
from esigma.database.mappers import USER_MAPPER, USER_ROLE_EMBED
from esigma.database.query import OrderBy
from esigma.models.enums import ErrorType
from esigma.models.user import UserCreateRequest, UserUpdateRequest
from esigma.services.base_service import BaseService, ServiceResult
from esigma.utils.security import PasswordHasher

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Service for user management operations"""

    def __init__(
        self,
        database: Optional[Database] = None,
        hasher: Optional[PasswordHasher] = None,
        default_password: str = "password123"
    ):
        super().__init__(database)
        self.hasher = hasher or PasswordHasher()
        self.default_password = default_password

    async def get_users(self) -> ServiceResult:
        """
        List all users with their roles, newest first

        Returns:
            ServiceResult with list of User
        """
        if self.demo_mode:
            return self.demo_list("users")

        try:
            rows = await self.db.select(
                "users",
                order_by=[OrderBy("created_at", descending=True)],
                embeds=[USER_ROLE_EMBED]
            )
            users = [USER_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Users fetched successfully", users)

        except Exception as e:
            return self.failure("get_users", e, "Failed to fetch users", data=[])

    async def create_user(
        self,
        user_data: Union[UserCreateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Create an active user with the default initial password

        Args:
            user_data: Email, name, role and jurisdiction details

        Returns:
            ServiceResult with created User (role embedded)
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(user_data, UserCreateRequest)

            values = USER_MAPPER.to_row(request.model_dump(exclude_none=True))
            values["password_hash"] = self.hasher.hash(self.default_password)
            values["is_active"] = True

            logger.info(f"Creating user: {request.email}")
            row = await self.db.insert("users", values, embeds=[USER_ROLE_EMBED])

            return ServiceResult.ok("User created successfully", USER_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("create_user", e, "Failed to create user")

    async def update_user(
        self,
        user_id: str,
        user_data: Union[UserUpdateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Update only the supplied user fields

        Args:
            user_id: Id of the user
            user_data: Partial update

        Returns:
            ServiceResult with updated User (role embedded)
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(user_data, UserUpdateRequest)
            values = USER_MAPPER.to_row(request.model_dump(exclude_unset=True))

            if not values:
                return ServiceResult.fail(
                    "No user fields provided to update",
                    ErrorType.VALIDATION_ERROR
                )

            logger.info(f"Updating user {user_id} with fields: {list(values.keys())}")
            row = await self.db.update_one(
                "users",
                values,
                filters={"id": user_id},
                embeds=[USER_ROLE_EMBED]
            )

            return ServiceResult.ok("User updated successfully", USER_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("update_user", e, "Failed to update user")

    async def delete_user(self, user_id: str) -> ServiceResult:
        """Delete a user"""
        if self.demo_mode:
            return self.not_configured()

        try:
            logger.info(f"Deleting user {user_id}")
            await self.db.delete("users", filters={"id": user_id})
            return ServiceResult.ok("User deleted successfully")

        except Exception as e:
            return self.failure("delete_user", e, "Failed to delete user")
