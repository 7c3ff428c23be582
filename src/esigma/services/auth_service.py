"""
Auth service - credential checks against the users table or the demo roster
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from esigma.database.connection import Database
from esigma.database.mappers import USER_MAPPER, USER_ROLE_EMBED
from esigma.models.enums import ErrorType
from esigma.models.user import LoginData
from esigma.services.base_service import BaseService, ServiceResult
from esigma.services.demo_data import DEMO_PASSWORD, find_demo_user
from esigma.utils.security import PasswordHasher, generate_token

logger = logging.getLogger(__name__)


# Same message for unknown, inactive and wrong-password logins
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService(BaseService):
    """Service for login and logout"""

    def __init__(
        self,
        database: Optional[Database] = None,
        hasher: Optional[PasswordHasher] = None,
        token_factory: Callable[[], str] = generate_token
    ):
        super().__init__(database)
        self.hasher = hasher or PasswordHasher()
        self.token_factory = token_factory

    def _invalid_credentials(self) -> ServiceResult:
        return ServiceResult.fail(INVALID_CREDENTIALS_MESSAGE, ErrorType.INVALID_CREDENTIALS)

    async def login(self, email: str, password: str) -> ServiceResult:
        """
        Authenticate a user

        Args:
            email: Login email (exact match)
            password: Plain text password

        Returns:
            ServiceResult with LoginData (user and opaque token)
        """
        logger.info(f"Login attempt for: {email}")

        if self.demo_mode:
            logger.info("Database not configured, using demo login")
            return self.demo_login(email, password)

        try:
            rows = await self.db.select(
                "users",
                filters={"email": email, "is_active": True},
                embeds=[USER_ROLE_EMBED]
            )
            if not rows:
                logger.info("Login rejected: user not found or inactive")
                return self._invalid_credentials()

            row = rows[0]
            if not self.hasher.verify(password, row.get("password_hash")):
                logger.info("Login rejected: invalid password")
                return self._invalid_credentials()

            await self._record_login(row["id"])

            user = USER_MAPPER.to_model(row)
            return ServiceResult.ok(
                "Login successful",
                LoginData(user=user, token=self.token_factory())
            )

        except Exception as e:
            return self.failure("login", e, "Login failed", context={"email": email})

    async def _record_login(self, user_id: str) -> None:
        """Stamp last_login; failures are logged and never fail the login"""
        try:
            await self.db.update(
                "users",
                {"last_login": datetime.now(timezone.utc)},
                filters={"id": user_id}
            )
        except Exception as e:
            logger.warning(f"Failed to update last login for user {user_id}: {e}")

    def demo_login(self, email: str, password: str) -> ServiceResult:
        """Check credentials against the fixed demo roster"""
        user = find_demo_user(email)
        if user is None or password != DEMO_PASSWORD:
            return self._invalid_credentials()

        return ServiceResult.ok(
            "Demo login successful",
            LoginData(user=user, token=self.token_factory())
        )

    async def logout(self) -> ServiceResult:
        """Stateless: there is no server-side session to invalidate"""
        return ServiceResult.ok("Logout successful")
