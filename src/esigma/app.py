"""
Service composition: one backend handle shared by every façade
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Callable, Optional

from esigma.config import settings
from esigma.database.connection import Database
from esigma.services import (
    AuthService,
    CertificateService,
    DashboardService,
    QuestionService,
    RoleService,
    SettingsService,
    SurveyService,
    TestService,
    UserService,
)
from esigma.utils.security import PasswordHasher, generate_token

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Every façade, built around the same database (or None in demo mode)"""
    database: Optional[Database]
    auth: AuthService
    users: UserService
    roles: RoleService
    surveys: SurveyService
    questions: QuestionService
    tests: TestService
    dashboard: DashboardService
    certificates: CertificateService
    settings: SettingsService

    @property
    def demo_mode(self) -> bool:
        return self.database is None


def build_services(
    database: Optional[Database] = None,
    hasher: Optional[PasswordHasher] = None,
    token_factory: Callable[[], str] = generate_token
) -> ServiceContainer:
    """Build the façades; passing no database selects demo mode"""
    hasher = hasher or PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    return ServiceContainer(
        database=database,
        auth=AuthService(database, hasher=hasher, token_factory=token_factory),
        users=UserService(database, hasher=hasher, default_password=settings.DEFAULT_USER_PASSWORD),
        roles=RoleService(database),
        surveys=SurveyService(database),
        questions=QuestionService(database),
        tests=TestService(database),
        dashboard=DashboardService(database),
        certificates=CertificateService(database),
        settings=SettingsService(database),
    )


@asynccontextmanager
async def lifespan(database_url: Optional[str] = None) -> AsyncIterator[ServiceContainer]:
    """
    Connect (when configured), yield the services, and close the pool on exit

    Args:
        database_url: Overrides DATABASE_URL; no URL at all means demo mode
    """
    database_url = database_url or settings.DATABASE_URL
    database: Optional[Database] = None

    if database_url:
        database = await Database.connect(
            database_url,
            min_size=settings.DB_POOL_MIN_SIZE,
            max_size=settings.DB_POOL_MAX_SIZE,
            command_timeout=settings.DB_COMMAND_TIMEOUT
        )
    else:
        logger.warning("No database configured - starting services in demo mode")

    try:
        yield build_services(database)
    finally:
        if database is not None:
            await database.close()
