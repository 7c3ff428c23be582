from esigma.services.base_service import ServiceResult
from esigma.services.auth_service import AuthService
from esigma.services.user_service import UserService
from esigma.services.role_service import RoleService
from esigma.services.survey_service import SurveyService
from esigma.services.question_service import QuestionService
from esigma.services.test_service import TestService
from esigma.services.dashboard_service import DashboardService
from esigma.services.certificate_service import CertificateService
from esigma.services.settings_service import SettingsService

__all__ = [
    "ServiceResult",
    "AuthService",
    "UserService",
    "RoleService",
    "SurveyService",
    "QuestionService",
    "TestService",
    "DashboardService",
    "CertificateService",
    "SettingsService",
]
