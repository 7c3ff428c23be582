"""
Enum definitions for the eSigma service layer
"""

from enum import Enum


class SessionStatus(str, Enum):
    """
    Known test session states.

    The backend is the source of truth; values outside this set are carried
    through as plain strings rather than rejected.
    """
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    EXPIRED = "expired"
    ABANDONED = "abandoned"


class CertificateStatus(str, Enum):
    ACTIVE = "active"
    REVOKED = "revoked"


class ActivityType(str, Enum):
    TEST_COMPLETED = "test_completed"
    TEST_STARTED = "test_started"
    USER_CREATED = "user_created"
    SURVEY_CREATED = "survey_created"
    CERTIFICATE_ISSUED = "certificate_issued"


class ErrorType(str, Enum):
    """Failure codes carried by ServiceResult.error_type"""
    NOT_CONFIGURED = "NOT_CONFIGURED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EXECUTION_ERROR = "EXECUTION_ERROR"
