"""
pytest configuration and fixtures for the service unit suite
The backend is replaced by an AsyncMock shaped like Database.
"""

import pytest
from datetime import datetime, timezone
from typing import Any, Dict
from unittest.mock import AsyncMock

from esigma.database.connection import Database
from esigma.utils.security import PasswordHasher

CREATED_AT = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def db() -> AsyncMock:
    """Backend double; every Database coroutine is an AsyncMock"""
    return AsyncMock(spec=Database)


@pytest.fixture(scope="session")
def hasher() -> PasswordHasher:
    """Lowest bcrypt cost to keep the suite fast"""
    return PasswordHasher(rounds=4)


@pytest.fixture
def role_row() -> Dict[str, Any]:
    return {
        "id": "role-1",
        "name": "Admin",
        "description": "System Administrator",
        "level": 1,
        "is_active": True,
        "menu_access": ["dashboard", "users", "roles"],
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }


@pytest.fixture
def user_row(role_row, hasher) -> Dict[str, Any]:
    return {
        "id": "user-1",
        "email": "admin@esigma.com",
        "name": "System Administrator",
        "role_id": "role-1",
        "role": role_row,
        "jurisdiction": "National",
        "zone": None,
        "region": None,
        "district": None,
        "employee_id": "EMP001",
        "phone_number": "+91-9800000000",
        "password_hash": hasher.hash("s3cret!"),
        "is_active": True,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
    }


@pytest.fixture
def survey_row() -> Dict[str, Any]:
    return {
        "id": "survey-1",
        "title": "Digital Literacy Assessment",
        "description": "Basic digital skills",
        "target_date": "2024-03-31",
        "duration": 30,
        "total_questions": 20,
        "passing_score": 70,
        "max_attempts": 3,
        "is_active": True,
        "created_at": CREATED_AT,
        "updated_at": CREATED_AT,
        "created_by": "user-1",
    }


@pytest.fixture
def question_row() -> Dict[str, Any]:
    return {
        "id": "question-1",
        "section_id": "section-1",
        "text": "Which of these is a web browser?",
        "question_type": "single_choice",
        "complexity": "easy",
        "points": 2,
        "explanation": "Firefox is a browser.",
        "question_order": 1,
        "created_at": CREATED_AT.isoformat(),
        "updated_at": CREATED_AT.isoformat(),
        "options": [
            {"id": "opt-c", "text": "Excel", "is_correct": False, "option_order": 3},
            {"id": "opt-a", "text": "Firefox", "is_correct": True, "option_order": 1},
            {"id": "opt-b", "text": "Notepad", "is_correct": False, "option_order": 2},
        ],
    }


@pytest.fixture
def certificate_row() -> Dict[str, Any]:
    return {
        "id": "cert-1",
        "user_id": "user-1",
        "survey_id": "survey-1",
        "result_id": "result-1",
        "certificate_number": "ESG-2024-0001",
        "issued_at": CREATED_AT,
        "valid_until": None,
        "download_count": 2,
        "certificate_status": "active",
        "user": {
            "id": "user-1",
            "name": "Field Enumerator",
            "email": "enumerator@esigma.com",
            "jurisdiction": "Block A, Central Delhi",
            "password_hash": "not-mapped",
        },
        "survey": {"id": "survey-1", "title": "Digital Literacy Assessment"},
    }
