"""
Test session Pydantic models
"""

import logging
from typing import Any, List, Optional, Union
from datetime import datetime
from pydantic import Field, field_validator

from esigma.models.base import CamelModel
from esigma.models.enums import SessionStatus

logger = logging.getLogger(__name__)


class TestAnswer(CamelModel):
    question_id: str
    selected_options: List[str] = Field(default_factory=list)
    answered_at: Optional[datetime] = None


class TestSession(CamelModel):
    id: str
    user_id: str
    survey_id: str
    start_time: datetime
    time_remaining: int
    current_question_index: int = 0
    answers: List[TestAnswer] = Field(default_factory=list)
    status: Union[SessionStatus, str]
    attempt_number: int = 1

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, value: Any) -> Any:
        """Known states become SessionStatus; anything else passes through"""
        if isinstance(value, SessionStatus):
            return value
        try:
            return SessionStatus(value)
        except ValueError:
            logger.warning(f"Unknown test session status carried through: {value!r}")
            return value
