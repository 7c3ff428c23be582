"""
Survey and section Pydantic models
"""

from typing import List, Optional
from datetime import date, datetime
from pydantic import Field

from esigma.models.base import CamelModel, PartialUpdate
from esigma.models.question import Question


class Section(CamelModel):
    id: str
    survey_id: str
    title: str
    description: Optional[str] = None
    questions_count: int = 0
    order: int
    # Never auto-loaded; populated only by an explicit question fetch
    questions: List[Question] = Field(default_factory=list)


class Survey(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    target_date: date
    duration: int
    total_questions: int
    passing_score: int
    max_attempts: int
    is_active: bool = True
    sections: List[Section] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    created_by: Optional[str] = None


class SurveyCreateRequest(CamelModel):
    title: str
    description: Optional[str] = None
    target_date: date
    duration: int
    total_questions: int
    passing_score: int
    max_attempts: int
    created_by: Optional[str] = None


class SurveyUpdateRequest(PartialUpdate):
    """Partial update; only fields explicitly supplied are written"""
    non_nullable = frozenset({
        "title", "target_date", "duration", "total_questions",
        "passing_score", "max_attempts", "is_active",
    })

    title: Optional[str] = None
    description: Optional[str] = None
    target_date: Optional[date] = None
    duration: Optional[int] = None
    total_questions: Optional[int] = None
    passing_score: Optional[int] = None
    max_attempts: Optional[int] = None
    is_active: Optional[bool] = None


class SectionCreateRequest(CamelModel):
    title: str
    description: Optional[str] = None
    questions_count: int = 0
    order: int
