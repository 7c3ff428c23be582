"""
Question and option Pydantic models
"""

from typing import List, Optional
from datetime import datetime
from pydantic import Field, computed_field

from esigma.models.base import CamelModel


class Option(CamelModel):
    id: str
    text: str
    is_correct: bool = False


class Question(CamelModel):
    id: str
    section_id: str
    text: str
    type: str
    complexity: Optional[str] = None
    points: int = 1
    explanation: Optional[str] = None
    order: int
    options: List[Option] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def correct_answers(self) -> List[str]:
        """Ids of the options flagged correct"""
        return [option.id for option in self.options if option.is_correct]


class OptionCreateRequest(CamelModel):
    text: str
    is_correct: bool = False
    # Ignored on create: order always follows position in the options list
    order: Optional[int] = None


class QuestionCreateRequest(CamelModel):
    section_id: str
    text: str
    type: str
    complexity: Optional[str] = None
    points: int = 1
    explanation: Optional[str] = None
    order: int
    options: List[OptionCreateRequest] = Field(default_factory=list)


class QuestionUploadResult(CamelModel):
    questions_added: int = 0
    questions_skipped: int = 0
    errors: List[str] = Field(default_factory=list)
