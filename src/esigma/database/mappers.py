"""
Bidirectional mapping between backend rows and internal models

Backend rows use flat snake_case columns, some named differently from the
model attribute (``question_order`` -> ``order``) and foreign keys as
``<entity>_id``. Related rows arrive as embedded JSON objects or arrays and
are mapped by nested mappers. Each entity has exactly one mapper here; the
services never translate field names inline.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from esigma.database.query import Embed
from esigma.models.certificate import Certificate, CertificateHolder, CertificateSurvey
from esigma.models.question import Option, Question
from esigma.models.session import TestSession
from esigma.models.settings import SystemSetting
from esigma.models.survey import Section, Survey
from esigma.models.user import Role, User

ModelT = TypeVar("ModelT", bound=BaseModel)


def _normalize(value: Any) -> Any:
    """Backend scalar types the models do not accept directly"""
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Decimal):
        return float(value)
    return value


@dataclass(frozen=True)
class Nested:
    """An embedded related row (or list of rows) mapped by another mapper"""
    mapper: "RowMapper"
    column: str
    many: bool = False
    sort_by: Optional[str] = None


class RowMapper(Generic[ModelT]):
    """Maps one entity between its row shape and its model"""

    def __init__(
        self,
        model: Type[ModelT],
        columns: Dict[str, str],
        nested: Optional[Dict[str, Nested]] = None
    ):
        """
        Args:
            model: Internal model class
            columns: Model attribute -> backend column
            nested: Model attribute -> embedded related rows
        """
        self.model = model
        self.columns = columns
        self.nested = nested or {}

    def _omit_null(self, attr: str, value: Any) -> bool:
        """Nulls for fields with a non-null default fall back to that default"""
        if value is not None:
            return False
        field = self.model.model_fields[attr]
        return not field.is_required() and field.default is not None

    def to_model(self, row: Mapping[str, Any]) -> ModelT:
        """Map a backend row (with any embeds) to the internal model"""
        data: Dict[str, Any] = {}

        for attr, column in self.columns.items():
            if column not in row:
                continue
            value = _normalize(row[column])
            if self._omit_null(attr, value):
                continue
            data[attr] = value

        for attr, nested in self.nested.items():
            value = row.get(nested.column)
            if value is None:
                continue
            if nested.many:
                items = list(value)
                if nested.sort_by:
                    items.sort(key=lambda item: item.get(nested.sort_by) or 0)
                data[attr] = [nested.mapper.to_model(item) for item in items]
            else:
                data[attr] = nested.mapper.to_model(value)

        return self.model.model_validate(data)

    def to_row(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Map model attributes to backend columns

        Args:
            values: Attribute values, typically ``model_dump(exclude_unset=True)``
                of a request model so that only supplied fields are written

        Returns:
            Dict keyed by backend column name

        Raises:
            ValueError: If an attribute has no backend column
        """
        row: Dict[str, Any] = {}
        for attr, value in values.items():
            if attr not in self.columns:
                raise ValueError(f"{self.model.__name__} has no backend column for '{attr}'")
            row[self.columns[attr]] = value
        return row


ROLE_MAPPER: RowMapper[Role] = RowMapper(Role, {
    "id": "id",
    "name": "name",
    "description": "description",
    "level": "level",
    "is_active": "is_active",
    "menu_access": "menu_access",
    "created_at": "created_at",
    "updated_at": "updated_at",
})

USER_MAPPER: RowMapper[User] = RowMapper(
    User,
    {
        "id": "id",
        "email": "email",
        "name": "name",
        "role_id": "role_id",
        "jurisdiction": "jurisdiction",
        "zone": "zone",
        "region": "region",
        "district": "district",
        "employee_id": "employee_id",
        "phone_number": "phone_number",
        "is_active": "is_active",
        "created_at": "created_at",
        "updated_at": "updated_at",
    },
    nested={"role": Nested(ROLE_MAPPER, "role")},
)

SURVEY_MAPPER: RowMapper[Survey] = RowMapper(Survey, {
    "id": "id",
    "title": "title",
    "description": "description",
    "target_date": "target_date",
    "duration": "duration",
    "total_questions": "total_questions",
    "passing_score": "passing_score",
    "max_attempts": "max_attempts",
    "is_active": "is_active",
    "created_at": "created_at",
    "updated_at": "updated_at",
    "created_by": "created_by",
})

SECTION_MAPPER: RowMapper[Section] = RowMapper(Section, {
    "id": "id",
    "survey_id": "survey_id",
    "title": "title",
    "description": "description",
    "questions_count": "questions_count",
    "order": "section_order",
})

OPTION_MAPPER: RowMapper[Option] = RowMapper(Option, {
    "id": "id",
    "text": "text",
    "is_correct": "is_correct",
})

QUESTION_MAPPER: RowMapper[Question] = RowMapper(
    Question,
    {
        "id": "id",
        "section_id": "section_id",
        "text": "text",
        "type": "question_type",
        "complexity": "complexity",
        "points": "points",
        "explanation": "explanation",
        "order": "question_order",
        "created_at": "created_at",
        "updated_at": "updated_at",
    },
    nested={"options": Nested(OPTION_MAPPER, "options", many=True, sort_by="option_order")},
)

TEST_SESSION_MAPPER: RowMapper[TestSession] = RowMapper(TestSession, {
    "id": "id",
    "user_id": "user_id",
    "survey_id": "survey_id",
    "start_time": "start_time",
    "time_remaining": "time_remaining",
    "current_question_index": "current_question_index",
    "status": "session_status",
    "attempt_number": "attempt_number",
})

CERTIFICATE_HOLDER_MAPPER: RowMapper[CertificateHolder] = RowMapper(CertificateHolder, {
    "id": "id",
    "name": "name",
    "email": "email",
    "jurisdiction": "jurisdiction",
})

CERTIFICATE_SURVEY_MAPPER: RowMapper[CertificateSurvey] = RowMapper(CertificateSurvey, {
    "id": "id",
    "title": "title",
})

CERTIFICATE_MAPPER: RowMapper[Certificate] = RowMapper(
    Certificate,
    {
        "id": "id",
        "user_id": "user_id",
        "survey_id": "survey_id",
        "result_id": "result_id",
        "certificate_number": "certificate_number",
        "issued_at": "issued_at",
        "valid_until": "valid_until",
        "download_count": "download_count",
        "status": "certificate_status",
    },
    nested={
        "user": Nested(CERTIFICATE_HOLDER_MAPPER, "user"),
        "survey": Nested(CERTIFICATE_SURVEY_MAPPER, "survey"),
    },
)

SETTING_MAPPER: RowMapper[SystemSetting] = RowMapper(SystemSetting, {
    "id": "id",
    "category": "category",
    "key": "setting_key",
    "value": "setting_value",
    "description": "description",
    "type": "setting_type",
    "is_editable": "is_editable",
    "options": "options",
    "updated_at": "updated_at",
    "updated_by": "updated_by",
})


# Embeds feeding the nested mappers above; names match the Nested columns
USER_ROLE_EMBED = Embed(name="role", table="roles", local_column="role_id")

QUESTION_OPTIONS_EMBED = Embed(
    name="options",
    table="question_options",
    local_column="id",
    foreign_column="question_id",
    many=True,
    order_by="option_order",
)

CERTIFICATE_USER_EMBED = Embed(name="user", table="users", local_column="user_id")

CERTIFICATE_SURVEY_EMBED = Embed(name="survey", table="surveys", local_column="survey_id")
