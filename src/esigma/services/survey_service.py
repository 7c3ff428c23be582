"""
Survey service - surveys and their sections
"""

import logging
from typing import Any, Dict, Union

from esigma.database.mappers import SECTION_MAPPER, SURVEY_MAPPER
from esigma.database.query import OrderBy
from esigma.models.enums import ErrorType
from esigma.models.survey import SectionCreateRequest, SurveyCreateRequest, SurveyUpdateRequest
from esigma.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class SurveyService(BaseService):
    """
    Service for survey authoring operations

    Surveys are always returned with an empty sections list; sections are
    only loaded through get_survey_sections.
    """

    async def get_surveys(self) -> ServiceResult:
        """List surveys, newest first"""
        if self.demo_mode:
            return self.demo_list("surveys")

        try:
            rows = await self.db.select(
                "surveys",
                order_by=[OrderBy("created_at", descending=True)]
            )
            surveys = [SURVEY_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Surveys fetched successfully", surveys)

        except Exception as e:
            return self.failure("get_surveys", e, "Failed to fetch surveys", data=[])

    async def create_survey(
        self,
        survey_data: Union[SurveyCreateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Create an active survey

        Args:
            survey_data: Title, schedule and scoring rules

        Returns:
            ServiceResult with created Survey
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(survey_data, SurveyCreateRequest)
            values = SURVEY_MAPPER.to_row({**request.model_dump(), "is_active": True})

            logger.info(f"Creating survey: {request.title}")
            row = await self.db.insert("surveys", values)

            return ServiceResult.ok("Survey created successfully", SURVEY_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("create_survey", e, "Failed to create survey")

    async def update_survey(
        self,
        survey_id: str,
        survey_data: Union[SurveyUpdateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Update only the supplied survey fields

        Args:
            survey_id: Id of the survey
            survey_data: Partial update; ``is_active=False`` deactivates

        Returns:
            ServiceResult with updated Survey
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(survey_data, SurveyUpdateRequest)
            values = SURVEY_MAPPER.to_row(request.model_dump(exclude_unset=True))

            if not values:
                return ServiceResult.fail(
                    "No survey fields provided to update",
                    ErrorType.VALIDATION_ERROR
                )

            logger.info(f"Updating survey {survey_id} with fields: {list(values.keys())}")
            row = await self.db.update_one("surveys", values, filters={"id": survey_id})

            return ServiceResult.ok("Survey updated successfully", SURVEY_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("update_survey", e, "Failed to update survey")

    async def delete_survey(self, survey_id: str) -> ServiceResult:
        """Delete a survey"""
        if self.demo_mode:
            return self.not_configured()

        try:
            logger.info(f"Deleting survey {survey_id}")
            await self.db.delete("surveys", filters={"id": survey_id})
            return ServiceResult.ok("Survey deleted successfully")

        except Exception as e:
            return self.failure("delete_survey", e, "Failed to delete survey")

    async def get_survey_sections(self, survey_id: str) -> ServiceResult:
        """List a survey's sections in order; questions are not loaded"""
        if self.demo_mode:
            return self.demo_list("sections")

        try:
            rows = await self.db.select(
                "survey_sections",
                filters={"survey_id": survey_id},
                order_by=[OrderBy("section_order")]
            )
            sections = [SECTION_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Sections fetched successfully", sections)

        except Exception as e:
            return self.failure("get_survey_sections", e, "Failed to fetch sections", data=[])

    async def create_section(
        self,
        survey_id: str,
        section_data: Union[SectionCreateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Add a section to a survey

        Args:
            survey_id: Parent survey id
            section_data: Title, description, question count and order

        Returns:
            ServiceResult with created Section
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(section_data, SectionCreateRequest)
            values = SECTION_MAPPER.to_row({**request.model_dump(), "survey_id": survey_id})

            logger.info(f"Creating section '{request.title}' in survey {survey_id}")
            row = await self.db.insert("survey_sections", values)

            return ServiceResult.ok("Section created successfully", SECTION_MAPPER.to_model(row))

        except Exception as e:
            return self.failure("create_section", e, "Failed to create section")
