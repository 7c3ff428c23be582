"""
Question service - questions, their options, and bulk upload
"""

import logging
from typing import Any, Dict, Union

from esigma.database.mappers import QUESTION_MAPPER, QUESTION_OPTIONS_EMBED
from esigma.database.query import OrderBy
from esigma.models.question import QuestionCreateRequest, QuestionUploadResult
from esigma.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class QuestionService(BaseService):
    """Service for question authoring operations"""

    async def get_questions(self, survey_id: str, section_id: str) -> ServiceResult:
        """
        List a section's questions in order, each with its ordered options

        Args:
            survey_id: Parent survey id (sections ids are already unique)
            section_id: Section whose questions are listed

        Returns:
            ServiceResult with list of Question
        """
        if self.demo_mode:
            return self.demo_list("questions")

        try:
            logger.info(f"Fetching questions for survey {survey_id}, section {section_id}")
            rows = await self.db.select(
                "questions",
                filters={"section_id": section_id},
                order_by=[OrderBy("question_order")],
                embeds=[QUESTION_OPTIONS_EMBED]
            )
            questions = [QUESTION_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Questions fetched successfully", questions)

        except Exception as e:
            return self.failure("get_questions", e, "Failed to fetch questions", data=[])

    async def create_question(
        self,
        question_data: Union[QuestionCreateRequest, Dict[str, Any]]
    ) -> ServiceResult:
        """
        Create a question and its options

        Two writes: the question row, then all options in one insert with
        option_order 1..n following their position in the request. There is
        no rollback; if the option insert fails the question row remains.

        Args:
            question_data: Question fields plus options

        Returns:
            ServiceResult with created Question including options
        """
        if self.demo_mode:
            return self.not_configured()

        try:
            request = self.coerce(question_data, QuestionCreateRequest)

            values = QUESTION_MAPPER.to_row(request.model_dump(exclude={"options"}))
            logger.info(f"Creating question in section {request.section_id}")
            question_row = await self.db.insert("questions", values)

            option_rows = [
                {
                    "question_id": question_row["id"],
                    "text": option.text,
                    "is_correct": option.is_correct,
                    "option_order": index + 1
                }
                for index, option in enumerate(request.options)
            ]
            inserted_options = await self.db.insert_many("question_options", option_rows)

            question = QUESTION_MAPPER.to_model({**question_row, "options": inserted_options})
            return ServiceResult.ok("Question created successfully", question)

        except Exception as e:
            return self.failure("create_question", e, "Failed to create question")

    async def upload_questions(self, csv_content: str) -> ServiceResult:
        """
        Bulk question upload from CSV

        Not implemented: no rows are parsed and nothing is written. The
        counts in the result are always zero.
        """
        logger.warning(f"CSV question upload is not implemented; ignoring {len(csv_content)} characters")
        return ServiceResult.ok(
            "CSV upload not implemented - no questions processed",
            QuestionUploadResult()
        )
