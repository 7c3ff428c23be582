"""
Question authoring and upload tests
"""

import pytest

from esigma.database.connection import DatabaseError
from esigma.database.mappers import QUESTION_OPTIONS_EMBED
from esigma.database.query import OrderBy
from esigma.services.base_service import NOT_CONFIGURED_MESSAGE
from esigma.services.question_service import QuestionService


@pytest.fixture
def question_request():
    return {
        "sectionId": "section-1",
        "text": "Which of these is a web browser?",
        "type": "single_choice",
        "complexity": "easy",
        "points": 2,
        "order": 1,
        "options": [
            {"text": "Firefox", "isCorrect": True, "order": 7},
            {"text": "Notepad", "isCorrect": False, "order": 1},
            {"text": "Excel", "order": 3},
        ],
    }


class TestGetQuestions:

    @pytest.mark.asyncio
    async def test_demo_mode(self):
        result = await QuestionService().get_questions("survey-1", "section-1")

        assert result.success is True
        assert result.data == []

    @pytest.mark.asyncio
    async def test_filters_by_section(self, db, question_row):
        db.select.return_value = [question_row]

        result = await QuestionService(db).get_questions("survey-1", "section-1")

        assert result.success is True
        assert result.data[0].correct_answers == ["opt-a"]
        db.select.assert_awaited_once_with(
            "questions",
            filters={"section_id": "section-1"},
            order_by=[OrderBy("question_order")],
            embeds=[QUESTION_OPTIONS_EMBED]
        )

    @pytest.mark.asyncio
    async def test_failure_carries_empty_list(self, db):
        db.select.side_effect = DatabaseError("timeout")

        result = await QuestionService(db).get_questions("survey-1", "section-1")

        assert result.success is False
        assert result.message == "Failed to fetch questions"
        assert result.data == []


class TestCreateQuestion:

    @pytest.mark.asyncio
    async def test_demo_mode(self, question_request):
        result = await QuestionService().create_question(question_request)

        assert result.success is False
        assert result.message == NOT_CONFIGURED_MESSAGE

    @pytest.mark.asyncio
    async def test_options_ordered_by_position(self, db, question_request, question_row):
        db.insert.return_value = {k: v for k, v in question_row.items() if k != "options"}
        db.insert_many.side_effect = lambda table, rows: [
            {**row, "id": f"opt-{index}"} for index, row in enumerate(rows)
        ]

        result = await QuestionService(db).create_question(question_request)

        assert result.success is True
        assert result.message == "Question created successfully"

        db.insert.assert_awaited_once_with("questions", {
            "section_id": "section-1",
            "text": "Which of these is a web browser?",
            "question_type": "single_choice",
            "complexity": "easy",
            "points": 2,
            "explanation": None,
            "question_order": 1,
        })

        table, rows = db.insert_many.call_args.args
        assert table == "question_options"
        assert [row["option_order"] for row in rows] == [1, 2, 3]
        assert [row["text"] for row in rows] == ["Firefox", "Notepad", "Excel"]
        assert all(row["question_id"] == "question-1" for row in rows)

        question = result.data
        assert [option.text for option in question.options] == ["Firefox", "Notepad", "Excel"]
        assert question.correct_answers == ["opt-0"]

    @pytest.mark.asyncio
    async def test_option_failure_leaves_question_row(self, db, question_request, question_row):
        db.insert.return_value = {k: v for k, v in question_row.items() if k != "options"}
        db.insert_many.side_effect = DatabaseError("invalid input")

        result = await QuestionService(db).create_question(question_request)

        assert result.success is False
        assert result.message == "Failed to create question"
        db.insert.assert_awaited_once()
        db.delete.assert_not_awaited()


class TestUploadQuestions:

    @pytest.mark.asyncio
    async def test_upload_writes_nothing(self, db):
        csv_content = "text,type,option1,option2\nWhat is 2+2?,single_choice,3,4\n"

        result = await QuestionService(db).upload_questions(csv_content)

        assert result.success is True
        assert result.message == "CSV upload not implemented - no questions processed"
        assert result.data.questions_added == 0
        assert result.data.questions_skipped == 0
        assert result.data.errors == []
        assert db.method_calls == []
