"""
Unit tests for the request builder.

Tests verify:
1. Chat requests: image-first part ordering and tier upgrade
2. Question generation: instruction text and schema required fields
3. Answer review and study plan prompts
"""

import pytest

from acebuddy.prompts.builder import (
    REVIEW_SCHEMA,
    build_answer_review_request,
    build_chat_prompt,
    build_question_generation_request,
    build_quick_question_prompt,
    build_study_plan_request,
    question_schema,
)
from acebuddy.schemas.base import Country, ExamLevel, ModelTier, QuestionType, Subject
from acebuddy.schemas.chat import ImageInput

PNG = ImageInput(data=b"\x89PNG fake bytes", mime_type="image/png")


class TestChatPrompt:
    """Tests for build_chat_prompt."""

    def test_image_forces_pro_tier(self) -> None:
        """An image upgrades even an explicit FAST request."""
        request = build_chat_prompt("What is this shape?", image=PNG, tier=ModelTier.FAST)
        assert request.tier == ModelTier.PRO

    def test_no_image_keeps_fast_tier(self) -> None:
        request = build_chat_prompt("What is 7 x 8?", tier=ModelTier.FAST)
        assert request.tier == ModelTier.FAST
        assert request.response_schema is None

    def test_no_image_keeps_requested_pro_tier(self) -> None:
        assert build_chat_prompt("Explain photosynthesis", tier=ModelTier.PRO).tier == ModelTier.PRO

    def test_image_part_comes_first(self) -> None:
        parts = build_chat_prompt("Solve this", image=PNG).parts()
        assert parts[0] == {"mime_type": "image/png", "data": PNG.data}
        assert parts[1] == "Solve this"

    def test_image_only_has_single_part(self) -> None:
        parts = build_chat_prompt("", image=PNG).parts()
        assert len(parts) == 1

    def test_quick_question_is_fast(self) -> None:
        request = build_quick_question_prompt("Essay writing tips")
        assert request.tier == ModelTier.FAST
        assert request.parts() == ["Essay writing tips"]


class TestQuestionGeneration:
    """Tests for build_question_generation_request."""

    def test_multiple_choice_scenario(self) -> None:
        """UK GCSE Mathematics, 5 multiple choice questions."""
        request = build_question_generation_request(
            Subject.MATH,
            "Algebra (Advanced)",
            ExamLevel.GCSE,
            Country.UK,
            QuestionType.MULTIPLE_CHOICE,
            5,
        )
        for fragment in ("5", "GCSE", "Mathematics", "Algebra (Advanced)", "4 distinct options"):
            assert fragment in request.prompt
        assert "options" in request.response_schema["items"]["required"]
        assert request.tier == ModelTier.PRO

    def test_output_contract_forbids_answers(self) -> None:
        request = build_question_generation_request(
            Subject.SCIENCE, "Ecology", ExamLevel.WAEC, Country.NIGERIA,
            QuestionType.SHORT_ANSWER, 3,
        )
        assert "JSON array" in request.prompt
        assert "Do NOT include correct answers" in request.prompt
        assert "short-answer" in request.prompt
        assert "options" not in request.prompt

    def test_true_false_clause(self) -> None:
        request = build_question_generation_request(
            Subject.HISTORY, "US History", ExamLevel.GENERIC_HIGH_SCHOOL, Country.USA,
            QuestionType.TRUE_FALSE, 4,
        )
        assert "True/False" in request.prompt

    def test_count_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            build_question_generation_request(
                Subject.MATH, "Algebra I", ExamLevel.SAT, Country.USA,
                QuestionType.SHORT_ANSWER, 0,
            )


class TestQuestionSchema:
    """Required-field completeness for each question type."""

    BASE_FIELDS = {"id", "question", "subject", "topic", "examLevel", "country", "type"}

    def test_multiple_choice_requires_options(self) -> None:
        schema = question_schema(QuestionType.MULTIPLE_CHOICE)
        assert schema["type"] == "ARRAY"
        assert set(schema["items"]["required"]) == self.BASE_FIELDS | {"options"}

    def test_true_false_requires_options(self) -> None:
        schema = question_schema(QuestionType.TRUE_FALSE)
        assert "options" in schema["items"]["required"]

    def test_short_answer_does_not_require_options(self) -> None:
        schema = question_schema(QuestionType.SHORT_ANSWER)
        assert set(schema["items"]["required"]) == self.BASE_FIELDS
        assert "options" not in schema["items"]["properties"]

    def test_schema_never_has_answer_field(self) -> None:
        for question_type in QuestionType:
            properties = question_schema(question_type)["items"]["properties"]
            assert "correctAnswer" not in properties


class TestAnswerReview:

    def test_review_request(self) -> None:
        request = build_answer_review_request(
            "What is 2 + 2?", "5", Subject.MATH, ExamLevel.PRIMARY, Country.UK
        )
        assert '"What is 2 + 2?"' in request.prompt
        assert '"5"' in request.prompt
        assert "Primary School (UK)" in request.prompt
        assert "child-friendly" in request.prompt
        assert request.response_schema == REVIEW_SCHEMA
        assert request.response_schema["required"] == ["correctAnswer", "explanation", "isCorrect"]
        assert request.tier == ModelTier.PRO


class TestStudyPlan:

    def test_topics_injected(self) -> None:
        request = build_study_plan_request(
            ExamLevel.CBSE, Subject.SCIENCE, Country.INDIA,
            ("CBSE Physics", "CBSE Chemistry"),
        )
        assert "CBSE Physics, CBSE Chemistry" in request.prompt
        assert "Markdown" in request.prompt
        assert "weekly" in request.prompt
        assert request.response_schema is None
        assert request.tier == ModelTier.PRO

    def test_no_topics_clause_when_empty(self) -> None:
        request = build_study_plan_request(ExamLevel.SAT, Subject.MUSIC, Country.USA)
        assert "focus on these key topics" not in request.prompt
        assert "Revision" in request.prompt or "revision" in request.prompt
