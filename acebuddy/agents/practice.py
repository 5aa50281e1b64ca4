"""
Practice Test Agent

Generates curriculum-specific practice questions and grades submitted
answers through the AI model.

Rules:
- A test needs a topic and an exam level before anything is sent
- Generated questions always carry the requested type
- Answers are reviewed one at a time, in question order
- The first failed review aborts the whole submission (no partial results)
"""

import logging
from collections.abc import Mapping, Sequence

from acebuddy.curriculum.catalog import CurriculumCatalog, get_catalog
from acebuddy.errors import PreconditionError, ReviewAbortedError, TutorError
from acebuddy.prompts.builder import (
    build_answer_review_request,
    build_question_generation_request,
)
from acebuddy.schemas.base import (
    MAX_QUESTIONS,
    MIN_QUESTIONS,
    Country,
    ExamLevel,
    QuestionType,
    Subject,
)
from acebuddy.schemas.practice import AnswerReview, PracticeQuestion, PracticeTestResultItem
from acebuddy.utils.gemini_client import AIClient, get_gemini_client
from acebuddy.utils.validation import normalize_questions, normalize_review

logger = logging.getLogger(__name__)

GENERATE_LEAD = "Failed to generate practice questions."
REVIEW_LEAD = "Failed to review answer."


class PracticeTestAgent:
    """Practice test generation and grading."""

    def __init__(
        self,
        gemini_client: AIClient | None = None,
        catalog: CurriculumCatalog | None = None,
    ) -> None:
        self._client = gemini_client or get_gemini_client()
        self._catalog = catalog or get_catalog()

    async def generate_questions(
        self,
        subject: Subject,
        topic: str,
        exam_level: ExamLevel | None,
        country: Country,
        question_type: QuestionType,
        count: int = 3,
    ) -> list[PracticeQuestion]:
        """
        Generate a practice test.

        Raises:
            PreconditionError: If topic or exam level is missing, or count is out of range
            TransportError: If the AI call fails
            ParseError: If the AI returns a malformed question list
        """
        if not topic or not topic.strip():
            raise PreconditionError("Please select a topic.")
        if exam_level is None:
            raise PreconditionError("Please select an exam level.")
        if not MIN_QUESTIONS <= count <= MAX_QUESTIONS:
            raise PreconditionError(
                f"Please choose between {MIN_QUESTIONS} and {MAX_QUESTIONS} questions."
            )
        if not self._catalog.is_valid_exam_level(country, exam_level):
            logger.warning(
                f"Exam level {exam_level.value!r} is not offered in {country.value!r}"
            )

        request = build_question_generation_request(
            subject, topic, exam_level, country, question_type, count
        )
        payload = await self._client.call(request, lead=GENERATE_LEAD)
        questions = normalize_questions(
            payload, question_type, subject=subject, exam_level=exam_level, country=country
        )

        if len(questions) != count:
            logger.warning(f"Requested {count} questions, model returned {len(questions)}")
        logger.info(
            f"Generated {len(questions)} {question_type.value} questions "
            f"({subject.value} / {topic})"
        )
        return questions

    async def review_answer(
        self,
        question: str,
        user_answer: str,
        subject: Subject,
        exam_level: ExamLevel,
        country: Country,
    ) -> AnswerReview:
        """
        Have the model grade a single answer.

        Raises:
            TransportError: If the AI call fails
            ParseError: If the review is malformed
        """
        request = build_answer_review_request(
            question, user_answer, subject, exam_level, country
        )
        payload = await self._client.call(request, lead=REVIEW_LEAD)
        return normalize_review(payload)

    async def submit_test(
        self,
        questions: Sequence[PracticeQuestion],
        answers: Mapping[str, str],
        subject: Subject,
        exam_level: ExamLevel,
        country: Country,
    ) -> list[PracticeTestResultItem]:
        """
        Grade a whole test, one question at a time.

        Unanswered questions are reviewed with an empty answer.

        Raises:
            ReviewAbortedError: On the first failed review; nothing is returned
        """
        results: list[PracticeTestResultItem] = []

        for question in questions:
            user_answer = answers.get(question.id, "")
            try:
                review = await self.review_answer(
                    question.question, user_answer, subject, exam_level, country
                )
            except TutorError as e:
                logger.error(
                    f"Review failed for question {question.id} "
                    f"after {len(results)} of {len(questions)}; discarding submission"
                )
                raise ReviewAbortedError(question.id, e) from e
            results.append(PracticeTestResultItem.from_review(question, user_answer, review))

        correct = sum(1 for r in results if r.is_correct)
        logger.info(f"Reviewed test: {correct}/{len(results)} correct")
        return results


async def run_generate_questions(
    subject: Subject,
    topic: str,
    exam_level: ExamLevel | None,
    country: Country,
    question_type: QuestionType,
    count: int = 3,
) -> list[PracticeQuestion]:
    """Convenience function to generate a practice test."""
    agent = PracticeTestAgent()
    return await agent.generate_questions(
        subject, topic, exam_level, country, question_type, count
    )


async def run_review_answer(
    question: str,
    user_answer: str,
    subject: Subject,
    exam_level: ExamLevel,
    country: Country,
) -> AnswerReview:
    """Convenience function to review one answer."""
    agent = PracticeTestAgent()
    return await agent.review_answer(question, user_answer, subject, exam_level, country)
