"""
Exam Planner Agent

Produces a markdown study plan for an exam, seeded with the catalog's
topics for the chosen (country, exam level, subject).
"""

import logging
from collections.abc import Sequence

from acebuddy.curriculum.catalog import CurriculumCatalog, get_catalog
from acebuddy.prompts.builder import build_study_plan_request
from acebuddy.schemas.base import Country, ExamLevel, Subject
from acebuddy.schemas.plan import ExamPlan
from acebuddy.utils.gemini_client import AIClient, get_gemini_client
from acebuddy.utils.validation import PLAN_PLACEHOLDER, normalize_text

logger = logging.getLogger(__name__)

PLAN_LEAD = "Failed to generate study plan."


class ExamPlannerAgent:
    """Study plan generation."""

    def __init__(
        self,
        gemini_client: AIClient | None = None,
        catalog: CurriculumCatalog | None = None,
    ) -> None:
        self._client = gemini_client or get_gemini_client()
        self._catalog = catalog or get_catalog()

    async def generate_plan(
        self,
        exam_level: ExamLevel,
        subject: Subject,
        country: Country,
        topics: Sequence[str] | None = None,
    ) -> ExamPlan:
        """
        Generate a study plan.

        Args:
            topics: Topics to focus on; the catalog's topics when omitted

        Raises:
            TransportError: If the AI call fails
        """
        if topics is None:
            topics = self._catalog.topics_for(country, exam_level, subject)

        request = build_study_plan_request(exam_level, subject, country, tuple(topics))
        text = await self._client.call(request, lead=PLAN_LEAD)

        logger.info(
            f"Generated study plan for {exam_level.value} {subject.value} "
            f"({len(topics)} focus topics)"
        )
        return ExamPlan(
            country=country,
            exam_level=exam_level,
            subject=subject,
            plan_details=normalize_text(text, PLAN_PLACEHOLDER),
        )


async def run_generate_plan(
    exam_level: ExamLevel,
    subject: Subject,
    country: Country,
    topics: Sequence[str] | None = None,
) -> ExamPlan:
    """Convenience function to generate a study plan."""
    agent = ExamPlannerAgent()
    return await agent.generate_plan(exam_level, subject, country, topics)
