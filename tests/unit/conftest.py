"""
Shared fixtures for unit tests.

No test touches the network: the AI gateway is replaced by an AsyncMock
whose ``call`` returns canned payloads.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from acebuddy.config import Settings
from acebuddy.curriculum.catalog import build_catalog
from acebuddy.schemas.base import Country, ExamLevel, QuestionType, Subject
from acebuddy.schemas.practice import PracticeQuestion


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ai_provider="gemini",
        google_api_key="fake-google-key",
        openrouter_api_key="fake-openrouter-key",
        fast_model="fast-model",
        pro_model="pro-model",
    )


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def fake_client():
    """Stand-in gateway; set ``fake_client.call.return_value`` / ``side_effect``."""
    client = MagicMock()
    client.call = AsyncMock(return_value="")
    return client


@pytest.fixture
def short_answer_questions() -> list[PracticeQuestion]:
    return [
        PracticeQuestion(
            id=f"q{i}",
            question=f"Question {i}?",
            type=QuestionType.SHORT_ANSWER,
            subject=Subject.MATH,
            topic="Algebra (Advanced)",
            exam_level=ExamLevel.GCSE,
            country=Country.UK,
        )
        for i in (1, 2, 3)
    ]
