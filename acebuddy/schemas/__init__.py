"""
Ace Buddy Schemas Package

Pydantic models and closed vocabularies shared by the catalog, the request
builder, the AI gateway and the feature agents.

Untyped JSON from the model never flows past the validator: it is parsed
into these models at the boundary.
"""

from acebuddy.schemas.base import (
    Country,
    ExamLevel,
    ModelTier,
    QuestionType,
    Sender,
    Subject,
)
from acebuddy.schemas.chat import ChatMessage, ImageInput
from acebuddy.schemas.practice import AnswerReview, PracticeQuestion, PracticeTestResultItem
from acebuddy.schemas.plan import ExamPlan

__all__ = [
    "Country",
    "ExamLevel",
    "ModelTier",
    "QuestionType",
    "Sender",
    "Subject",
    "ChatMessage",
    "ImageInput",
    "AnswerReview",
    "PracticeQuestion",
    "PracticeTestResultItem",
    "ExamPlan",
]
