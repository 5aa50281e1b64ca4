"""
Response Validation and Normalization

Post-processes model output into typed entities:
1. Question lists: parsed, ``type`` and the requested subject, exam level and
   country forced onto every item, True/False options forced to
   ["True", "False"]
2. Answer reviews: parsed as an object with exactly correctAnswer,
   explanation and isCorrect
3. Free text: passed through, with empty output replaced by a placeholder

The model's echoed values are never trusted for fields we already know.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from acebuddy.errors import ParseError
from acebuddy.schemas.base import TRUE_FALSE_OPTIONS, Country, ExamLevel, QuestionType, Subject
from acebuddy.schemas.practice import AnswerReview, PracticeQuestion

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

CHAT_PLACEHOLDER = "No response generated."
PLAN_PLACEHOLDER = "Could not generate a study plan."

REVIEW_KEYS = frozenset({"correctAnswer", "explanation", "isCorrect"})


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_json(payload: str | bytes | Any) -> Any:
    """
    Decode a JSON payload.

    Already-decoded documents (lists, dicts) are returned unchanged.
    """
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    if not isinstance(payload, str):
        return payload
    try:
        return json.loads(strip_code_fences(payload))
    except json.JSONDecodeError as e:
        logger.error(f"Model returned invalid JSON: {e}")
        raise ParseError(f"AI response was not valid JSON: {e.msg}") from e


def validate_schema(schema_class: type[T], data: Any) -> T:
    """
    Validate data against a Pydantic schema.

    Raises:
        ParseError: If validation fails
    """
    try:
        return schema_class.model_validate(data)
    except ValidationError as e:
        logger.error(
            f"Schema validation failed for {schema_class.__name__}: {e.errors()}"
        )
        raise ParseError(
            f"AI response did not match the expected {schema_class.__name__} shape",
            errors=e.errors(),
        ) from e


def normalize_question_item(
    item: dict[str, Any],
    requested_type: QuestionType,
    known: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """
    Force ``type`` (and True/False options) on one raw question.

    ``known`` maps JSON keys to values the caller already chose (subject,
    examLevel, country); those overwrite whatever the model echoed.
    """
    normalized = dict(item)
    if normalized.get("type") != requested_type.value:
        logger.warning(
            f"Question {item.get('id')!r}: model returned type {item.get('type')!r}, "
            f"forcing {requested_type.value!r}"
        )
    normalized["type"] = requested_type.value

    for key, value in (known or {}).items():
        if normalized.get(key) != value:
            logger.warning(
                f"Question {item.get('id')!r}: model returned {key} "
                f"{item.get(key)!r}, forcing {value!r}"
            )
        normalized[key] = value

    if requested_type == QuestionType.TRUE_FALSE:
        if normalized.get("options") != list(TRUE_FALSE_OPTIONS):
            logger.warning(
                f"Question {item.get('id')!r}: model returned options "
                f"{item.get('options')!r}, forcing {list(TRUE_FALSE_OPTIONS)}"
            )
        normalized["options"] = list(TRUE_FALSE_OPTIONS)
    return normalized


def normalize_questions(
    payload: str | bytes | list[Any],
    requested_type: QuestionType,
    *,
    subject: Subject | None = None,
    exam_level: ExamLevel | None = None,
    country: Country | None = None,
) -> list[PracticeQuestion]:
    """
    Parse a generated question list.

    The requested type is always forced. Subject, exam level and country are
    forced too when given; otherwise the model's echo must name a known value.

    Raises:
        ParseError: If the payload is not a JSON array of valid questions
    """
    data = parse_json(payload)
    if not isinstance(data, list):
        logger.error(f"Expected a JSON array of questions, got {type(data).__name__}")
        raise ParseError("AI response was not a list of questions")

    known = {
        key: value.value
        for key, value in (("subject", subject), ("examLevel", exam_level), ("country", country))
        if value is not None
    }

    questions: list[PracticeQuestion] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ParseError(f"Question {index + 1} in the AI response was not an object")
        questions.append(
            validate_schema(PracticeQuestion, normalize_question_item(item, requested_type, known))
        )
    return questions


def normalize_review(payload: str | bytes | dict[str, Any]) -> AnswerReview:
    """
    Parse an answer review.

    Raises:
        ParseError: If the payload is not an object with exactly the three keys
    """
    data = parse_json(payload)
    if not isinstance(data, dict):
        raise ParseError("AI review was not a JSON object")

    keys = set(data)
    if keys != REVIEW_KEYS:
        missing = sorted(REVIEW_KEYS - keys)
        extra = sorted(keys - REVIEW_KEYS)
        logger.error(f"Review keys mismatch (missing={missing}, extra={extra})")
        raise ParseError(f"AI review had unexpected fields (missing={missing}, extra={extra})")

    if not isinstance(data["isCorrect"], bool):
        raise ParseError("AI review 'isCorrect' was not a boolean")

    return validate_schema(AnswerReview, data)


def normalize_text(text: str | None, placeholder: str = CHAT_PLACEHOLDER) -> str:
    """Pass text through unchanged, replacing empty output with a placeholder."""
    if not text or not text.strip():
        return placeholder
    return text
