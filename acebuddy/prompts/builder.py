"""
Request Builder

Turns study selections (country, exam level, subject, topic, question type)
or a free-text homework question into a ``GatewayRequest``: the instruction
text, the model tier, the ordered content parts and, for structured output,
the response schema.

Everything here is pure and network-free. All domain phrasing lives in this
module so the AI gateway stays a narrow integration surface.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from acebuddy.schemas.base import (
    MAX_QUESTIONS,
    MIN_QUESTIONS,
    Country,
    ExamLevel,
    ModelTier,
    QuestionType,
    Subject,
)
from acebuddy.schemas.chat import ImageInput
from acebuddy.utils.model_router import select_tier


# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

QUESTION_GENERATION_PROMPT = """Generate {count} practice questions for a child studying {subject} for the {exam_level} exam in {country}, specifically on the topic of {topic}.
The questions should be appropriate for this age group, subject difficulty, and exam context.
{type_clause}
Return the questions as a JSON array of exactly {count} objects. Each object must have the fields: {fields}.
Do NOT include correct answers or any answer field."""

TYPE_CLAUSES: dict[QuestionType, str] = {
    QuestionType.MULTIPLE_CHOICE: "Generate them as multiple-choice questions with 4 distinct options each.",
    QuestionType.TRUE_FALSE: 'Generate them as True/False questions with the options "True" and "False".',
    QuestionType.SHORT_ANSWER: "Generate them as short-answer questions.",
}

ANSWER_REVIEW_PROMPT = """Review the following practice question and user answer for a {subject} student preparing for {exam_level} in {country}.
Question: "{question}"
User's Answer: "{user_answer}"

Please provide:
1. The correct answer.
2. A clear, child-friendly explanation for the correct answer, considering the {exam_level} level.
3. A boolean indicating if the user's answer is correct (true/false).
Return this as a JSON object with keys: 'correctAnswer', 'explanation', 'isCorrect'."""

STUDY_PLAN_PROMPT = """Create a comprehensive and highly detailed, child-friendly study plan for a student preparing for {exam_level} in {subject} in {country}.{topic_clause}
The plan should include:
- Key topics to cover relevant to this exam and country.
- Suggested activities (e.g., flashcards, practice questions, reading).
- A suggested weekly structure or timeline.
- Tips for effective revision.
- Encouraging words!
Present the plan in an easy-to-read Markdown format."""


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

QUESTION_FIELDS = ("id", "question", "subject", "topic", "examLevel", "country", "type")

OPTIONS_DESCRIPTIONS: dict[QuestionType, str] = {
    QuestionType.MULTIPLE_CHOICE: "An array of 4 distinct answer options for multiple choice questions.",
    QuestionType.TRUE_FALSE: 'An array containing "True" and "False" as options.',
}

REVIEW_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "correctAnswer": {"type": "STRING"},
        "explanation": {"type": "STRING"},
        "isCorrect": {"type": "BOOLEAN"},
    },
    "required": ["correctAnswer", "explanation", "isCorrect"],
}


def question_schema(question_type: QuestionType) -> dict[str, Any]:
    """
    Response schema for a generated question list.

    ``options`` is declared and required only for option-bearing types.
    """
    properties: dict[str, Any] = {name: {"type": "STRING"} for name in QUESTION_FIELDS}
    required = list(QUESTION_FIELDS)

    if question_type.has_options:
        properties["options"] = {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": OPTIONS_DESCRIPTIONS[question_type],
        }
        required.append("options")

    return {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": properties,
            "required": required,
        },
    }


# =============================================================================
# GATEWAY REQUEST
# =============================================================================

class GatewayRequest(BaseModel):
    """Everything the AI gateway needs for one call."""
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(description="Instruction or question text")
    tier: ModelTier = Field(default=ModelTier.FAST)
    image: ImageInput | None = Field(default=None, description="Optional inline image")
    response_schema: dict[str, Any] | None = Field(
        default=None,
        description="Structured output schema; None for free text"
    )

    @property
    def is_multimodal(self) -> bool:
        return self.image is not None

    @property
    def is_structured(self) -> bool:
        return self.response_schema is not None

    def parts(self) -> list[Any]:
        """Ordered content parts: inline image first, then text."""
        parts: list[Any] = []
        if self.image is not None:
            parts.append({"mime_type": self.image.mime_type, "data": self.image.data})
        if self.prompt:
            parts.append(self.prompt)
        return parts


# =============================================================================
# BUILDERS
# =============================================================================

def build_chat_prompt(
    text: str,
    image: ImageInput | None = None,
    tier: ModelTier = ModelTier.FAST,
) -> GatewayRequest:
    """
    Homework chat turn.

    An attached image upgrades the request to the PRO tier regardless of the
    requested tier. Callers must supply text or an image.
    """
    return GatewayRequest(
        prompt=text.strip() if text else "",
        tier=select_tier(tier, multimodal=image is not None),
        image=image,
    )


def build_quick_question_prompt(question: str) -> GatewayRequest:
    """One of the canned homework starters; always plain fast-tier text."""
    return GatewayRequest(prompt=question, tier=ModelTier.FAST)


def build_question_generation_request(
    subject: Subject,
    topic: str,
    exam_level: ExamLevel,
    country: Country,
    question_type: QuestionType,
    count: int = 3,
) -> GatewayRequest:
    if not MIN_QUESTIONS <= count <= MAX_QUESTIONS:
        raise ValueError(
            f"Question count must be between {MIN_QUESTIONS} and {MAX_QUESTIONS}, got {count}"
        )

    fields = list(QUESTION_FIELDS)
    if question_type.has_options:
        fields.append("options")

    prompt = QUESTION_GENERATION_PROMPT.format(
        count=count,
        subject=subject.value,
        exam_level=exam_level.value,
        country=country.value,
        topic=topic,
        type_clause=TYPE_CLAUSES[question_type],
        fields=", ".join(fields),
    )
    schema = question_schema(question_type)
    return GatewayRequest(
        prompt=prompt,
        tier=select_tier(structured=True),
        response_schema=schema,
    )


def build_answer_review_request(
    question: str,
    user_answer: str,
    subject: Subject,
    exam_level: ExamLevel,
    country: Country,
) -> GatewayRequest:
    prompt = ANSWER_REVIEW_PROMPT.format(
        subject=subject.value,
        exam_level=exam_level.value,
        country=country.value,
        question=question,
        user_answer=user_answer,
    )
    return GatewayRequest(
        prompt=prompt,
        tier=select_tier(structured=True),
        response_schema=REVIEW_SCHEMA,
    )


def build_study_plan_request(
    exam_level: ExamLevel,
    subject: Subject,
    country: Country,
    topics: tuple[str, ...] | list[str] = (),
) -> GatewayRequest:
    """Markdown study plan. Plans always go to the PRO tier."""
    topic_clause = ""
    if topics:
        topic_clause = f" The plan should focus on these key topics: {', '.join(topics)}."

    prompt = STUDY_PLAN_PROMPT.format(
        exam_level=exam_level.value,
        subject=subject.value,
        country=country.value,
        topic_clause=topic_clause,
    )
    return GatewayRequest(prompt=prompt, tier=ModelTier.PRO)
