"""
Practice Test Schemas

Data contracts for generated practice questions, per-answer reviews and the
graded result rows of a submitted test.

Rules:
- Multiple choice questions carry exactly 4 distinct options
- True/False questions carry exactly ["True", "False"]
- Short answer questions carry no options
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from acebuddy.schemas.base import (
    TRUE_FALSE_OPTIONS,
    Country,
    ExamLevel,
    NonEmptyStr,
    QuestionType,
    Subject,
)


class PracticeQuestion(BaseModel):
    """
    A single generated question.

    Field aliases match the JSON keys requested from the model.
    Correct answers are never part of a question.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: NonEmptyStr = Field(description="Question identifier, unique within a test")
    question: NonEmptyStr = Field(description="Question text")
    type: QuestionType = Field(description="Question type")
    options: list[str] | None = Field(
        default=None,
        description="Answer options for multiple choice and true/false"
    )
    subject: Subject = Field(description="Subject the question belongs to")
    topic: NonEmptyStr = Field(description="Curriculum topic")
    exam_level: ExamLevel | None = Field(default=None, alias="examLevel")
    country: Country | None = Field(default=None)

    @model_validator(mode="after")
    def validate_options_shape(self) -> "PracticeQuestion":
        """Options must match what the question type requires."""
        if self.type == QuestionType.MULTIPLE_CHOICE:
            if not self.options or len(self.options) != 4:
                raise ValueError(
                    f"Multiple choice question {self.id} needs 4 options, "
                    f"got {len(self.options or [])}"
                )
            if len(set(self.options)) != 4:
                raise ValueError(f"Multiple choice question {self.id} has duplicate options")
        elif self.type == QuestionType.TRUE_FALSE:
            if tuple(self.options or ()) != TRUE_FALSE_OPTIONS:
                raise ValueError(
                    f"True/False question {self.id} must offer exactly {list(TRUE_FALSE_OPTIONS)}"
                )
        else:
            self.options = None
        return self


class AnswerReview(BaseModel):
    """The model's verdict on one answer."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    correct_answer: str = Field(alias="correctAnswer")
    explanation: str = Field(description="Child-friendly explanation")
    is_correct: bool = Field(alias="isCorrect")


class PracticeTestResultItem(BaseModel):
    """One graded row of a submitted test."""
    model_config = ConfigDict(populate_by_name=True)

    question_id: str = Field(alias="questionId")
    question: str
    user_answer: str = Field(alias="userAnswer")
    correct_answer: str = Field(alias="correctAnswer")
    explanation: str
    is_correct: bool = Field(alias="isCorrect")

    @classmethod
    def from_review(
        cls,
        question: PracticeQuestion,
        user_answer: str,
        review: AnswerReview,
    ) -> "PracticeTestResultItem":
        return cls(
            question_id=question.id,
            question=question.question,
            user_answer=user_answer,
            correct_answer=review.correct_answer,
            explanation=review.explanation,
            is_correct=review.is_correct,
        )
