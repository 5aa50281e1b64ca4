"""Exam study plan schema."""

from pydantic import BaseModel, ConfigDict, Field

from acebuddy.schemas.base import Country, ExamLevel, Subject


class ExamPlan(BaseModel):
    """A generated study plan. ``plan_details`` is opaque markdown."""
    model_config = ConfigDict(populate_by_name=True)

    country: Country
    exam_level: ExamLevel = Field(alias="examLevel")
    subject: Subject
    plan_details: str = Field(alias="planDetails", description="Markdown study plan")
