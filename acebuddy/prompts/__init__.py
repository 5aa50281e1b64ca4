"""
Prompt and response-schema construction for every tutor feature.
"""

from acebuddy.prompts.builder import (
    GatewayRequest,
    build_answer_review_request,
    build_chat_prompt,
    build_question_generation_request,
    build_quick_question_prompt,
    build_study_plan_request,
    question_schema,
)

__all__ = [
    "GatewayRequest",
    "build_answer_review_request",
    "build_chat_prompt",
    "build_question_generation_request",
    "build_quick_question_prompt",
    "build_study_plan_request",
    "question_schema",
]
