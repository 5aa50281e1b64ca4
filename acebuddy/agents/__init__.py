"""
Ace Buddy Agents Package

The feature-level entry points the presentation layer calls:
- Homework helper: chat with optional image
- Practice test: question generation and answer review
- Exam planner: markdown study plans
"""

from acebuddy.agents.homework import ChatSession, HomeworkHelperAgent, run_chat
from acebuddy.agents.planner import ExamPlannerAgent, run_generate_plan
from acebuddy.agents.practice import (
    PracticeTestAgent,
    run_generate_questions,
    run_review_answer,
)

__all__ = [
    # Homework
    "ChatSession",
    "HomeworkHelperAgent",
    "run_chat",
    # Practice
    "PracticeTestAgent",
    "run_generate_questions",
    "run_review_answer",
    # Planner
    "ExamPlannerAgent",
    "run_generate_plan",
]
