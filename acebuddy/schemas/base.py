"""
Base types and constants used across all schemas.

This module defines the closed domain vocabularies (countries, exam levels,
subjects, question types) that key the curriculum catalog and every prompt.
Enum values are the human-readable labels sent to the model verbatim.
"""

from enum import Enum
from typing import Annotated

from pydantic import StringConstraints


# =============================================================================
# ENUMS
# =============================================================================

class Country(str, Enum):
    """Education systems the tutor knows about."""
    UK = "United Kingdom"
    NIGERIA = "Nigeria"
    USA = "United States"
    INDIA = "India"
    GLOBAL = "Global / International"  # Generic international exams


class ExamLevel(str, Enum):
    """
    Qualification or grade tier.

    Flat across all countries: which levels belong to which country is a
    catalog concern, not a type-level one.
    """
    # UK
    GCSE = "GCSE"
    ALEVEL = "A-Level"
    KEYSTAGE3 = "Key Stage 3"
    PRIMARY = "Primary School (UK)"
    # Nigeria
    JUNIOR_WAEC = "Junior WAEC (Nigeria)"
    JUNIOR_NECO = "Junior NECO (Nigeria)"
    WAEC = "WAEC (Nigeria)"
    NECO = "NECO (Nigeria)"
    JAMB = "JAMB (Nigeria)"
    # USA
    SAT = "SAT (USA)"
    ACT = "ACT (USA)"
    AP = "AP Exams (USA)"
    # India
    CBSE = "CBSE (India)"
    ICSE = "ICSE (India)"
    JEE_NEET = "JEE / NEET (India)"
    # Generic
    GENERIC_HIGH_SCHOOL = "Generic High School"
    GENERIC_UNIVERSITY_ENTRANCE = "Generic University Entrance"
    OTHER = "Other"


class Subject(str, Enum):
    """School subjects."""
    MATH = "Mathematics"
    ENGLISH = "English Language/Literature"
    SCIENCE = "Science (Biology, Chemistry, Physics)"
    HISTORY = "History"
    GEOGRAPHY = "Geography"
    COMPUTING = "Computer Science"
    ART = "Art & Design"
    MUSIC = "Music"
    LANGUAGES = "Modern Foreign Languages"
    PSHE = "PSHE"
    BUSINESS = "Business Studies"
    ECONOMICS = "Economics"
    DRAMA = "Drama"
    PE = "Physical Education"
    RELIGION = "Religious Studies"
    CLASSICS = "Classics"
    OTHER = "Other"


class QuestionType(str, Enum):
    """Shape of a generated practice question."""
    MULTIPLE_CHOICE = "Multiple Choice"
    SHORT_ANSWER = "Short Answer"
    TRUE_FALSE = "True/False"

    @property
    def has_options(self) -> bool:
        """Whether questions of this type carry an options list."""
        return self in (QuestionType.MULTIPLE_CHOICE, QuestionType.TRUE_FALSE)


class Sender(str, Enum):
    """Author of a chat message."""
    USER = "user"
    AI = "ai"


class ModelTier(str, Enum):
    """Capability/cost class of the underlying model."""
    FAST = "fast"  # Plain single-turn Q&A
    PRO = "pro"    # Multimodal, structured output, grading, plans


# =============================================================================
# CONSTANTS
# =============================================================================

AI_COMPANION_NAME = "Ace Buddy"

# Options the tutor always presents for True/False questions
TRUE_FALSE_OPTIONS: tuple[str, str] = ("True", "False")

MIN_QUESTIONS = 1
MAX_QUESTIONS = 20

# Upload limit for homework photos
MAX_IMAGE_BYTES = 5 * 1024 * 1024


# =============================================================================
# ANNOTATED TYPES
# =============================================================================

# Non-empty string (surrounding whitespace stripped)
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
