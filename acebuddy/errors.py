"""
Tutor Errors

Uniform failure types surfaced to the presentation layer. Every error
carries a ``user_message`` that is safe to show inline next to the action
that triggered it.
"""

from typing import Any

SUPPORT_SUFFIX = "Please try again. If the issue persists, contact support."

# Longest diagnostic carried from an underlying exception
MAX_DIAGNOSTIC_CHARS = 200


def short_diagnostic(error: BaseException | None) -> str:
    """First line of an exception message, truncated."""
    if error is None:
        return "Unknown error"
    text = str(error).strip()
    if not text:
        return type(error).__name__
    first_line = text.splitlines()[0]
    if len(first_line) > MAX_DIAGNOSTIC_CHARS:
        first_line = first_line[: MAX_DIAGNOSTIC_CHARS - 3] + "..."
    return first_line


class TutorError(Exception):
    """Base class for every failure the core reports."""

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class ConfigurationError(TutorError):
    """
    Raised when the AI credential is missing or invalid.
    Fatal until the configuration is corrected; never retried.
    """


class TransportError(TutorError):
    """Raised when the AI service call itself fails."""

    def __init__(self, lead: str, cause: BaseException | None = None) -> None:
        self.diagnostic = short_diagnostic(cause)
        super().__init__(f"{lead} {SUPPORT_SUFFIX} ({self.diagnostic})")


class ParseError(TutorError):
    """Raised when the AI payload does not match the expected shape."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class PreconditionError(TutorError):
    """Raised before any network call when required input is missing."""


class ReviewAbortedError(TutorError):
    """
    Raised when one review in a test submission fails.
    The whole submission is discarded; no partial results exist.
    """

    def __init__(self, question_id: str, cause: TutorError) -> None:
        super().__init__(
            f"Failed to review answer for question {question_id}: {cause.user_message}"
        )
        self.question_id = question_id
