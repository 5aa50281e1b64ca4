"""
Ace Buddy

Curriculum-aware homework help, practice tests and study plans backed by
the Gemini API.
"""

__version__ = "0.1.0"
