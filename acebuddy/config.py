"""
Runtime configuration.

Values are resolved in this order:
1. Streamlit secrets (when running under Streamlit Cloud)
2. Environment variables (a local ``.env`` file is loaded first)

The AI credential is read once at startup. A missing credential is a
configuration error, raised when the AI client is built.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_FAST_MODEL = "gemini-2.0-flash"
DEFAULT_PRO_MODEL = "gemini-1.5-pro"


def _read_secret(*names: str) -> str | None:
    """Return the first non-empty value among ``names``."""
    for name in names:
        value = None

        # 1. Try Streamlit secrets first
        try:
            import streamlit as st
            value = st.secrets.get(name)
        except Exception:
            pass  # Not running in Streamlit context

        # 2. Fallback to environment variables
        if not value:
            value = os.getenv(name)

        if value:
            return value.strip()
    return None


@dataclass(frozen=True)
class Settings:
    """Resolved configuration. Immutable once loaded."""
    ai_provider: str = "gemini"
    google_api_key: str | None = None
    openrouter_api_key: str | None = None
    fast_model: str = DEFAULT_FAST_MODEL
    pro_model: str = DEFAULT_PRO_MODEL

    @classmethod
    def load(cls) -> "Settings":
        load_dotenv()
        provider = (_read_secret("AI_PROVIDER") or "gemini").lower()
        return cls(
            ai_provider=provider,
            google_api_key=_read_secret("GOOGLE_API_KEY", "GEMINI_API_KEY", "API_KEY"),
            openrouter_api_key=_read_secret("OPENROUTER_API_KEY"),
            fast_model=_read_secret("GEMINI_FAST_MODEL") or DEFAULT_FAST_MODEL,
            pro_model=_read_secret("GEMINI_PRO_MODEL") or DEFAULT_PRO_MODEL,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or load the process-wide settings."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
        logger.info(f"Loaded settings (provider={_settings.ai_provider})")
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call reloads them."""
    global _settings
    _settings = None
