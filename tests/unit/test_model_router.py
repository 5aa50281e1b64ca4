"""
Unit tests for model tier selection and routing.
"""

import pytest

from acebuddy.schemas.base import ModelTier
from acebuddy.utils.model_router import ModelRouter, select_tier


class TestSelectTier:
    """Tests for select_tier."""

    def test_plain_text_keeps_request(self) -> None:
        assert select_tier() == ModelTier.FAST
        assert select_tier(ModelTier.PRO) == ModelTier.PRO

    @pytest.mark.parametrize("multimodal, structured", [
        (True, False),
        (False, True),
        (True, True),
    ])
    def test_images_and_schemas_force_pro(self, multimodal, structured) -> None:
        assert select_tier(
            ModelTier.FAST, multimodal=multimodal, structured=structured
        ) == ModelTier.PRO


class TestModelRouter:
    """Tests for ModelRouter."""

    def test_gemini_models_from_settings(self, settings) -> None:
        router = ModelRouter(settings)
        assert router.gemini_model(ModelTier.FAST) == "fast-model"
        assert router.gemini_model(ModelTier.PRO) == "pro-model"

    def test_string_tiers(self, settings) -> None:
        router = ModelRouter(settings)
        assert router.gemini_model("PRO") == "pro-model"
        assert router.openrouter_model("fast") == "google/gemini-2.0-flash-001"

    def test_unknown_tier(self, settings) -> None:
        with pytest.raises(ValueError, match="Unknown model tier"):
            ModelRouter(settings).gemini_model("ultra")
