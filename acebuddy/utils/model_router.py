from acebuddy.config import Settings, get_settings
from acebuddy.schemas.base import ModelTier


def select_tier(
    requested: ModelTier = ModelTier.FAST,
    *,
    multimodal: bool = False,
    structured: bool = False,
) -> ModelTier:
    """
    Pick the model tier for a request.

    Multimodal input and structured (schema) output always use the PRO tier;
    plain text keeps whatever the caller asked for.
    """
    if multimodal or structured:
        return ModelTier.PRO
    return requested


class ModelRouter:
    """
    Maps model tiers to concrete model identifiers for each provider.
    """

    # OpenRouter model IDs; both handle images and JSON output
    OPENROUTER_MODELS = {
        ModelTier.FAST: "google/gemini-2.0-flash-001",
        ModelTier.PRO: "google/gemini-2.5-pro",
    }

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def gemini_model(self, tier: ModelTier | str) -> str:
        """Gemini model name for a tier."""
        if self._coerce(tier) == ModelTier.PRO:
            return self._settings.pro_model
        return self._settings.fast_model

    def openrouter_model(self, tier: ModelTier | str) -> str:
        """OpenRouter model ID for a tier."""
        return self.OPENROUTER_MODELS[self._coerce(tier)]

    @staticmethod
    def _coerce(tier: ModelTier | str) -> ModelTier:
        if isinstance(tier, ModelTier):
            return tier
        try:
            return ModelTier(tier.lower())
        except ValueError:
            raise ValueError(f"Unknown model tier: {tier}")
