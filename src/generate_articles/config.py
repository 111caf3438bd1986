"""Configuration for the article generation pipeline."""

from dataclasses import dataclass, field

from dotenv import load_dotenv

from common.config import env_str, split_csv

load_dotenv()

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 5120


@dataclass
class GenerationConfig:
    models: list[str] = field(default_factory=list)
    api_key: str | None = None
    image_search_api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS

    @property
    def has_models(self) -> bool:
        return bool(self.models)

    @classmethod
    def from_env(cls) -> "GenerationConfig":
        """Build the config from OPENROUTER_* and PIXABAY_API_KEY env vars."""
        return cls(
            models=split_csv(env_str("OPENROUTER_MODELS")),
            api_key=env_str("OPENROUTER_API_KEY"),
            image_search_api_key=env_str("PIXABAY_API_KEY"),
            base_url=env_str("OPENROUTER_BASE_URL", DEFAULT_BASE_URL),
        )
