"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable through DOCSTORE_* environment variables
    - get_settings() is cached (lru_cache) — single instance per process
    - default_doc_strategy and strategy_overrides only name strategies; the Store
      resolves them and fails loudly on unknown names

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for everything: a bare Store works out-of-the-box
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Docstore settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_", env_file=".env", case_sensitive=False,
    )

    # Document construction
    default_doc_strategy: str = "local"
    strategy_overrides: dict[str, str] = {}  # collection name -> strategy

    @field_validator("default_doc_strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("strategy_overrides")
    @classmethod
    def normalize_overrides(cls, v: dict[str, str]) -> dict[str, str]:
        return {name: strategy.strip().lower() for name, strategy in v.items()}

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
