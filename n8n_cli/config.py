"""
CLI Configuration — Connection settings for the n8n instance.

Settings come from `N8N_*` environment variables or a local `.env` file:
  - N8N_API_KEY: Public API key created in the n8n UI
  - N8N_INSTANCE_URL: Base URL of the instance (without /api/v1)
  - N8N_LOG_LEVEL / N8N_TIMEOUT: Logging and HTTP behaviour
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from n8n_cli.errors import ConfigurationError


class CLISettings(BaseSettings):
    """Settings shared by every subcommand. Flags override them per run."""

    model_config = SettingsConfigDict(
        env_prefix="N8N_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Instance ─────────────────────────────────────────────────────
    api_key: str = ""
    instance_url: str = "http://localhost:5678"

    # ── Behaviour ────────────────────────────────────────────────────
    log_level: str = "WARNING"
    timeout: float = 30.0

    def require_api_key(self) -> str:
        """Return the API key or fail with a hint on how to set it."""
        if not self.api_key:
            raise ConfigurationError(
                "n8n API key is not set (export N8N_API_KEY or pass --api-key)",
                detail="api_key",
            )
        return self.api_key


@lru_cache
def get_settings() -> CLISettings:
    """Singleton accessor — parsed once, cached forever."""
    return CLISettings()
