"""Library settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if loaded with ``Settings.from_yaml``)
  2. Environment variables (SEARCHMODEL_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class OpenSearchSettings(BaseModel):
    """Connection settings for the default OpenSearch client."""

    hosts: list[str] = Field(default_factory=lambda: ["http://localhost:9200"], description="Node URLs")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    timeout: int = Field(default=10, description="Per-request timeout in seconds, enforced by the client")
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra keyword arguments for OpenSearch()")

    @field_validator("hosts", mode="before")
    @classmethod
    def _parse_hosts(cls, v: Any) -> list[str]:
        """Parse hosts from JSON string (env var) or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(h) for h in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            # Single host as plain string
            return [v] if v else []
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SEARCHMODEL_ prefix.
    Nested settings use double underscores.

    Example:
        SEARCHMODEL_OPENSEARCH__HOSTS='["https://search-1:9200", "https://search-2:9200"]'
        SEARCHMODEL_OPENSEARCH__USERNAME=admin
        SEARCHMODEL_OBSERVABILITY__LOG_LEVEL=debug
    """

    model_config = {
        "env_prefix": "SEARCHMODEL_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    opensearch: OpenSearchSettings = Field(default_factory=OpenSearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Sections missing from the file fall back to environment variables
        and then to defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
