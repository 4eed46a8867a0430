"""Application configuration using Pydantic Settings with YAML support.

Configuration is organised into nested sections loaded from YAML files
(``config/base`` plus ``config/environments/{APP_ENV}``). Secrets such as the
database URL and the Gemini API key only ever come from the environment or a
``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import LayeredYamlSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


def parse_list(v: str | list[str]) -> list[str]:
    """Parse comma-separated string or list into list of strings."""
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    return v


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recifind API"
    version: str = "1.0.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5001


class ApiSettings(BaseModel):
    """API configuration settings."""

    prefix: str = "/api"
    cors_origins: Annotated[list[str], BeforeValidator(parse_list)] = []


class DatabaseSettings(BaseModel):
    """PostgreSQL database configuration settings.

    Ignored in favour of ``DATABASE_URL`` when that secret is set.
    """

    host: str = "localhost"
    port: int = 5432
    name: str = "recifind"
    user: str | None = None
    min_pool_size: int = 1
    max_pool_size: int = 10
    command_timeout: float = 30.0
    ssl: bool = False
    create_schema: bool = True


class GeminiSettings(BaseModel):
    """Gemini generative language API configuration."""

    url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.5-flash"
    timeout: float = 60.0


class LLMSettings(BaseModel):
    """LLM configuration settings."""

    gemini: GeminiSettings = GeminiSettings()


class RedisSettings(BaseModel):
    """Redis connection used by the background worker."""

    host: str = "localhost"
    port: int = 6379
    user: str | None = None
    queue_db: int = 0


class KeepaliveSettings(BaseModel):
    """Keep-alive ping issued by the production cron job."""

    url: str | None = None  # defaults to this service's own health endpoint
    timeout: float = 10.0
    interval_minutes: int = 14


class ArqSettings(BaseModel):
    """ARQ background worker configuration."""

    queue_name: str = "recifind:queue:jobs"
    health_check_key: str = "recifind:queue:health-check"


class RateLimitingSettings(BaseModel):
    """Rate limiting configuration."""

    enabled: bool = True
    ai: str = "20/minute"
    storage_uri: str = "memory://"


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class MetricsSettings(BaseModel):
    """Metrics configuration settings."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration settings."""

    metrics: MetricsSettings = MetricsSettings()


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Priority (highest to lowest): init kwargs, environment variables, ``.env``,
    environment YAML, base YAML, defaults in code. Nested values can be
    overridden from the environment with ``__``, e.g. ``LLM__GEMINI__MODEL``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    database: DatabaseSettings = DatabaseSettings()
    llm: LLMSettings = LLMSettings()
    redis: RedisSettings = RedisSettings()
    keepalive: KeepaliveSettings = KeepaliveSettings()
    arq: ArqSettings = ArqSettings()
    rate_limiting: RateLimitingSettings = RateLimitingSettings()
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    # =========================================================================
    # Secrets (from environment / .env only - never in YAML)
    # =========================================================================
    PORT: int | None = None
    DATABASE_URL: str | None = None
    DATABASE_PASSWORD: str = ""
    GOOGLE_GENERATIVE_AI_API_KEY: str = ""
    REDIS_PASSWORD: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Put YAML files below environment variables and ``.env``."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            LayeredYamlSettingsSource(settings_cls),
            file_secret_settings,
        )

    # =========================================================================
    # Computed Fields
    # =========================================================================

    @property
    def server_port(self) -> int:
        """Listening port; a bare ``PORT`` variable wins over YAML."""
        return self.PORT or self.server.port

    @property
    def database_url(self) -> str:
        """Build the PostgreSQL connection URL.

        ``DATABASE_URL`` is used verbatim when present (hosted Postgres
        providers hand out a single connection string). Otherwise the URL is
        assembled as ``postgresql://[user[:password]@]host:port/database``.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        auth_part = ""
        if self.database.user and self.DATABASE_PASSWORD:
            auth_part = f"{self.database.user}:{self.DATABASE_PASSWORD}@"
        elif self.database.user:
            auth_part = f"{self.database.user}@"

        return (
            f"postgresql://{auth_part}{self.database.host}:"
            f"{self.database.port}/{self.database.name}"
        )

    @property
    def keepalive_url(self) -> str:
        """URL pinged by the keep-alive cron job."""
        if self.keepalive.url:
            return self.keepalive.url
        return f"http://127.0.0.1:{self.server_port}{self.api.prefix}/health"

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Using lru_cache ensures settings are only loaded once,
    improving performance and consistency.
    """
    return Settings()
