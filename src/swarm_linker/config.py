"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from swarm_linker.models.linker import LinkerConfig, ShareMethod


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    slack_app_token: str = ""
    use_socket_mode: bool = True

    # Swarm / Perforce service account
    p4_user_name: str = ""
    p4_user_ticket: str = ""  # output of `p4 tickets`
    swarm_base_url: str = "https://swarm.p4.eve.games"
    swarm_api_version: str = "v11"

    # Link behavior
    check_url_valid: bool = True
    check_swarm_exists: bool = False
    share_method: ShareMethod = ShareMethod.POST_IN_THREAD
    http_timeout_seconds: float | None = None

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def build_linker_config(settings: Settings) -> LinkerConfig:
    """Derive the immutable linker configuration from application settings."""
    base_url = settings.swarm_base_url.rstrip("/")
    return LinkerConfig(
        url_prefix=f"{base_url}/changes/",
        reviews_api_url=f"{base_url}/api/{settings.swarm_api_version}/reviews",
        check_url_reachable=settings.check_url_valid,
        check_review_exists=settings.check_swarm_exists,
        share_method=settings.share_method,
        p4_user_name=settings.p4_user_name,
        p4_user_ticket=settings.p4_user_ticket,
        http_timeout_seconds=settings.http_timeout_seconds,
    )


@lru_cache
def get_linker_config() -> LinkerConfig:
    """Return the cached linker configuration built from settings."""
    return build_linker_config(get_settings())
