"""Konfiguracja aplikacji."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ustawienia aplikacji.

    ``database_url`` i ``secret_key`` nie mają wartości domyślnych - brak
    którejkolwiek z nich kończy się ``ValidationError`` przy starcie.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str

    # Application
    app_name: str = "Lista podpisów"
    debug: bool = False
    secret_key: str
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Sesje
    session_ttl_seconds: int = 20
    session_cookie_name: str = "petition_session"
    session_rolling: bool = False
    session_sweep_interval: float = 60.0
    cookie_secure: bool = False

    # Paginacja
    page_limit_default: int = 50
    page_limit_max: int = 500
    public_url: str = ""

    # Repozytorium
    repository_timeout: float = 5.0

    # Hasła
    bcrypt_rounds: int = 12


@lru_cache
def get_settings() -> Settings:
    """Pobierz ustawienia (z cache)."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Ustaw poziom i format logów procesu."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
