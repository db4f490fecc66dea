"""Configuration du moteur de distance."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Cache des résultats (chemin collator uniquement)
    CACHE_MAX_SIZE: int = 10_000

    # Collator
    COLLATOR_ENABLED: bool = True
    COLLATOR_LOCALE: str = "generic"

    # Logs
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
