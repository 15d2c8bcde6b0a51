"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Editor settings
    HISTORY_LIMIT: int = 100  # Max undo checkpoints per session (0 disables history)
    PASTE_OFFSET: float = 10.0  # Pasted copies are shifted by this in x and y
    SESSION_TIMEOUT_SECONDS: float = 3600.0  # Idle sessions are dropped after this

    model_config = {"env_prefix": "PAGEFORGE_"}


settings = Settings()
