from pydantic_settings import BaseSettings

from slugger.utils.base62 import PaddingMode


class Settings(BaseSettings):
    # Encoding settings
    SLUG_PADDING: PaddingMode = PaddingMode.VARIABLE  # variable | fixed

    # Logging settings
    LOG_LEVEL: str = "INFO"

    # Uniqueness check settings
    UNIQUENESS_ITERATIONS: int = 1000
    UNIQUENESS_LENGTH: int = 10

    # Read from .env as well as the process environment; unknown keys are ignored
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
