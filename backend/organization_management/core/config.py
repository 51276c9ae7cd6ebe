import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite+aiosqlite:///./organization.db"
    DATABASE_ECHO: bool = False
    DATABASE_CREATE_ALL: bool = True

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
