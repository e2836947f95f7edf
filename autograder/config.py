from typing import Any, Dict, Literal, Optional

from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    DATABASE_PORT: int = 5432
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_USER: str = "postgres"
    POSTGRES_DB: str = "autograder"
    POSTGRES_HOST: str = "localhost"

    # Overrides the postgres settings above when set (e.g. sqlite for tests)
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return "postgresql://{}:{}@{}:{}/{}".format(
            self.POSTGRES_USER,
            self.POSTGRES_PASSWORD,
            self.POSTGRES_HOST,
            self.DATABASE_PORT,
            self.POSTGRES_DB,
        )


class HookSettings(BaseSettings):
    # "database" installs the native trigger, "orm" registers a mapper listener
    ENROLLMENT_HOOK_MODE: Literal["database", "orm"] = "database"
    SEED_DEFAULT_CLASS: bool = True


class AppSettings(DatabaseSettings, HookSettings):
    class Config:
        env_file = "./.env"
        extra = "allow"


class LogConfig(BaseSettings):
    LOGGER_NAME: str = "autograder"
    LOG_FORMAT: str = "%(levelprefix)s | %(asctime)s | %(name)s | %(message)s"
    LOG_LEVEL: str = "INFO"

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: Dict[str, Any] = {
        "default": {
            "()": "uvicorn.logging.DefaultFormatter",
            "fmt": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: Dict[str, Any] = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    }
    loggers: Dict[str, Any] = {
        LOGGER_NAME: {"handlers": ["default"], "level": LOG_LEVEL},
    }


config = AppSettings()
