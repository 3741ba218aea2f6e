# accounts/core/config.py
from os import environ

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


def _default_database_url() -> str:
    return (
        f"postgresql+asyncpg://{environ.get('DB_USER', 'postgres')}:{environ.get('DB_PWD', 'postgres')}"
        f"@{environ.get('DB_HOST', 'localhost')}:{environ.get('DB_PORT', '5432')}/{environ.get('DB_NAME', 'accounts')}"
    )


class Settings(BaseSettings):

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = _default_database_url()
    DB_ECHO: bool = False  # ORM 쿼리 로깅

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 10

    # True: 기존 동작 그대로 (중복 이메일 시 ConflictException 반환, userToAdmin 무동작)
    LEGACY_USER_SERVICE: bool = False

    LOG_LEVEL: str = "INFO"


settings = Settings()
