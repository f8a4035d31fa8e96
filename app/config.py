from typing import ClassVar
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "FluxReader"
    DATABASE_URL: str = "sqlite:///./fluxreader.db"
    JWT_SECRET: str = "dev_secret"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60 * 24
    DEFAULT_LANGUAGE: str = "en_US"
    BCRYPT_ROUNDS: int = 12

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
