"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    host: str = "localhost"
    port: int = 5432
    name: str = "credit_ledger"
    user: str = "postgres"
    password: str = "postgres"
    driver: str = "postgresql+asyncpg"
    url: Optional[str] = None
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    bootstrap_on_startup: bool = True

    @property
    def dsn(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class RandomOrgSettings(BaseModel):
    url: str = "https://www.random.org/strings/"
    length: int = Field(default=10, ge=1, le=20)
    timeout: float = 10.0


class LoggingSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    level: str = "INFO"
    json_logs: bool = Field(default=False, alias="json")


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Credit Ledger"
    api_prefix: str = "/api"

    database: DatabaseSettings = DatabaseSettings()
    random_org: RandomOrgSettings = RandomOrgSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.dsn


@lru_cache()
def get_settings() -> Settings:
    return Settings()
