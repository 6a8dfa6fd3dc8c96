from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    OMDB_API_KEY: str = Field(
        '', validation_alias=AliasChoices('OMDB_API_KEY', 'OMDBAPI_KEY'))
    OMDB_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
