"""Registry configuration using pydantic settings with structured sections."""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite:///./devices.db", alias="url")
    echo: bool = False
    # Seconds a SQLite connection waits for a competing writer to release its lock.
    busy_timeout: float = Field(default=5.0, gt=0)


class PortSettings(BaseModel):
    prefix: str = Field(default="/dev/ttyUSB", min_length=1)


class RegistrySettings(BaseModel):
    treat_storage_error_as_absent: bool = True


class Settings(BaseSettings):
    """Top-level registry settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DONGLE_REGISTRY_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False

    database: DatabaseSettings = DatabaseSettings()
    ports: PortSettings = PortSettings()
    registry: RegistrySettings = RegistrySettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def port_prefix(self) -> str:
        return self.ports.prefix

    @property
    def sql_echo(self) -> bool:
        return self.database.echo or self.debug


@lru_cache()
def get_settings() -> Settings:
    return Settings()
