"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    url: Optional[str] = Field(None, description="Full connection string, takes precedence over the parts below")
    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("gator", description="Database name")
    user: str = Field("gator", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")


class FetcherConfig(BaseModel):
    """Feed fetch client settings."""

    user_agent: str = Field("gator", description="User-Agent header sent with every request")
    timeout: Optional[float] = Field(None, description="Request timeout in seconds, None waits forever", gt=0)


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    current_user_name: Optional[str] = Field(None, description="Currently logged in user")
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
