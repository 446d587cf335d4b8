"""Environment-based configuration using pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Library and CLI configuration loaded from CONTIGUITY_* variables."""

    model_config = SettingsConfigDict(env_prefix="CONTIGUITY_")

    balance_alpha: float = Field(default=0.5, ge=0.5, le=1.0)
    validate_intervals: bool = Field(
        default=True,
        description="Reject intervals whose start sorts after their end, both "
        "in dataset records and on insert.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
