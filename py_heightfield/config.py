"""Configuration management."""

import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.heightfield_generator import validate_size

# Load .env for local runs only where values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    for k, v in file_env.items():
        if k not in os.environ and v is not None:
            os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from HEIGHTFIELD_* environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (plain or json)")

    # Generation
    default_size: int = Field(default=513, description="Default grid side, 2^n + 1")
    max_size: int = Field(default=4097, description="Largest grid side accepted by the CLI")
    corner_height: float = Field(default=128, description="Seed value for the four corners")
    initial_variance: float = Field(default=64.0, description="Perturbation bound at level 0")
    roughness: float = Field(default=0.5, description="Variance ratio between levels")
    default_seed: Optional[str] = Field(default=None, description="PRNG seed; time-based when unset")

    model_config = SettingsConfigDict(env_prefix="HEIGHTFIELD_", extra="ignore")

    @field_validator("default_size", "max_size")
    @classmethod
    def _check_size(cls, value: int) -> int:
        return validate_size(value)

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("plain", "json"):
            raise ValueError(f"log_format must be 'plain' or 'json', got {value!r}")
        return value


settings = Settings()
