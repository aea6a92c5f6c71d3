from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

import os

# Load .env for local runs only where values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from GMESH_* environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console or json)")

    # Grid Configuration
    default_side_length: int = Field(default=20, description="Side length of the initial grid")
    min_side_length: int = Field(default=5, description="Smallest side length the shell accepts")
    max_side_length: int = Field(default=100, description="Largest side length the shell accepts")
    default_pattern: str = Field(default="triangular", description="Pattern used when none is given")

    # Randomness
    seed: Optional[str] = Field(default=None, description="Seed for uniform patterns and palettes")

    # Output
    output_dir: str = Field(default="./output", description="Directory for rendered previews")

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        if value not in ("console", "json"):
            raise ValueError("log_format must be 'console' or 'json'")
        return value

    def check_side_length(self, side_length: int) -> int:
        """Reject side lengths outside [min_side_length, max_side_length]."""
        if not self.min_side_length <= side_length <= self.max_side_length:
            raise ValueError(
                f"side_length must be between {self.min_side_length} and "
                f"{self.max_side_length}, got {side_length}"
            )
        return side_length

    class Config:
        env_prefix = "GMESH_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
