"""Environment-based configuration.

Every setting can be overridden with a `HEIDI_`-prefixed environment
variable (e.g. `HEIDI_LOG_LEVEL=DEBUG`) or a `.env` file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from heidi.core.domain import DisplayFormat
from heidi.nhs import LotteryConfig

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Logging
    log_level: str = "WARNING"

    # Output format for generated identifiers
    display_format: DisplayFormat = DisplayFormat.COMPACT

    # Lottery
    lottery_max_attempts: int = Field(default=1000, ge=1)
    lottery_seed: Optional[int] = None

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {v!r}"
            )
        return level

    def lottery_config(self) -> LotteryConfig:
        return LotteryConfig(max_attempts=self.lottery_max_attempts)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "HEIDI_",
        "extra": "ignore",
    }
