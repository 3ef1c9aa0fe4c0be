"""Engine settings and configuration."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..domain.services.group_climate_service import MIN_COHORT_SIZE
from ..domain.services.trait_refinement_service import (
    ANSWER_CONFIDENCE_STEP,
    ANSWER_RELIABILITY,
    EVENT_CONFIDENCE_STEP,
    LEARNING_RATE,
)


class Settings(BaseSettings):
    """Engine settings, read from PROFILE_ENGINE_* environment variables."""

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Question catalog; packaged catalog when unset
    question_catalog_path: Optional[str] = None

    # Trait refinement
    learning_rate: float = Field(default=LEARNING_RATE, gt=0.0, le=1.0)
    answer_reliability: float = Field(default=ANSWER_RELIABILITY, ge=0.0, le=1.0)
    answer_confidence_step: float = Field(default=ANSWER_CONFIDENCE_STEP, ge=0.0, le=1.0)
    event_confidence_step: float = Field(default=EVENT_CONFIDENCE_STEP, ge=0.0, le=1.0)

    # Group climate
    min_cohort_size: int = Field(default=MIN_COHORT_SIZE, ge=MIN_COHORT_SIZE)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value}")
        return level

    class Config:
        env_prefix = "PROFILE_ENGINE_"
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
