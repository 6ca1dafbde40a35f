"""
Configuration for the Meeting Sentiment engine.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    CONSOLE = "console"


class ScoringConfig(BaseSettings):
    """Thresholds that map a normalized score to label and intensity."""

    model_config = SettingsConfigDict(env_prefix="SENTIMENT_SCORING_")

    # Label boundaries (exclusive)
    positive_threshold: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Scores above this are positive",
    )
    negative_threshold: float = Field(
        default=-0.1,
        ge=-1.0,
        le=0.0,
        description="Scores below this are negative",
    )

    # Intensity boundaries on |score|
    moderate_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Magnitude at which intensity becomes moderate",
    )
    strong_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Magnitude at which intensity becomes strong",
    )

    @model_validator(mode="after")
    def _check_intensity_order(self) -> "ScoringConfig":
        if self.strong_threshold < self.moderate_threshold:
            raise ValueError("strong_threshold must not be below moderate_threshold")
        return self


class StreamConfig(BaseSettings):
    """Configuration for live sentiment streams."""

    model_config = SettingsConfigDict(env_prefix="SENTIMENT_STREAM_")

    history_size: int = Field(
        default=10,
        ge=1,
        description="Number of recent chunk scores kept for smoothing",
    )
    history_weight: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Weight of the rolling average in the emitted score",
    )


class AnalyticsConfig(BaseSettings):
    """Configuration for post-hoc analytics."""

    model_config = SettingsConfigDict(env_prefix="SENTIMENT_ANALYTICS_")

    shift_threshold: float = Field(
        default=0.5,
        ge=0.0,
        description="Minimum score change reported as a sentiment shift",
    )
    trend_threshold: float = Field(
        default=0.1,
        ge=0.0,
        description="Half-over-half delta that counts as a trend",
    )


class Settings(BaseSettings):
    """Main settings."""

    model_config = SettingsConfigDict(
        env_prefix="SENTIMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="info", description="Log level")
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log renderer: json or console",
    )

    # Sub-configurations
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    stream: StreamConfig = Field(default_factory=StreamConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
