"""Application settings using Pydantic."""
import math
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skillswap.matching.scoring import (
    CLOSE_RADIUS_KM,
    LOCATION_WEIGHT,
    MAX_RADIUS_KM,
    NEARBY_RADIUS_KM,
    NEUTRAL_LOCATION_SCORE,
    SKILL_WEIGHT,
    ScoringConfig,
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file path",
    )

    # Candidate pool
    pool_file: Optional[Path] = Field(
        default=None,
        description="YAML pool file (defaults to config/sample_pool.yaml)",
    )
    match_display_limit: int = Field(
        default=3,
        ge=1,
        description="How many matches to show by default",
    )
    scoring_engine: str = Field(
        default="weighted",
        description="Scoring engine used by the ranker",
    )

    # Scoring
    skill_weight: float = Field(default=SKILL_WEIGHT, ge=0, le=1)
    location_weight: float = Field(default=LOCATION_WEIGHT, ge=0, le=1)
    close_radius_km: float = Field(default=CLOSE_RADIUS_KM, ge=0)
    nearby_radius_km: float = Field(default=NEARBY_RADIUS_KM, ge=0)
    max_radius_km: float = Field(default=MAX_RADIUS_KM, gt=0)
    neutral_location_score: float = Field(default=NEUTRAL_LOCATION_SCORE, ge=0, le=1)

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @model_validator(mode="after")
    def validate_scoring(self):
        """Ensure the scoring weights sum to 1 and the radii are ordered."""
        if not math.isclose(self.skill_weight + self.location_weight, 1.0):
            raise ValueError("skill_weight and location_weight must sum to 1")
        if not (self.close_radius_km <= self.nearby_radius_km < self.max_radius_km):
            raise ValueError(
                "Distance breakpoints must satisfy "
                "close_radius_km <= nearby_radius_km < max_radius_km"
            )
        return self

    @property
    def pool_path(self) -> Path:
        """Path to the candidate pool file."""
        return self.pool_file or self.config_dir / "sample_pool.yaml"

    def scoring_config(self) -> ScoringConfig:
        """Scoring constants built from these settings."""
        return ScoringConfig(
            skill_weight=self.skill_weight,
            location_weight=self.location_weight,
            close_radius_km=self.close_radius_km,
            nearby_radius_km=self.nearby_radius_km,
            max_radius_km=self.max_radius_km,
            neutral_location_score=self.neutral_location_score,
        )


# Global settings instance
settings = Settings()
