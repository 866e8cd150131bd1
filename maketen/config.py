"""Engine configuration settings."""
import os
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (MAKETEN_*)."""

    # Board geometry (display units)
    min_tile_size: int = 28
    tile_gap: int = 4
    board_padding: int = 5
    frame_width: int = 8

    # Screen bands taken by the HUD and the item bar
    reserved_top: int = 120
    reserved_bottom: int = 100

    # Fallback screen when the caller gives no display bounds
    default_screen_width: int = 390
    default_screen_height: int = 844

    # Tile counts
    challenge_tile_count: int = 120
    max_tile_count: int = 120
    # Levels up to this one reuse its tile size so early boards stay uniform
    reference_level: int = 35

    # Attempt caps
    max_regeneration_attempts: int = 5
    pair_placement_attempts: int = 100
    adjustment_passes: int = 100
    separation_rounds: int = 50

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MAKETEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator(
        "tile_gap",
        "board_padding",
        "frame_width",
        "reserved_top",
        "reserved_bottom",
    )
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("geometry values must be non-negative")
        return value

    @field_validator(
        "min_tile_size",
        "default_screen_width",
        "default_screen_height",
        "challenge_tile_count",
        "max_tile_count",
        "max_regeneration_attempts",
        "pair_placement_attempts",
        "adjustment_passes",
        "separation_rounds",
    )
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("value must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (rebuilt on every call when DEBUG=true)."""
    global _settings
    if _settings is None or os.getenv("DEBUG", "false").lower() == "true":
        _settings = Settings()
    return _settings
