"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_planner.domain.macros import STANDARD_SHARES, MacroShares

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    debug: bool = False
    auto_redistribute: bool = True
    calorie_floor_kcal: int = 100
    off_target_tolerance: float = 0.05
    prescription_tolerance: float = 0.1
    default_large_meals: int = 3
    default_small_meals: int = 2
    large_share_pct: float = 70.0
    small_share_pct: float = 30.0
    macro_shares: str = "30/40/30"
    native_app: bool = False
    suggestion_seed: int | None = None

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_macro_shares(raw: str | None) -> MacroShares:
    """Parse protein/carbs/fat percentages such as ``30/40/30``."""
    if raw is None:
        return STANDARD_SHARES
    cleaned = raw.strip()
    if not cleaned:
        return STANDARD_SHARES
    parts = [chunk.strip() for chunk in cleaned.replace(",", "/").split("/")]
    if len(parts) != 3:  # noqa: PLR2004
        raise ValueError(f"Expected protein/carbs/fat shares, got {raw!r}")
    protein, carbs, fat = (float(part) for part in parts)
    return MacroShares(protein_pct=protein, carbs_pct=carbs, fat_pct=fat)
