"""Centralized game settings for Groundhog - all tunable gameplay constants."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from groundhog.logic.cards import UNIVERSE_SIZE
from groundhog.logic.exceptions import UnsupportedSettingsError


class GameSettings(BaseModel):
    """
    Centralized configuration for all Groundhog game rules.

    All fields have default values matching the standard game.
    """

    model_config = ConfigDict(frozen=True)

    # --- Board ---
    grid_size: int = 4

    # --- Scoring ---
    score_increment: int = 5

    # --- Timing ---
    timed_mode_seconds: float = 120
    card_display_seconds: float = 2.0
    tick_seconds: float = 1.0
    flip_animation_seconds: float = 0.3
    tap_animation_seconds: float = 0.5

    # --- Dynamic Difficulty ---
    initial_min_interval: float = 1.0
    initial_max_interval: float = 3.0
    final_min_interval: float = 0.3
    final_max_interval: float = 1.0
    max_difficulty_score: int = 200

    @property
    def cards_per_grid(self) -> int:
        return self.grid_size * self.grid_size


def validate_settings(settings: GameSettings) -> None:
    """Validate that all settings values are usable by the engine.

    Raises UnsupportedSettingsError listing every problem found.
    """
    errors: list[str] = []

    if settings.grid_size < 1:
        errors.append(f"grid_size={settings.grid_size} must be at least 1")
    elif settings.cards_per_grid > UNIVERSE_SIZE:
        errors.append(f"grid_size={settings.grid_size} needs {settings.cards_per_grid} cards, only {UNIVERSE_SIZE} exist")

    if settings.score_increment < 1:
        errors.append(f"score_increment={settings.score_increment} must be positive")

    durations = {
        "timed_mode_seconds": settings.timed_mode_seconds,
        "card_display_seconds": settings.card_display_seconds,
        "tick_seconds": settings.tick_seconds,
        "flip_animation_seconds": settings.flip_animation_seconds,
        "tap_animation_seconds": settings.tap_animation_seconds,
        "final_min_interval": settings.final_min_interval,
    }
    errors.extend(f"{name}={value} must be positive" for name, value in durations.items() if value <= 0)

    if settings.initial_min_interval > settings.initial_max_interval:
        errors.append("initial_min_interval must not exceed initial_max_interval")
    if settings.final_min_interval > settings.final_max_interval:
        errors.append("final_min_interval must not exceed final_max_interval")
    if settings.final_min_interval > settings.initial_min_interval:
        errors.append("final_min_interval must not exceed initial_min_interval")
    if settings.final_max_interval > settings.initial_max_interval:
        errors.append("final_max_interval must not exceed initial_max_interval")

    if settings.max_difficulty_score <= 0:
        errors.append(f"max_difficulty_score={settings.max_difficulty_score} must be positive")

    if errors:
        raise UnsupportedSettingsError("; ".join(errors))
