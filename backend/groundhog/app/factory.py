"""Wire logging, storage, leaderboard and engine together from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from groundhog.app.settings import GroundhogSettings
from groundhog.session.engine import GameEngine
from shared.dal.leaderboard_store import LeaderboardStore
from shared.logging import setup_logging
from shared.storage import LocalBlobStorage

if TYPE_CHECKING:
    import random

    from groundhog.logic.settings import GameSettings
    from groundhog.logic.timer import Scheduler
    from shared.storage import BlobStorage

logger = structlog.get_logger()


def create_leaderboard(settings: GroundhogSettings, storage: BlobStorage | None = None) -> LeaderboardStore:
    if storage is None:
        storage = LocalBlobStorage(settings.data_dir)
    return LeaderboardStore(
        storage,
        key=settings.leaderboard_key,
        max_entries=settings.leaderboard_max_entries,
    )


def create_engine(
    settings: GroundhogSettings | None = None,
    *,
    leaderboard: LeaderboardStore | None = None,
    game_settings: GameSettings | None = None,
    scheduler: Scheduler | None = None,
    rng: random.Random | None = None,
    configure_logging: bool = True,
) -> GameEngine:
    """Build a ready-to-start GameEngine.

    When no leaderboard is given, one is created on local blob storage under
    settings.data_dir. Logging is configured unless configure_logging is False.
    """
    if settings is None:  # pragma: no cover
        settings = GroundhogSettings()

    if configure_logging:
        setup_logging(settings.log_dir, level=settings.log_level, log_format=settings.log_format)

    if leaderboard is None:
        leaderboard = create_leaderboard(settings)

    engine = GameEngine(leaderboard, scheduler=scheduler, settings=game_settings, rng=rng)
    logger.info("game engine ready", data_dir=settings.data_dir, scores=len(leaderboard.scores))
    return engine
