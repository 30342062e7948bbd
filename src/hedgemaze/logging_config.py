import logging
import os
from typing import Optional

ENV_LOG_LEVEL = "HEDGEMAZE_LOG_LEVEL"


def configure_logging(default_level: int = logging.INFO, level_name: Optional[str] = None) -> None:
    """Configure the root logger for the ``hedgemaze`` command.

    ``level_name`` is the level already resolved by the CLI from ``-v`` flags
    and :class:`~hedgemaze.settings.MazeSettings`, so a settings file can set
    it too. Only when it is empty does HEDGEMAZE_LOG_LEVEL get read directly.
    Unknown names fall back to ``default_level`` instead of raising.
    """
    level_name = level_name or os.getenv(ENV_LOG_LEVEL)
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
