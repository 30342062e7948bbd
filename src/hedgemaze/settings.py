from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "hedgemaze"

ENV_SETTINGS_FILE = "HEDGEMAZE_SETTINGS_FILE"
ENV_LOG_LEVEL = "HEDGEMAZE_LOG_LEVEL"
ENV_LEVELS_DIR = "HEDGEMAZE_LEVELS_DIR"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class MazeSettings(BaseModel):
    """Runtime settings for the maze tools.

    Sources, lowest to highest precedence: field defaults, a TOML file
    (keys top-level or under ``[maze]``), then HEDGEMAZE_* environment
    variables. Use :meth:`from_sources` to resolve all three.
    """

    log_level: str = Field("INFO", description="Root logging level name")
    levels_dir: Optional[Path] = Field(default=None, description="Directory of extra *.txt level sources")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        name = str(v).strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}")
        return name

    @field_validator("levels_dir", mode="before")
    @classmethod
    def expand_levels_dir(cls, v: Any) -> Optional[Path]:
        # Runs before Path coercion, which would turn "" into the cwd
        if v is None or str(v).strip() == "":
            return None
        return Path(v).expanduser()

    # ------------------------ Loading ------------------------
    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        mapping = {
            ENV_LOG_LEVEL: "log_level",
            ENV_LEVELS_DIR: "levels_dir",
        }
        return {field: env[key] for key, field in mapping.items() if env.get(key)}

    @classmethod
    def from_toml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            logger.debug("Settings file not found: %s", path)
            return {}
        try:
            with path.open("rb") as f:
                doc = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.error("Failed to read settings TOML %s: %s", path, exc)
            return {}
        flat: Dict[str, Any] = {k: v for k, v in doc.items() if not isinstance(v, dict)}
        if isinstance(doc.get("maze"), dict):
            flat.update(doc["maze"])
        return flat

    @classmethod
    def discover_config_path(cls, env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
        env = os.environ if env is None else env
        env_path = env.get(ENV_SETTINGS_FILE)
        if env_path:
            return Path(env_path).expanduser().resolve()
        default_path = Path(user_config_dir(APP_NAME)) / "settings.toml"
        if default_path.exists():
            return default_path
        return None

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "MazeSettings":
        data: Dict[str, Any] = {}
        chosen = Path(file_path).expanduser().resolve() if file_path is not None else cls.discover_config_path(env)
        if chosen is not None:
            data.update(cls.from_toml_file(chosen))
        data.update(cls.from_env(env))
        try:
            return cls(**data)
        except ValidationError as exc:
            raise SettingsError(f"Invalid settings: {exc}") from exc
