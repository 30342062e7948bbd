from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..errors import MapError, UnknownLevelName
from .compiler import compile_map
from .levels import BUILTIN_LEVELS
from .model import CompiledMap

logger = logging.getLogger(__name__)


class LevelRegistry:
    """Catalog of named levels, compiled once at construction.

    Build one at application start and hand it to whatever needs level
    lookups. Entries that fail to compile are logged and left out, so one
    malformed level never blocks the rest; looking such a name up later
    raises :class:`UnknownLevelName`. The registry is never mutated after
    ``__init__`` returns, so concurrent readers need no locking.
    """

    __slots__ = ("_sources", "_maps", "_failures")

    def __init__(self, catalog: Mapping[str, str]) -> None:
        sources: Dict[str, str] = {}
        maps: Dict[str, CompiledMap] = {}
        failures: Dict[str, MapError] = {}
        for name, text in catalog.items():
            try:
                maps[name] = compile_map(text)
            except MapError as exc:
                logger.warning("Failed to parse level '%s': %s", name, exc)
                failures[name] = exc
                continue
            sources[name] = text
            logger.debug("Registered level '%s' (%dx%d)", name, maps[name].width, maps[name].height)
        self._sources: Mapping[str, str] = MappingProxyType(sources)
        self._maps: Mapping[str, CompiledMap] = MappingProxyType(maps)
        self._failures: Mapping[str, MapError] = MappingProxyType(failures)
        logger.info("Level registry ready: %d level(s), %d failure(s)", len(maps), len(failures))

    @classmethod
    def with_builtins(cls, extra: Optional[Mapping[str, str]] = None) -> "LevelRegistry":
        """Build a registry from the built-in catalog plus ``extra`` (which wins on name clashes)."""
        catalog: Dict[str, str] = dict(BUILTIN_LEVELS)
        if extra:
            catalog.update(extra)
        return cls(catalog)

    @property
    def failures(self) -> Mapping[str, MapError]:
        return self._failures

    def get_by_name(self, name: str) -> CompiledMap:
        try:
            return self._maps[name]
        except KeyError:
            raise UnknownLevelName(name, self.list_level_names()) from None

    def source_of(self, name: str) -> str:
        """Return the raw source text of a registered level."""
        try:
            return self._sources[name]
        except KeyError:
            raise UnknownLevelName(name, self.list_level_names()) from None

    def list_level_names(self) -> Tuple[str, ...]:
        return tuple(self._maps.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._maps

    def __len__(self) -> int:
        return len(self._maps)

    def __repr__(self) -> str:
        return f"LevelRegistry(levels={list(self._maps)!r})"


def load_catalog_dir(path: Path) -> Dict[str, str]:
    """Read every ``*.txt`` file in ``path`` into a name -> source mapping.

    Names are file stems; entries are ordered by name so the resulting
    registry order does not depend on the filesystem. A file that is not
    valid UTF-8 is logged and left out, like a level that fails to compile.
    """
    if not path.is_dir():
        raise FileNotFoundError(f"Levels directory not found: {path}")
    catalog: Dict[str, str] = {}
    for entry in sorted(path.glob("*.txt"), key=lambda p: p.stem):
        try:
            catalog[entry.stem] = entry.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Skipping level source %s: not valid UTF-8 (%s)", entry, exc)
            continue
        logger.debug("Loaded level source '%s' from %s", entry.stem, entry)
    return catalog
