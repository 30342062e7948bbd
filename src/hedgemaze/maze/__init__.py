"""ASCII maze compiler and level registry.

Pipeline: :func:`normalize` -> :func:`validate_shape` -> :func:`compile_grid`
-> :func:`check_reachable`, wrapped by :func:`compile_map`.
"""
from .cells import CellKind, Position, text_row_to_y, y_to_text_row
from .compiler import compile_grid, compile_map, try_compile
from .levels import BUILTIN_LEVELS
from .model import CompiledMap, CompileResult
from .normalizer import normalize
from .placement import PlacementPlan, build_placement_plan
from .reachability import check_reachable, flood_fill, reachable_from
from .registry import LevelRegistry, load_catalog_dir
from .render import render_lines
from .validator import validate_shape

__all__ = [
    "BUILTIN_LEVELS",
    "CellKind",
    "CompileResult",
    "CompiledMap",
    "LevelRegistry",
    "PlacementPlan",
    "Position",
    "build_placement_plan",
    "check_reachable",
    "compile_grid",
    "compile_map",
    "flood_fill",
    "load_catalog_dir",
    "normalize",
    "reachable_from",
    "render_lines",
    "text_row_to_y",
    "try_compile",
    "validate_shape",
    "y_to_text_row",
]
