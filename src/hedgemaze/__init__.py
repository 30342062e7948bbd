"""
hedgemaze package root.

Levels are authored as ASCII art and compiled into typed, validated maps by
:mod:`hedgemaze.maze`. Everything engine-specific (rendering, scene objects,
timers) lives outside this package and only consumes compiled maps.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "maze",
]
