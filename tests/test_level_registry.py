import logging
from pathlib import Path

import pytest

from hedgemaze.errors import NoEndPosition, UnknownLevelName
from hedgemaze.maze import (
    BUILTIN_LEVELS,
    LevelRegistry,
    Position,
    compile_map,
    load_catalog_dir,
    normalize,
    render_lines,
)


def test_all_builtin_levels_compile():
    for name, source in BUILTIN_LEVELS.items():
        m = compile_map(source)
        assert m.end_positions, name
        assert m.pickup_count == 1, name


def test_builtin_catalog_names_in_order(builtin_registry):
    registry = builtin_registry
    assert registry.list_level_names() == ("Level0", "Level1", "Level2", "Level3", "Level4")
    assert registry.failures == {}
    assert len(registry) == 5


def test_level0_layout():
    m = LevelRegistry.with_builtins().get_by_name("Level0")
    assert (m.width, m.height) == (8, 9)
    assert m.start_position == Position(6, 1)
    assert m.end_positions == {Position(1, 7)}
    assert m.pickup_positions == {Position(6, 4)}


def test_get_by_name_returns_same_instance(builtin_registry):
    registry = builtin_registry
    assert registry.get_by_name("Level2") is registry.get_by_name("Level2")


def test_unknown_level_lists_available_names(builtin_registry):
    registry = builtin_registry
    with pytest.raises(UnknownLevelName) as ei:
        registry.get_by_name("Level9")
    assert ei.value.name == "Level9"
    assert ei.value.available_names == registry.list_level_names()
    assert "Available levels: Level0, Level1" in str(ei.value)


def test_broken_entry_is_logged_and_skipped(caplog):
    catalog = {
        "good": "####\n#SE#\n####",
        "broken": "###\n#S#\n###",
        "also_good": "#####\n#S+E#\n#####",
    }
    caplog.set_level(logging.WARNING, logger="hedgemaze.maze.registry")
    registry = LevelRegistry(catalog)

    assert registry.list_level_names() == ("good", "also_good")
    assert "broken" not in registry
    assert isinstance(registry.failures["broken"], NoEndPosition)
    assert any("Failed to parse level 'broken'" in rec.message for rec in caplog.records)

    with pytest.raises(UnknownLevelName):
        registry.get_by_name("broken")
    with pytest.raises(UnknownLevelName):
        registry.source_of("broken")


def test_source_of_returns_raw_text(builtin_registry):
    registry = builtin_registry
    assert registry.source_of("Level0") == BUILTIN_LEVELS["Level0"]


def test_extra_levels_override_builtins():
    registry = LevelRegistry.with_builtins({"Level0": "####\n#SE#\n####", "Bonus": "#####\n#S E#\n#####"})
    assert registry.list_level_names()[-1] == "Bonus"
    assert registry.get_by_name("Level0").width == 4


def test_registry_views_are_read_only(builtin_registry):
    registry = builtin_registry
    with pytest.raises(TypeError):
        registry.failures["x"] = None  # type: ignore[index]


def test_load_catalog_dir_sorted_by_stem(tmp_path: Path):
    (tmp_path / "b_second.txt").write_text("####\n#SE#\n####", encoding="utf-8")
    (tmp_path / "a_first.txt").write_text("#####\n#S E#\n#####", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")

    catalog = load_catalog_dir(tmp_path)
    assert list(catalog) == ["a_first", "b_second"]

    registry = LevelRegistry(catalog)
    assert registry.list_level_names() == ("a_first", "b_second")


def test_load_catalog_dir_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_catalog_dir(tmp_path / "nope")


def test_render_lines_reproduces_builtin_sources(builtin_registry):
    registry = builtin_registry
    for name in registry.list_level_names():
        m = registry.get_by_name(name)
        lines = render_lines(m)
        assert lines == normalize(registry.source_of(name)), name
        assert compile_map("\n".join(lines)) == m


def test_load_catalog_dir_skips_undecodable_files(tmp_path: Path, caplog):
    (tmp_path / "broken.txt").write_bytes(b"####\n#S\xe9E#\n####")
    (tmp_path / "fine.txt").write_text("####\n#SE#\n####", encoding="utf-8")

    caplog.set_level(logging.WARNING, logger="hedgemaze.maze.registry")
    catalog = load_catalog_dir(tmp_path)

    assert list(catalog) == ["fine"]
    assert any("not valid UTF-8" in rec.message for rec in caplog.records)
