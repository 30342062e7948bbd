import pytest

from hedgemaze.maze import BUILTIN_LEVELS, Position, compile_map, flood_fill, reachable_from


def test_bfs_and_dfs_agree_on_builtin_levels():
    for name, source in BUILTIN_LEVELS.items():
        m = compile_map(source)
        args = (m.start_position, m.hedge_positions, m.width, m.height)
        assert flood_fill(*args, strategy="bfs") == flood_fill(*args, strategy="dfs"), name


def test_bfs_and_dfs_agree_on_open_room_with_islands():
    m = compile_map("\n".join([
        "#########",
        "#S     E#",
        "# ## ## #",
        "# #   # #",
        "# ## ## #",
        "#       #",
        "#########",
    ]))
    args = (m.start_position, m.hedge_positions, m.width, m.height)
    bfs = flood_fill(*args, strategy="bfs")
    assert bfs == flood_fill(*args, strategy="dfs")
    # every non-hedge cell in this layout is connected
    open_cells = {
        Position(x, y)
        for x in range(m.width)
        for y in range(m.height)
        if Position(x, y) not in m.hedge_positions
    }
    assert bfs == open_cells


def test_flood_fill_never_crosses_hedges_or_bounds():
    hedges = {Position(1, 0), Position(1, 1), Position(1, 2)}
    reach = reachable_from(Position(0, 0), hedges, 3, 3)
    assert reach == {Position(0, 0), Position(0, 1), Position(0, 2)}


def test_flood_fill_movement_is_four_connected():
    # Diagonal gap between (0,0) and (1,1) must not be crossed.
    hedges = {Position(1, 0), Position(0, 1)}
    assert reachable_from(Position(0, 0), hedges, 2, 2) == {Position(0, 0)}


def test_flood_fill_rejects_unknown_strategy():
    with pytest.raises(ValueError):
        flood_fill(Position(0, 0), set(), 1, 1, strategy="astar")


def test_neighbors4_order_and_values():
    assert Position(2, 2).neighbors4() == (
        Position(2, 3),
        Position(2, 1),
        Position(1, 2),
        Position(3, 2),
    )
