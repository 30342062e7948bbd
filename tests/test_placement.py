from hedgemaze.maze import BUILTIN_LEVELS, build_placement_plan, compile_map


def test_minimal_map_plan():
    plan = build_placement_plan(compile_map("####\n#SE#\n####"))
    assert plan.player == (1.0, 0.0, 1.0)
    assert plan.finishes == ((2.0, 0.0, 1.0),)
    assert plan.pickups == ()
    assert plan.total_pickups == 0
    assert len(plan.hedges) == 10
    assert all(h[1] == 0.0 for h in plan.hedges)


def test_pickups_float_above_ground():
    m = compile_map(BUILTIN_LEVELS["Level0"])
    plan = build_placement_plan(m)
    assert plan.pickups == ((6.0, 0.5, 4.0),)
    assert plan.total_pickups == m.pickup_count == 1


def test_plan_does_not_touch_map():
    m = compile_map(BUILTIN_LEVELS["Level3"])
    before = m.to_dict()
    build_placement_plan(m)
    assert m.to_dict() == before
