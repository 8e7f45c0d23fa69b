import pytest
from burrow_core.state import Burrow, Topology
from burrow_core.goal_check import build_goal
from burrow_core.expand import expand_burrow
from heuristics.classic import h_zero, h_room_assignment, steps_to_slot
from heuristics.selector import get_heuristic
from search.dijkstra import dijkstra, solve

TOPO = Topology(rooms=4, depth=2)
NEAR = [".A......BCDABCD", ".B.....A.CDABCD", ".C.....AB.DABCD", ".......BACDABCD"]


def test_steps_to_slot():
    # hallway end to the top of room A
    assert steps_to_slot(TOPO, 0, 0, 0) == 3
    # top of room B to the bottom of room A
    assert steps_to_slot(TOPO, TOPO.room_cell(1, 0), 0, 1) == 1 + 2 + 2
    # leave own room and come back
    assert steps_to_slot(TOPO, TOPO.room_cell(0, 0), 0, 0) == 4


def test_zero_on_goal():
    assert h_room_assignment(build_goal(2), TOPO) == 0
    assert h_zero(build_goal(2)) == 0


@pytest.mark.parametrize("text", NEAR + [".......BCBDADCA"])
def test_never_overestimates(text):
    b = Burrow.from_str(text)
    assert 0 < h_room_assignment(b, TOPO) <= solve(b)


def test_astar_matches_dijkstra():
    h = get_heuristic("assignment", TOPO)
    for text in NEAR + [".......BCBDADCA"]:
        b = Burrow.from_str(text)
        assert solve(b, h_fn=h) == solve(b)


def test_astar_expanded_sample():
    b = expand_burrow(Burrow.from_str(".......BCBDADCA"))
    topo = Topology(rooms=4, depth=4)
    res = dijkstra(b, topo, h_fn=get_heuristic("assignment", topo))
    assert res.cost == 44169


def test_astar_expands_fewer_nodes():
    b = Burrow.from_str(".......BCBDADCA")
    plain = dijkstra(b)
    guided = dijkstra(b, h_fn=get_heuristic("assignment", TOPO))
    assert guided.nodes <= plain.nodes


def test_unknown_heuristic():
    with pytest.raises(ValueError):
        get_heuristic("manhattan", TOPO)
