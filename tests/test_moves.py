from burrow_core.state import Burrow, Topology
from burrow_core.moves import successors, is_settled, DEFAULT_COSTS
from burrow_core.goal_check import build_goal

SAMPLE = ".......BCBDADCA"


def _as_set(moves):
    return {(str(b), cost) for b, cost in moves}


def test_sample_successors_exact():
    expected = {
        ("B.......CBDADCA", 30), (".B......CBDADCA", 20), ("..B.....CBDADCA", 20),
        ("...B....CBDADCA", 40), ("....B...CBDADCA", 60), (".....B..CBDADCA", 80),
        ("......B.CBDADCA", 90),
        ("C......B.BDADCA", 500), (".C.....B.BDADCA", 400), ("..C....B.BDADCA", 200),
        ("...C...B.BDADCA", 200), ("....C..B.BDADCA", 400), (".....C.B.BDADCA", 600),
        ("......CB.BDADCA", 700),
        ("B......BC.DADCA", 70), (".B.....BC.DADCA", 60), ("..B....BC.DADCA", 40),
        ("...B...BC.DADCA", 20), ("....B..BC.DADCA", 20), (".....B.BC.DADCA", 40),
        ("......BBC.DADCA", 50),
        ("D......BCB.ADCA", 9000), (".D.....BCB.ADCA", 8000), ("..D....BCB.ADCA", 6000),
        ("...D...BCB.ADCA", 4000), ("....D..BCB.ADCA", 2000), (".....D.BCB.ADCA", 2000),
        ("......DBCB.ADCA", 3000),
    }
    actual = successors(Burrow.from_str(SAMPLE))
    assert len(actual) == len(expected)
    assert _as_set(actual) == expected


def test_blocked_hallway_and_foreign_room():
    # D cannot enter its room while B and C are still inside; B is blocked on the left
    b = Burrow.from_str("....D.............B...C")
    assert _as_set(successors(b)) == {
        ("....DB................C", 40),
        ("....D.B...............C", 50),
    }


def test_hallway_unit_settles_deepest():
    b = Burrow.from_str(".A......BCDABCD")
    moves = _as_set(successors(b))
    assert (".......ABCDABCD", 2) in moves


def test_settled_units_do_not_move():
    goal = build_goal(2)
    assert successors(goal) == []
    topo = Topology(rooms=4, depth=2)
    b = Burrow.from_str(".......BACDABCD")
    assert is_settled(b, topo, 9)       # C over C
    assert not is_settled(b, topo, 7)   # B in room A
    assert is_settled(b, topo, 11)      # A at the bottom of room A
    assert not is_settled(b, topo, 0)


def test_moves_conserve_units_and_only_fill_empty_cells():
    frontier = [Burrow.from_str(SAMPLE)]
    seen = set(frontier)
    for _ in range(3):
        nxt = []
        for b in frontier:
            cells = b.cells()
            for ns, cost in successors(b):
                assert ns.counts() == b.counts()
                assert cost > 0
                changed = [i for i, (x, y) in enumerate(zip(cells, ns.cells())) if x != y]
                assert len(changed) == 2
                src, dst = (changed if cells[changed[1]] == 0 else changed[::-1])
                assert cells[dst] == 0 and cells[src] != 0
                if ns not in seen:
                    seen.add(ns)
                    nxt.append(ns)
        frontier = nxt[:200]


def test_costs_are_configurable():
    b = Burrow.from_str(SAMPLE)
    flat = successors(b, Topology(rooms=4, depth=2), (1, 1, 1, 1))
    assert ("B.......CBDADCA", 3) in _as_set(flat)
    assert ("D......BCB.ADCA", 9) in _as_set(flat)
    assert len(flat) == len(successors(b, costs=DEFAULT_COSTS))


def test_unit_never_settles_below_another():
    # room A holds an A above an empty cell; the hallway A cannot get past it
    b = Burrow.from_str(".A.....ABCD.BCD")
    moves = {s for s, _ in _as_set(successors(b))}
    assert ".......ABCDABCD" not in moves
    assert all(s[1] == "A" for s in moves)
