import pytest
from burrow_core.state import Burrow, Topology, encode, decode

SAMPLE = ".......BCBDADCA"


def test_encode_decode_roundtrip():
    cells = [0, 0, 1, 0, 4, 0, 0, 2, 3, 2, 4, 1, 4, 3, 1]
    assert decode(encode(cells), len(cells)) == cells


def test_leading_empty_cells_survive():
    b = Burrow.from_str(SAMPLE)
    assert b.size == 15
    assert str(b) == SAMPLE
    assert Burrow.from_str(str(b)) == b


def test_get_at_reads_fields():
    b = Burrow.from_str(SAMPLE)
    assert b.get_at(0) == 0
    assert b.get_at(7) == 2  # B
    assert b.get_at(14) == 1  # A


def test_get_at_out_of_range():
    b = Burrow.from_str(SAMPLE)
    with pytest.raises(IndexError):
        b.get_at(15)
    with pytest.raises(IndexError):
        b.get_at(-1)


def test_swap():
    b = Burrow.from_str(SAMPLE)
    swapped = b.with_swap(0, 14)
    assert str(swapped) == "A......BCBDADC."
    assert str(b) == SAMPLE  # original untouched


def test_swap_twice_is_identity():
    b = Burrow.from_str(SAMPLE)
    for a, c in [(0, 14), (3, 9), (7, 7), (12, 1)]:
        assert b.with_swap(a, c).with_swap(a, c) == b


def test_counts():
    b = Burrow.from_str(SAMPLE)
    assert b.counts() == {1: 2, 2: 2, 3: 2, 4: 2}


def test_unknown_letter():
    with pytest.raises(ValueError):
        Burrow.from_str(".......BCBDADCX")


def test_topology_indexing():
    topo = Topology(rooms=4, depth=2)
    assert topo.hallway == 7 and topo.size == 15
    assert topo.room_cell(0, 0) == 7
    assert topo.room_cell(3, 1) == 14
    assert topo.cell_room_row(13) == (2, 1)
    assert [topo.stop_column(s) for s in range(7)] == [0, 1, 3, 5, 7, 9, 10]
    assert Topology.for_size(23) == Topology(rooms=4, depth=4)
    with pytest.raises(ValueError):
        Topology.for_size(16)


def test_with_value_rejects_wide_values():
    b = Burrow.from_str(SAMPLE)
    with pytest.raises(ValueError):
        b.with_value(1, 9)
    with pytest.raises(ValueError):
        b.with_value(1, -1)
    assert str(b.with_value(1, 4)) == ".D.....BCBDADCA"
