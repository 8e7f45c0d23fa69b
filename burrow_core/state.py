from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

# Field helpers
__all__ = [
    "Burrow",
    "Topology",
    "FIELD_BITS",
    "EMPTY",
    "LETTERS",
    "encode",
    "decode",
    "letter_value",
]

FIELD_BITS = 3
FIELD_MASK = (1 << FIELD_BITS) - 1

EMPTY = 0
LETTERS = ".ABCDEFG"  # index == cell value


def letter_value(ch: str) -> int:
    """'.' -> 0, 'A' -> 1, ... Raises ValueError for anything else."""
    idx = LETTERS.find(ch)
    if idx < 0:
        raise ValueError(f"Unknown burrow cell {ch!r}")
    return idx


def _shift(size: int, pos: int) -> int:
    # the first cell is the most significant field
    return (size - pos - 1) * FIELD_BITS


def encode(cells: Iterable[int]) -> int:
    key = 0
    for v in cells:
        if v < 0 or v > FIELD_MASK:
            raise ValueError(f"Cell value {v} does not fit in {FIELD_BITS} bits")
        key = (key << FIELD_BITS) | v
    return key


def decode(key: int, size: int) -> List[int]:
    return [(key >> _shift(size, pos)) & FIELD_MASK for pos in range(size)]


@dataclass(frozen=True, slots=True)
class Topology:
    """
    Shape of a burrow: a hallway of stopping positions plus side rooms.

    Cell indexing: hallway stops 0..hallway-1 left to right, then the rooms
    row by row (row 0 is the top), so room cell (row, room) lives at
    hallway + row*rooms + room.
    Geometric columns: room r has its mouth at column 2*(r+1); the stops sit
    on every column that is not a mouth.
    """

    rooms: int = 4
    depth: int = 2

    @property
    def hallway(self) -> int:
        return self.rooms + 3

    @property
    def size(self) -> int:
        return self.hallway + self.rooms * self.depth

    @classmethod
    def for_size(cls, size: int, rooms: int = 4) -> "Topology":
        room_cells = size - (rooms + 3)
        if room_cells <= 0 or room_cells % rooms != 0:
            raise ValueError(f"{size} cells do not fit a burrow with {rooms} rooms")
        return cls(rooms=rooms, depth=room_cells // rooms)

    # ---- index/geometry conversions
    def room_cell(self, room: int, row: int) -> int:
        return self.hallway + row * self.rooms + room

    def cell_room_row(self, idx: int) -> Tuple[int, int]:
        off = idx - self.hallway
        return (off % self.rooms, off // self.rooms)

    def is_hallway(self, idx: int) -> bool:
        return idx < self.hallway

    def stop_column(self, stop: int) -> int:
        if stop == 0:
            return 0
        if stop == self.hallway - 1:
            return 2 * self.rooms + 2
        return 2 * stop - 1

    def room_column(self, room: int) -> int:
        return 2 * (room + 1)


@dataclass(frozen=True, slots=True)
class Burrow:
    """
    Immutable burrow state packed into one integer.

    Every cell takes FIELD_BITS bits, first cell in the most significant field.
    Values: 0 empty, 1..N unit categories (A, B, C, D, ...).
    """

    key: int
    size: int

    # ---- construction
    @classmethod
    def from_cells(cls, cells: Iterable[int]) -> "Burrow":
        cells = list(cells)
        return cls(key=encode(cells), size=len(cells))

    @classmethod
    def from_str(cls, text: str) -> "Burrow":
        """Parses the compact form, e.g. '.......BCBDADCA'."""
        return cls.from_cells(letter_value(ch) for ch in text.strip())

    def cells(self) -> List[int]:
        return decode(self.key, self.size)

    def __str__(self) -> str:
        return "".join(LETTERS[v] if v < len(LETTERS) else "?" for v in self.cells())

    # ---- field access
    def get_at(self, pos: int) -> int:
        if pos < 0 or pos >= self.size:
            raise IndexError(f"Burrow position {pos} out of range 0..{self.size - 1}")
        return (self.key >> _shift(self.size, pos)) & FIELD_MASK

    def with_value(self, pos: int, value: int) -> "Burrow":
        if pos < 0 or pos >= self.size:
            raise IndexError(f"Burrow position {pos} out of range 0..{self.size - 1}")
        if value < 0 or value > FIELD_MASK:
            raise ValueError(f"Cell value {value} does not fit in {FIELD_BITS} bits")
        shift = _shift(self.size, pos)
        key = (self.key & ~(FIELD_MASK << shift)) | (value << shift)
        return Burrow(key=key, size=self.size)

    def with_swap(self, a: int, b: int) -> "Burrow":
        """New burrow with the values at a and b exchanged. No legality check."""
        va = self.get_at(a)
        vb = self.get_at(b)
        return self.with_value(a, vb).with_value(b, va)

    def counts(self) -> Dict[int, int]:
        out: Dict[int, int] = {}
        for v in self.cells():
            if v != EMPTY:
                out[v] = out.get(v, 0) + 1
        return out
