from typing import List

from .state import Burrow, Topology, LETTERS, letter_value

TOK_WALL = "#"
TOK_EMPTY = "."
TOK_VOID = " "


def parse_burrow_str(burrow_str: str, rooms: int = 4) -> Burrow:
    """Parses an ASCII burrow diagram into a Burrow.

    Expected shape:
      #############
      #...........#
      ###B#C#B#D###
        #A#D#C#A#
        #########
    The first line is the wall, the second the hallway. Hallway cells in
    front of a room mouth are never occupied and are not stored. Every letter
    below the hallway is a room cell, read row by row.
    """
    lines = [line.rstrip("\n") for line in burrow_str.splitlines() if line.strip() != ""]
    if len(lines) < 3:
        raise ValueError("Burrow diagram needs a wall, a hallway and at least one room row")

    topo_hall = Topology(rooms=rooms, depth=1)
    hallway_line = lines[1].strip()
    inner = hallway_line[1:-1] if hallway_line.startswith(TOK_WALL) else hallway_line
    if len(inner) != 2 * rooms + 3:
        raise ValueError(f"Hallway must have {2 * rooms + 3} cells, got {len(inner)}")

    cells: List[int] = []
    for stop in range(topo_hall.hallway):
        cells.append(letter_value(inner[topo_hall.stop_column(stop)]))
    for room in range(rooms):
        if inner[topo_hall.room_column(room)] != TOK_EMPTY:
            raise ValueError("Hallway cell in front of a room must be empty")

    room_cells = 0
    for line in lines[2:]:
        for ch in line:
            if ch in (TOK_WALL, TOK_VOID):
                continue
            cells.append(letter_value(ch))
            room_cells += 1

    if room_cells == 0 or room_cells % rooms != 0:
        raise ValueError(f"{room_cells} room cells do not fill {rooms} rooms")
    b = Burrow.from_cells(cells)
    check_burrow(b, rooms)
    return b


def check_burrow(burrow: Burrow, rooms: int = 4) -> Topology:
    """Raises ValueError unless every unit has a room and no room has a gap below a unit."""
    topo = Topology.for_size(burrow.size, rooms)
    cells = burrow.cells()
    if max(cells) > rooms:
        raise ValueError(f"Unit {LETTERS[max(cells)]!r} has no room in a burrow with {rooms} rooms")
    for room in range(rooms):
        seen_unit = False
        for row in range(topo.depth):
            if cells[topo.room_cell(room, row)] != 0:
                seen_unit = True
            elif seen_unit:
                raise ValueError(f"Room {LETTERS[room + 1]} has an empty cell below a unit")
    return topo


def parse_burrow_file(path: str, rooms: int = 4) -> Burrow:
    with open(path, "r", encoding="utf-8") as f:
        return parse_burrow_str(f.read(), rooms=rooms)


def is_diagram(text: str) -> bool:
    """True for an ASCII diagram, False for the compact '.......BCBDADCA' form."""
    stripped = text.strip()
    return TOK_WALL in stripped or "\n" in stripped or any(
        ch not in LETTERS for ch in stripped
    )


def parse_burrow(text: str, rooms: int = 4) -> Burrow:
    """Either form: ASCII diagram or compact '.......BCBDADCA'."""
    if is_diagram(text):
        return parse_burrow_str(text, rooms=rooms)
    b = Burrow.from_str(text)
    check_burrow(b, rooms)
    return b
