from enum import Enum
from typing import Tuple


# ---------------------------------------------------------------------------
# Cell Type Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class CellType(Enum):
    EMPTY    = "empty"     # open floor
    WALL     = "wall"      # blocks traversal
    START    = "start"     # where the search begins
    END      = "end"       # the goal
    PATH     = "path"      # on the returned path
    VISITED  = "visited"   # explored during the current run


# one character per type, used to squeeze a grid into the session cookie
TYPE_CODES = {
    CellType.EMPTY:   ".",
    CellType.WALL:    "#",
    CellType.START:   "S",
    CellType.END:     "E",
    CellType.PATH:    "*",
    CellType.VISITED: "v",
}
CODE_TYPES = {code: t for t, code in TYPE_CODES.items()}


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell:
    """
    One grid position.  Identity is the coordinate pair; `type` is the
    mutable role tag that edits and runs change.

    Attributes:
        x, y : Column and row inside the owning Grid (never change).
        type : Current CellType.
    """

    __slots__ = ("x", "y", "type")

    def __init__(self, x: int, y: int, type: CellType = CellType.EMPTY):
        self.x: int         = x
        self.y: int         = y
        self.type: CellType = type

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_wall(self) -> bool:
        return self.type == CellType.WALL

    @property
    def is_marker(self) -> bool:
        """Start and end cells keep their colour through a run."""
        return self.type in (CellType.START, CellType.END)

    def __repr__(self) -> str:
        return f"Cell(x={self.x}, y={self.y}, type={self.type.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Cell) and self.pos == other.pos

    def __hash__(self) -> int:
        return hash(self.pos)
