"""Board model: per-cell walls, robots, target and the hard-mode overlays."""

from copy import deepcopy
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

Pos = Tuple[int, int]

ROBOT_COLORS = ("r", "y", "b", "g")


# ---------------------------------------------------------------------------
# Directions
# ---------------------------------------------------------------------------


class Direction(Enum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def char(self) -> str:
        return "urdl"[self.value]

    @property
    def dx(self) -> int:
        return (0, 1, 0, -1)[self.value]

    @property
    def dy(self) -> int:
        return (-1, 0, 1, 0)[self.value]

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 2) % 4)

    def rotated(self, turns: int) -> "Direction":
        """Rotate clockwise by ``turns`` quarter turns."""
        return Direction((self.value + turns) % 4)

    @classmethod
    def from_char(cls, ch: str) -> "Direction":
        return cls("urdl".index(ch.lower()))


# ---------------------------------------------------------------------------
# Board records
# ---------------------------------------------------------------------------


class Target(NamedTuple):
    x: int
    y: int
    color: str


class Mirror(NamedTuple):
    x: int
    y: int
    kind: str  # "/" or "\\"


class Marker(NamedTuple):
    x: int
    y: int
    step: int
    color: str


# ---------------------------------------------------------------------------
# Walls
# ---------------------------------------------------------------------------

Walls = List[List[List[bool]]]


def in_bounds(size: int, x: int, y: int) -> bool:
    return 0 <= x < size and 0 <= y < size


def make_walls(size: int) -> Walls:
    """Empty wall grid with the outer boundary closed."""
    walls = [[[False] * 4 for _ in range(size)] for _ in range(size)]
    for i in range(size):
        walls[0][i][Direction.UP.value] = True
        walls[size - 1][i][Direction.DOWN.value] = True
        walls[i][0][Direction.LEFT.value] = True
        walls[i][size - 1][Direction.RIGHT.value] = True
    return walls


def add_wall(walls: Walls, x: int, y: int, direction: Direction) -> bool:
    """Wall the ``direction`` edge of (x, y) and the mirrored edge next door."""
    size = len(walls)
    if not in_bounds(size, x, y):
        return False
    walls[y][x][direction.value] = True
    nx, ny = x + direction.dx, y + direction.dy
    if in_bounds(size, nx, ny):
        walls[ny][nx][direction.opposite.value] = True
    return True


def has_wall(walls: Walls, x: int, y: int, direction: Direction) -> bool:
    return walls[y][x][direction.value]


def has_any_wall(walls: Walls, x: int, y: int) -> bool:
    return any(walls[y][x])


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------


class Board:
    """Square puzzle board.

    ``robots`` maps each color in ROBOT_COLORS to an (x, y) cell. Mirrors and
    wormholes are empty unless hard features were added; ``markers`` collects
    move annotations during play and replay only.
    """

    def __init__(
        self,
        size: int,
        walls: Walls,
        robots: Dict[str, Pos],
        target: Target,
        mirrors: Optional[List[Mirror]] = None,
        wormholes: Optional[List[Pos]] = None,
        markers: Optional[List[Marker]] = None,
    ) -> None:
        self.size = size
        self.walls = walls
        self.robots = robots
        self.target = target
        self.mirrors = mirrors if mirrors is not None else []
        self.wormholes = wormholes if wormholes is not None else []
        self.markers = markers if markers is not None else []

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.walls == other.walls
            and self.robots == other.robots
            and self.target == other.target
            and self.mirrors == other.mirrors
            and self.wormholes == other.wormholes
        )

    def __repr__(self):
        return (
            f"Board(size={self.size}, robots={self.robots}, "
            f"target={self.target}, mirrors={len(self.mirrors)}, "
            f"wormholes={len(self.wormholes)})"
        )

    def copy(self) -> "Board":
        return deepcopy(self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def robot_at(self, x: int, y: int, robots: Optional[Dict[str, Pos]] = None) -> Optional[str]:
        robots = self.robots if robots is None else robots
        for color in ROBOT_COLORS:
            if robots[color] == (x, y):
                return color
        return None

    def mirror_at(self, x: int, y: int) -> Optional[Mirror]:
        for mirror in self.mirrors:
            if mirror.x == x and mirror.y == y:
                return mirror
        return None

    def wormhole_exit(self, x: int, y: int) -> Optional[Pos]:
        if len(self.wormholes) != 2:
            return None
        a, b = self.wormholes
        if a == (x, y):
            return b
        if b == (x, y):
            return a
        return None

    def is_solved(self) -> bool:
        """True when the target-colored robot stands on the target cell."""
        target = self.target
        if target is None or target.color not in self.robots:
            return False
        return self.robots[target.color] == (target.x, target.y)

    # ------------------------------------------------------------------
    # Text rendering
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """ASCII diagram: robots as upper-case letters, target in lower case."""
        size = self.size
        lines = []
        top = "+"
        for x in range(size):
            top += ("---" if has_wall(self.walls, x, 0, Direction.UP) else "   ") + "+"
        lines.append(top)
        for y in range(size):
            row = "|" if has_wall(self.walls, 0, y, Direction.LEFT) else " "
            below = "+"
            for x in range(size):
                row += " " + self._cell_glyph(x, y) + " "
                row += "|" if has_wall(self.walls, x, y, Direction.RIGHT) else " "
                below += ("---" if has_wall(self.walls, x, y, Direction.DOWN) else "   ") + "+"
            lines.append(row)
            lines.append(below)
        return "\n".join(lines)

    def _cell_glyph(self, x: int, y: int) -> str:
        color = self.robot_at(x, y)
        if color:
            return color.upper()
        if self.target is not None and (self.target.x, self.target.y) == (x, y):
            return self.target.color
        mirror = self.mirror_at(x, y)
        if mirror:
            return mirror.kind
        if (x, y) in self.wormholes:
            return "@"
        return "."
