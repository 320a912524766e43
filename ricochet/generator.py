"""Seeded board generation.

Two layouts are supported:

* classic ("c") — four hand-authored 8×8 quadrant templates are shuffled,
  rotated and stamped into the board, a cross walls off the centre hub and
  the target comes from one of the templates;
* random ("r") — 10-12 single-edge obstacles scattered over an empty board
  with a random target cell and color.

Either layout can be extended with hard features (mirrors and a wormhole
pair). Every placement loop is capped and falls back to a fixed choice, so
generation always returns a playable board for a given (seed, size, mode).
The order of rng draws is part of the format: changing it changes every
board behind every shared seed.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Set

from ricochet import config
from ricochet.board import (
    ROBOT_COLORS,
    Board,
    Direction,
    Mirror,
    Pos,
    Target,
    Walls,
    add_wall,
    has_any_wall,
    in_bounds,
    make_walls,
)
from ricochet.rng import XorShift32

logger = logging.getLogger(__name__)

U, R, D, L = Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT

# Forced-wall priority for a target cell with no adjacent wall
TARGET_WALL_ORDER = (L, R, U, D)


class Mode(str, Enum):
    CLASSIC = "c"
    RANDOM = "r"


def parse_mode(value) -> Mode:
    """Accept ``Mode``, ``"c"``/``"classic"`` or ``"r"``/``"random"``."""
    if isinstance(value, Mode):
        return value
    text = str(value).strip().lower()
    if text in ("c", "classic"):
        return Mode.CLASSIC
    if text in ("r", "random"):
        return Mode.RANDOM
    raise ValueError(f"Unknown board mode: {value!r} (expected 'c' or 'r')")


# ---------------------------------------------------------------------------
# Quadrant templates (8×8, local coordinates)
#
# Deterministic sample layouts, not the official board set. Each template is
# a list of (x, y, side) walls plus one candidate target.
# ---------------------------------------------------------------------------

QUADRANTS = [
    {
        "walls": [
            (1, 1, R), (1, 1, D), (2, 3, D), (2, 3, R),
            (5, 0, D), (5, 1, D), (6, 2, L), (6, 2, D),
            (0, 5, R), (3, 6, U), (4, 6, U),
        ],
        "targets": [(3, 2, "r")],
    },
    {
        "walls": [
            (2, 1, D), (3, 1, D), (4, 2, L), (4, 2, D),
            (6, 3, L), (6, 4, L), (1, 6, R), (1, 6, U),
        ],
        "targets": [(5, 3, "y")],
    },
    {
        "walls": [
            (1, 2, R), (1, 3, R), (2, 4, D), (2, 4, R),
            (5, 5, U), (6, 5, U), (6, 1, L),
        ],
        "targets": [(2, 5, "b")],
    },
    {
        "walls": [
            (0, 1, D), (0, 1, R), (3, 3, U), (4, 3, U),
            (5, 6, L), (6, 6, L), (2, 0, D),
        ],
        "targets": [(6, 1, "g")],
    },
]


def rotate_point(x: int, y: int, rot: int, size: int = config.TEMPLATE_SIZE) -> Pos:
    """Rotate (x, y) clockwise by ``rot`` quarter turns inside a size×size square."""
    rot %= 4
    if rot == 0:
        return x, y
    if rot == 1:
        return size - 1 - y, x
    if rot == 2:
        return size - 1 - x, size - 1 - y
    return y, size - 1 - x


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------


def center_cells(size: int) -> Set[Pos]:
    """The 2×2 hub in the middle of the board."""
    mid = size // 2
    return {(x, y) for x in (mid - 1, mid) for y in (mid - 1, mid)}


def quadrant_offsets(size: int) -> List[Pos]:
    """Top-left corners of the TL, TR, BL, BR quadrants."""
    mid = size // 2
    return [(0, 0), (mid, 0), (0, mid), (mid, mid)]


def add_central_cross(walls: Walls) -> None:
    mid = len(walls) // 2
    a, b = mid - 1, mid
    add_wall(walls, a, a, R)
    add_wall(walls, a, b, R)
    add_wall(walls, a, a, D)
    add_wall(walls, b, a, D)


def force_target_wall(walls: Walls, target: Target) -> None:
    """Give ``target`` an adjacent wall if it has none."""
    if has_any_wall(walls, target.x, target.y):
        return
    size = len(walls)
    x, y = target.x, target.y
    side = D
    for side in TARGET_WALL_ORDER:
        if in_bounds(size, x + side.dx, y + side.dy):
            break
    add_wall(walls, x, y, side)
    logger.debug("Forced %s wall next to target (%d, %d)", side.name.lower(), x, y)


# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------


def pick_cell_in_quadrant(rng: XorShift32, size: int, quad: int, used: Set[Pos]) -> Pos:
    """Pick an unused, non-centre cell inside quadrant ``quad`` (0 TL, 1 TR, 2 BL, 3 BR).

    Falls back to the whole board, then to (0, 0).
    """
    mid = size // 2
    x_lo, x_hi = (0, mid - 1) if quad % 2 == 0 else (mid, size - 1)
    y_lo, y_hi = (0, mid - 1) if quad < 2 else (mid, size - 1)
    center = center_cells(size)

    for _ in range(config.QUADRANT_GUARD):
        x = x_lo + rng.next_int(x_hi - x_lo + 1)
        y = y_lo + rng.next_int(y_hi - y_lo + 1)
        if (x, y) in center or (x, y) in used:
            continue
        used.add((x, y))
        return x, y

    logger.debug("Quadrant %d exhausted, scanning whole board", quad)
    for _ in range(config.BOARD_SCAN_GUARD):
        x, y = rng.next_int(size), rng.next_int(size)
        if (x, y) in center or (x, y) in used:
            continue
        used.add((x, y))
        return x, y

    logger.warning("No free cell found for quadrant %d, using (0, 0)", quad)
    return 0, 0


def place_robots(rng: XorShift32, size: int, used: Set[Pos]) -> Dict[str, Pos]:
    """One robot per quadrant: r top-left, y top-right, b bottom-left, g bottom-right."""
    return {color: pick_cell_in_quadrant(rng, size, quad, used)
            for quad, color in enumerate(ROBOT_COLORS)}


def random_obstacles(rng: XorShift32, walls: Walls, count: int) -> int:
    """Scatter ``count`` single-edge walls; returns how many were placed."""
    size = len(walls)
    placed = 0
    guard = 0
    while placed < count and guard < config.OBSTACLE_GUARD:
        guard += 1
        x, y = rng.next_int(size), rng.next_int(size)
        side = Direction(rng.next_int(4))
        if walls[y][x][side.value]:
            continue
        add_wall(walls, x, y, side)
        placed += 1
    return placed


# ---------------------------------------------------------------------------
# Board layouts
# ---------------------------------------------------------------------------


def _classic_board(rng: XorShift32, size: int) -> Board:
    walls = make_walls(size)
    mid = size // 2

    order = [0, 1, 2, 3]
    for i in range(len(order) - 1, 0, -1):
        j = rng.next_int(i + 1)
        order[i], order[j] = order[j], order[i]
    rotations = [rng.next_int(4) for _ in range(4)]
    offsets = quadrant_offsets(size)

    candidates = []
    for q in range(4):
        template = QUADRANTS[order[q]]
        rot = rotations[q]
        ox, oy = offsets[q]
        for wx, wy, side in template["walls"]:
            px, py = rotate_point(wx, wy, rot)
            if px >= mid or py >= mid:
                continue
            add_wall(walls, ox + px, oy + py, side.rotated(rot))
    add_central_cross(walls)

    for q in range(4):
        template = QUADRANTS[order[q]]
        rot = rotations[q]
        ox, oy = offsets[q]
        for tx, ty, color in template["targets"]:
            px, py = rotate_point(tx, ty, rot)
            if px >= mid or py >= mid:
                continue
            candidates.append(Target(ox + px, oy + py, color))

    walled = [t for t in candidates if has_any_wall(walls, t.x, t.y)]
    if walled:
        target = walled[rng.next_int(len(walled))]
    elif candidates:
        target = candidates[rng.next_int(len(candidates))]
    else:
        target = Target(mid - 1, mid - 1, "r")
    force_target_wall(walls, target)

    robots = place_robots(rng, size, {(target.x, target.y)})
    return Board(size, walls, robots, target)


def _random_board(rng: XorShift32, size: int) -> Board:
    walls = make_walls(size)
    count = config.OBSTACLE_MIN + rng.next_int(config.OBSTACLE_SPREAD)
    random_obstacles(rng, walls, count)

    tx, ty = rng.next_int(size), rng.next_int(size)
    color = rng.pick(ROBOT_COLORS)
    robots = place_robots(rng, size, {(tx, ty)})

    # Re-picks only look for wall adjacency, so the target may share a robot cell
    for _ in range(config.TARGET_REPICK_GUARD):
        if has_any_wall(walls, tx, ty):
            break
        tx, ty = rng.next_int(size), rng.next_int(size)

    target = Target(tx, ty, color)
    force_target_wall(walls, target)
    return Board(size, walls, robots, target)


def add_hard_features(rng: XorShift32, board: Board) -> None:
    """Add 3-5 mirrors and one wormhole pair in place.

    Features go on interior, wall-free, non-centre, unoccupied cells. When no
    such cell turns up within the retry guard the feature is skipped.
    """
    size = board.size
    walls = board.walls
    center = center_cells(size)
    used = {(board.target.x, board.target.y)}
    used.update(board.robots.values())

    def free_cell() -> Optional[Pos]:
        for _ in range(config.FEATURE_GUARD):
            x, y = rng.next_int(size), rng.next_int(size)
            if x == 0 or y == 0 or x == size - 1 or y == size - 1:
                continue
            if has_any_wall(walls, x, y):
                continue
            if (x, y) in center or (x, y) in used:
                continue
            used.add((x, y))
            return x, y
        return None

    count = config.MIRROR_MIN + rng.next_int(config.MIRROR_SPREAD)
    mirrors = []
    while len(mirrors) < count:
        cell = free_cell()
        if cell is None:
            logger.debug("Placed %d of %d mirrors", len(mirrors), count)
            break
        kind = "/" if rng.next_int(2) == 0 else "\\"
        mirrors.append(Mirror(cell[0], cell[1], kind))

    a = free_cell()
    b = free_cell()
    board.mirrors = mirrors
    board.wormholes = [a, b] if a is not None and b is not None else []
    if not board.wormholes:
        logger.debug("No room for a wormhole pair")


def generate(rng: XorShift32, size: int = config.GRID_SIZE, mode="c", hard: bool = False) -> Board:
    """Build a board from ``rng``. Same seed, size, mode and hard flag give the same board.

    Any size from 4 up is accepted. Smaller boards raise ValueError since
    they cannot hold four robots in distinct quadrant cells.
    """
    if size < config.MIN_GRID_SIZE:
        raise ValueError(f"Board size must be at least {config.MIN_GRID_SIZE}, got {size}")
    mode = parse_mode(mode)
    if mode is Mode.RANDOM:
        board = _random_board(rng, size)
    else:
        board = _classic_board(rng, size)
    if hard:
        add_hard_features(rng, board)
    logger.debug("Generated %s board: %r", mode.name.lower(), board)
    return board


def generate_from_seed(seed: int, size: int = config.GRID_SIZE, mode="c", hard: bool = False) -> Board:
    return generate(XorShift32(seed), size, mode, hard)
