"""Slide physics: walls, robots, mirrors and wormholes."""

from typing import Dict, Optional

from ricochet import config
from ricochet.board import ROBOT_COLORS, Board, Direction, Pos, in_bounds

U, R, D, L = Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT

MIRROR_TURNS = {
    "/": {U: R, R: U, D: L, L: D},
    "\\": {U: L, L: U, D: R, R: D},
}


def reflect(direction: Direction, kind: str) -> Direction:
    return MIRROR_TURNS[kind][direction]


def _occupied(robots: Dict[str, Pos], x: int, y: int) -> bool:
    return any(robots[c] == (x, y) for c in ROBOT_COLORS)


def slide(
    board: Board,
    x: int,
    y: int,
    direction: Direction,
    robots: Optional[Dict[str, Pos]] = None,
) -> Pos:
    """Return the cell where a robot starting at (x, y) comes to rest.

    ``robots`` overrides ``board.robots`` for occupancy checks so callers can
    slide against a state that is not the live board. Travel stops at a wall,
    the board edge or another robot. Entering a wormhole jumps to its twin
    (unless the twin is occupied, in which case the robot stops short of the
    wormhole). Mirrors turn the robot without stopping it.
    """
    if robots is None:
        robots = board.robots
    walls = board.walls
    size = board.size

    for _ in range(config.SLIDE_GUARD):
        if walls[y][x][direction.value]:
            break
        nx, ny = x + direction.dx, y + direction.dy
        if not in_bounds(size, nx, ny) or _occupied(robots, nx, ny):
            break
        x, y = nx, ny

        exit_cell = board.wormhole_exit(x, y)
        if exit_cell is not None:
            if _occupied(robots, *exit_cell):
                x, y = x - direction.dx, y - direction.dy
                break
            x, y = exit_cell

        mirror = board.mirror_at(x, y)
        if mirror is not None:
            direction = reflect(direction, mirror.kind)
    return x, y


def move_robot_one(board: Board, color: str, direction: Direction) -> bool:
    """Slide robot ``color`` in place. Returns False, leaving the board untouched, if it cannot move."""
    if color not in board.robots:
        raise ValueError(f"Unknown robot color: {color!r}")
    start = board.robots[color]
    end = slide(board, start[0], start[1], direction)
    if end == start:
        return False
    board.robots[color] = end
    return True


def move_robot(
    board: Board,
    robots: Dict[str, Pos],
    color: str,
    direction: Direction,
) -> Optional[Dict[str, Pos]]:
    """Immutable variant of move_robot_one: a new robots mapping, or None for a no-op."""
    start = robots[color]
    end = slide(board, start[0], start[1], direction, robots)
    if end == start:
        return None
    moved = dict(robots)
    moved[color] = end
    return moved
