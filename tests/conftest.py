import pytest

from ricochet.board import ROBOT_COLORS, Board, Direction, Target, make_walls
from ricochet.movement import move_robot_one
from ricochet.rng import XorShift32

# Parked along the bottom row, out of the way of most test slides
PARKED = {"r": (0, 15), "y": (1, 15), "b": (2, 15), "g": (3, 15)}


def build_board(size=16, robots=None, target=None, mirrors=None, wormholes=None):
    placed = dict(PARKED)
    placed.update(robots or {})
    return Board(
        size,
        make_walls(size),
        placed,
        target or Target(15, 0, "r"),
        mirrors=mirrors,
        wormholes=wormholes,
    )


def plant_reachable_target(board, seed, walk=3):
    """Copy of ``board`` with the target moved to where a short random walk leaves a robot.

    Walls, mirrors and wormholes are kept, so any proof found has to deal
    with the generated layout. A proof of at most ``walk`` moves exists.
    """
    rng = XorShift32(seed)
    trial = board.copy()
    start = dict(trial.robots)
    last = None
    for _ in range(walk):
        legal = [(c, d) for c in ROBOT_COLORS for d in Direction
                 if move_robot_one(trial.copy(), c, d)]
        color, direction = rng.pick(legal)
        move_robot_one(trial, color, direction)
        last = color

    moved = [c for c in ROBOT_COLORS if trial.robots[c] != start[c]]
    color = last if last in moved or not moved else moved[0]
    x, y = trial.robots[color]
    planted = board.copy()
    planted.target = Target(x, y, color)
    return planted


@pytest.fixture
def empty_board():
    return build_board()
