"""Apply a proof string to a live board, step by step."""

import asyncio
import logging
from typing import Callable, List, NamedTuple, Optional

from ricochet.board import Board, Marker
from ricochet.movement import move_robot_one
from ricochet.moves import Move, format_move, parse_moves

logger = logging.getLogger(__name__)

StepCallback = Callable[[Board, int, str], None]


class ReplayStep(NamedTuple):
    index: int
    pair: str
    moved: bool


def record_markers(board: Board, index: int, pair: str) -> None:
    """Step callback that drops a numbered marker where the robot came to rest."""
    color = pair[0]
    x, y = board.robots[color]
    board.markers.append(Marker(x, y, index + 1, color))


def _apply(board: Board, index: int, move: Move, on_step: Optional[StepCallback]) -> ReplayStep:
    color, direction = move
    pair = format_move(color, direction)
    moved = move_robot_one(board, color, direction)
    if not moved:
        logger.debug("Step %d (%s) is a no-op", index + 1, pair)
    if on_step is not None:
        on_step(board, index, pair)
    return ReplayStep(index, pair, moved)


def replay(board: Board, moves, on_step: Optional[StepCallback] = None) -> List[ReplayStep]:
    """Apply every valid pair in ``moves`` to ``board`` in place.

    ``on_step(board, index, pair)`` runs after each step, including steps
    where the robot could not move. Nothing is rolled back.
    """
    return [_apply(board, i, move, on_step) for i, move in enumerate(parse_moves(moves))]


async def replay_delayed(
    board: Board,
    moves,
    on_step: Optional[StepCallback] = None,
    delay: float = 0.0,
) -> List[ReplayStep]:
    """Like :func:`replay`, pausing ``delay`` seconds between steps.

    The board must not be moved by anyone else until the coroutine finishes.
    A delay of zero or less applies every step at once.
    """
    if delay <= 0:
        return replay(board, moves, on_step)
    steps = []
    for i, move in enumerate(parse_moves(moves)):
        if i:
            await asyncio.sleep(delay)
        steps.append(_apply(board, i, move, on_step))
    return steps
