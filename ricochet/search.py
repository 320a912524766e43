"""Depth- and time-bounded proof search.

A depth-first search over the positions of all four robots. At every node
the legal moves are sorted by how close they leave the target robot to the
target (Manhattan distance), and a memo of the shallowest depth at which
each position was seen prunes revisits. The wall clock is checked against
a deadline fixed when the search starts.

A result of ``None`` means no proof was found inside the budget. It does
not mean the board is unsolvable.
"""

import logging
import time
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from ricochet import config
from ricochet.board import ROBOT_COLORS, Board, Direction, Pos
from ricochet.movement import move_robot
from ricochet.moves import format_move

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
StateKey = Tuple[Pos, ...]


class SearchStats:
    def __init__(self):
        self.nodes = 0
        self.deepest = 0
        self.timed_out = False

    def __repr__(self):
        return (f"SearchStats(nodes={self.nodes}, deepest={self.deepest}, "
                f"timed_out={self.timed_out})")


class _Candidate(NamedTuple):
    distance: int
    color: str
    direction: Direction
    robots: Dict[str, Pos]


def _state_key(robots: Dict[str, Pos]) -> StateKey:
    return tuple(robots[c] for c in ROBOT_COLORS)


def find_proof(
    board: Board,
    max_depth: int = config.DEFAULT_MAX_DEPTH,
    time_limit_ms: float = config.DEFAULT_TIME_LIMIT_MS,
    clock: Clock = time.monotonic,
    stats: Optional[SearchStats] = None,
) -> Optional[str]:
    """Search for a move string that brings the target robot onto the target.

    Returns the proof (at most ``max_depth`` moves, possibly empty if the
    board is already solved) or None. ``board`` is never modified; the search
    works on a private copy.
    """
    target = board.target
    if target is None or target.color not in ROBOT_COLORS:
        return None
    if not isinstance(target.x, int) or not isinstance(target.y, int):
        return None

    max_depth = min(max_depth, config.MAX_SEARCH_DEPTH)
    stats = stats if stats is not None else SearchStats()
    snapshot = board.copy()
    deadline = clock() + time_limit_ms / 1000.0
    goal = (target.x, target.y)
    color = target.color
    order = [color] + [c for c in ROBOT_COLORS if c != color]
    visited: Dict[StateKey, int] = {}

    def expired() -> bool:
        if clock() > deadline:
            stats.timed_out = True
            return True
        return False

    def dfs(robots: Dict[str, Pos], depth: int, path: str) -> Optional[str]:
        stats.nodes += 1
        stats.deepest = max(stats.deepest, depth)
        if robots[color] == goal:
            return path
        if depth >= max_depth or expired():
            return None

        key = _state_key(robots)
        seen = visited.get(key)
        if seen is not None and seen <= depth:
            return None
        visited[key] = depth

        candidates = []
        for mover in order:
            for direction in Direction:
                moved = move_robot(snapshot, robots, mover, direction)
                if moved is None:
                    continue
                px, py = moved[color]
                distance = abs(px - goal[0]) + abs(py - goal[1])
                candidates.append(_Candidate(distance, mover, direction, moved))
        candidates.sort(key=lambda c: c.distance)

        for cand in candidates:
            found = dfs(cand.robots, depth + 1, path + format_move(cand.color, cand.direction))
            if found is not None:
                return found
            if expired():
                return None
        return None

    proof = dfs(dict(snapshot.robots), 0, "")
    if proof is None:
        logger.debug("No proof within %d moves / %sms: %r", max_depth, time_limit_ms, stats)
    else:
        logger.debug("Found %d-move proof %r: %r", len(proof) // 2, proof, stats)
    return proof
