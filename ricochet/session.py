"""A single player's proof attempt on one seeded board.

The session owns the live board. Moves are tried on a copy and committed
only if the robot actually moved; undo rebuilds the board from the seed and
replays the shortened proof.
"""

import logging
import random
from typing import Optional

from ricochet import config
from ricochet.board import ROBOT_COLORS, Board, Direction, Marker
from ricochet.generator import generate_from_seed, parse_mode
from ricochet.movement import move_robot_one
from ricochet.moves import format_move, move_count, sanitize_moves
from ricochet.replay import record_markers, replay, replay_delayed
from ricochet.search import find_proof

logger = logging.getLogger(__name__)


def random_seed() -> int:
    """Fresh nonzero 32-bit seed for a new room."""
    return random.getrandbits(32) or 1


class ProofSession:
    def __init__(self, seed: int, mode="c", hard: bool = False, size: int = config.GRID_SIZE):
        self.seed = (seed & 0xFFFFFFFF) or 1
        self.mode = parse_mode(mode)
        self.hard = hard
        self.size = size
        self.moves = ""
        self.selected: Optional[str] = None
        self.board = self._fresh_board()

    @classmethod
    def new(cls, mode="c", hard: bool = False, size: int = config.GRID_SIZE) -> "ProofSession":
        return cls(random_seed(), mode, hard, size)

    def _fresh_board(self) -> Board:
        return generate_from_seed(self.seed, self.size, self.mode, self.hard)

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def select(self, color: str) -> None:
        if color not in ROBOT_COLORS:
            raise ValueError(f"Unknown robot color: {color!r}")
        self.selected = color

    def select_at(self, x: int, y: int) -> Optional[str]:
        """Select whichever robot stands on (x, y), if any."""
        color = self.board.robot_at(x, y)
        if color is not None:
            self.selected = color
        return color

    def apply_move(self, color: str, direction: Direction) -> bool:
        """Move robot ``color``; returns False (and changes nothing) if it cannot move."""
        trial = self.board.copy()
        if not move_robot_one(trial, color, direction):
            return False
        self.board = trial
        self.moves += format_move(color, direction)
        x, y = trial.robots[color]
        trial.markers.append(Marker(x, y, self.proof_count, color))
        if self.solved:
            logger.info("Seed %d solved in %d moves: %s", self.seed, self.proof_count, self.moves)
        return True

    def move_selected(self, direction: Direction) -> bool:
        if self.selected is None:
            return False
        return self.apply_move(self.selected, direction)

    def undo(self) -> bool:
        """Drop the last move. Returns False if there is nothing to undo."""
        if len(self.moves) < 2:
            return False
        self.load(self.moves[:-2])
        return True

    def load(self, moves: str) -> None:
        """Rebuild the board from the seed and replay ``moves`` instantly."""
        self.rebuild()
        steps = replay(self.board, sanitize_moves(moves), record_markers)
        self.moves = "".join(step.pair for step in steps)

    async def play_proof(self, moves: str, delay: float = config.REPLAY_DELAY, on_step=None) -> bool:
        """Rebuild and replay ``moves`` with a pause between steps.

        Returns whether the replayed proof solves the board. No other moves
        may be made on this session until it finishes.
        """
        self.rebuild()

        def step(board, index, pair):
            record_markers(board, index, pair)
            self.moves += pair
            if on_step is not None:
                on_step(board, index, pair)

        await replay_delayed(self.board, sanitize_moves(moves), step, delay)
        logger.info("Replayed %d moves for seed %d, solved=%s", self.proof_count, self.seed, self.solved)
        return self.solved

    def rebuild(self) -> None:
        self.board = self._fresh_board()
        self.moves = ""

    def reset(self) -> None:
        self.rebuild()
        self.selected = None

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def solved(self) -> bool:
        return self.board.is_solved()

    @property
    def proof_count(self) -> int:
        return move_count(self.moves)

    def check_solvable(
        self,
        max_depth: int = config.DEFAULT_MAX_DEPTH,
        time_limit_ms: float = config.DEFAULT_TIME_LIMIT_MS,
    ) -> Optional[str]:
        """Look for a proof from the current position.

        None only means the search gave up; report it as undetermined.
        """
        return find_proof(self.board, max_depth, time_limit_ms)
