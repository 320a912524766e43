"""Seeded sliding-robot puzzle engine: board generation, slide physics, replay and proof search."""

from ricochet.board import ROBOT_COLORS, Board, Direction, Marker, Mirror, Target
from ricochet.generator import Mode, add_hard_features, generate, generate_from_seed, parse_mode
from ricochet.movement import move_robot, move_robot_one, slide
from ricochet.moves import format_moves, parse_moves, sanitize_moves
from ricochet.replay import record_markers, replay, replay_delayed
from ricochet.rng import XorShift32
from ricochet.search import SearchStats, find_proof
from ricochet.session import ProofSession

__all__ = [
    "ROBOT_COLORS",
    "Board",
    "Direction",
    "Marker",
    "Mirror",
    "Mode",
    "ProofSession",
    "SearchStats",
    "Target",
    "XorShift32",
    "add_hard_features",
    "find_proof",
    "format_moves",
    "generate",
    "generate_from_seed",
    "move_robot",
    "move_robot_one",
    "parse_mode",
    "parse_moves",
    "record_markers",
    "replay",
    "replay_delayed",
    "sanitize_moves",
    "slide",
]
