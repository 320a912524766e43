"""Proof strings: tightly packed color+direction pairs such as ``"rubl"``."""

import re
from typing import Iterable, List, Tuple

from ricochet.board import ROBOT_COLORS, Direction

Move = Tuple[str, Direction]

_INVALID = re.compile(r"[^rybgudl]")


def sanitize_moves(text) -> str:
    """Lower-case ``text`` and drop every character outside the move alphabet."""
    if not text:
        return ""
    return _INVALID.sub("", str(text).lower())


def parse_moves(text) -> List[Move]:
    """Split ``text`` into (color, Direction) pairs.

    The string is read two characters at a time; a pair with an unknown
    color or direction is skipped, as is a dangling last character.
    """
    norm = str(text or "").lower()
    moves = []
    for i in range(0, len(norm) - 1, 2):
        color, ch = norm[i], norm[i + 1]
        if color not in ROBOT_COLORS or ch not in "urdl":
            continue
        moves.append((color, Direction.from_char(ch)))
    return moves


def format_move(color: str, direction: Direction) -> str:
    return color + direction.char


def format_moves(moves: Iterable[Move]) -> str:
    return "".join(format_move(color, direction) for color, direction in moves)


def move_count(text) -> int:
    return len(parse_moves(text))
