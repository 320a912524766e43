"""
play.py — Generate, solve and replay Ricochet Proof boards, or play RR01.

Usage:
    python play.py                          # Play RR01 in terminal mode (seed 0)
    python play.py --seed 42                # Play with a specific seed
    python play.py --agent                  # Run the sample agent (random actions)
    python play.py --board --seed 7 --mode r --hard
                                            # Print one generated board
    python play.py --solve --seed 7         # Search for a proof on that board
    python play.py --replay rurdbl --seed 7 # Replay a proof, printing each step

Controls (terminal / human play):
    ACTION1 = W / ↑      (Up)
    ACTION2 = S / ↓      (Down)
    ACTION3 = A / ←      (Left)
    ACTION4 = D / →      (Right)
    ACTION5 = Space      (Select next robot)
    ACTION6 = Click      (Select robot under cursor)
    ACTION7 = Ctrl+Z     (Undo)
"""

import argparse
import logging
import sys

import arc_agi
from arcengine import GameAction

from ricochet import XorShift32, config, find_proof, generate_from_seed, parse_moves, replay

GAME_ID = "rr01-v1"


def _make_env(seed: int):
    arc = arc_agi.Arcade(environments_dir="./environment_files")
    env = arc.make(GAME_ID, seed=seed, render_mode="terminal")
    if env is None:
        raise RuntimeError(f"Could not create environment for {GAME_ID}")
    return arc, env


def play_human(seed: int = 0) -> None:
    """Launch the game in terminal render mode for human play."""
    arc, env = _make_env(seed)

    print("=" * 60)
    print("  RR01 — Ricochet Proof")
    print("  Slide robots until they hit something.")
    print("  Bring the target-colored robot onto the target cell.")
    print("=" * 60)
    print()
    print("  Controls: ARROW KEYS slide the selected robot")
    print("    Space = next robot    Click = select robot    Ctrl+Z = Undo")
    print("=" * 60)

    try:
        input("\nPress Enter to view scorecard when done...\n")
    except (KeyboardInterrupt, EOFError):
        pass

    print(arc.get_scorecard())


def play_agent(seed: int = 0, max_steps: int = 500) -> None:
    """Run a sample random agent against the game."""
    arc, env = _make_env(seed)
    rng = XorShift32(seed)
    actions = [
        GameAction.ACTION1,
        GameAction.ACTION2,
        GameAction.ACTION3,
        GameAction.ACTION4,
        GameAction.ACTION5,
        GameAction.ACTION7,
    ]

    print(f"Running random agent for up to {max_steps} steps (seed={seed})...")
    for _ in range(max_steps):
        env.step(rng.pick(actions))

    print()
    print(f"Agent completed {max_steps} steps.")
    print(arc.get_scorecard())


def show_board(seed: int, mode: str, hard: bool) -> None:
    board = generate_from_seed(seed, config.GRID_SIZE, mode, hard)
    print(f"seed={seed} mode={mode} hard={hard} target={board.target}")
    print(board.to_text())


def solve(seed: int, mode: str, hard: bool, depth: int, time_limit_ms: int) -> int:
    board = generate_from_seed(seed, config.GRID_SIZE, mode, hard)
    print(board.to_text())
    proof = find_proof(board, depth, time_limit_ms)
    if proof is None:
        print(f"Undetermined: no proof found within {depth} moves / {time_limit_ms}ms")
        return 1
    print(f"Reachable in {len(parse_moves(proof))} moves: {proof}")
    return 0


def replay_proof(seed: int, mode: str, hard: bool, moves: str) -> int:
    board = generate_from_seed(seed, config.GRID_SIZE, mode, hard)

    def on_step(state, index, pair):
        print(f"\nStep {index + 1}: {pair}")
        print(state.to_text())

    steps = replay(board, moves, on_step)
    noops = sum(1 for step in steps if not step.moved)
    print()
    print(f"Applied {len(steps)} moves ({noops} no-op), solved={board.is_solved()}")
    return 0 if board.is_solved() else 1


def main():
    parser = argparse.ArgumentParser(
        description="Ricochet Proof — seeded sliding-robot puzzles (ARC-AGI-3 Game)"
    )
    parser.add_argument(
        "--seed", type=int, default=0,
        help="Random seed for board generation (default: 0)"
    )
    parser.add_argument(
        "--mode", choices=["c", "r"], default="c",
        help="Board layout: c=classic quadrants, r=random walls (default: c)"
    )
    parser.add_argument(
        "--hard", action="store_true",
        help="Add mirrors and a wormhole pair"
    )
    parser.add_argument(
        "--board", action="store_true",
        help="Print the generated board and exit"
    )
    parser.add_argument(
        "--solve", action="store_true",
        help="Search for a proof on the generated board"
    )
    parser.add_argument(
        "--replay", metavar="MOVES",
        help="Replay a proof string such as 'rurdbl'"
    )
    parser.add_argument(
        "--depth", type=int, default=config.DEFAULT_MAX_DEPTH,
        help=f"Max proof length for --solve (default: {config.DEFAULT_MAX_DEPTH})"
    )
    parser.add_argument(
        "--time-limit", type=int, default=config.DEFAULT_TIME_LIMIT_MS,
        help=f"Search budget in ms for --solve (default: {config.DEFAULT_TIME_LIMIT_MS})"
    )
    parser.add_argument(
        "--agent", action="store_true",
        help="Run the sample random agent instead of human play"
    )
    parser.add_argument(
        "--steps", type=int, default=500,
        help="Max steps for agent mode (default: 500)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.board:
        show_board(args.seed, args.mode, args.hard)
    elif args.solve:
        sys.exit(solve(args.seed, args.mode, args.hard, args.depth, args.time_limit))
    elif args.replay is not None:
        sys.exit(replay_proof(args.seed, args.mode, args.hard, args.replay))
    elif args.agent:
        play_agent(seed=args.seed, max_steps=args.steps)
    else:
        play_human(seed=args.seed)


if __name__ == "__main__":
    main()
