import importlib.util
from pathlib import Path

import pytest

pytest.importorskip("arcengine")

from arcengine import GameAction  # noqa: E402

from ricochet.board import ROBOT_COLORS, Direction, Mirror, Target  # noqa: E402
from ricochet.movement import move_robot_one  # noqa: E402
from ricochet.moves import parse_moves  # noqa: E402
from ricochet.search import find_proof  # noqa: E402

from conftest import build_board  # noqa: E402

ENV_DIR = Path(__file__).resolve().parent.parent / "environment_files"
RR01_PATH = ENV_DIR / "rr01" / "v1" / "rr01.py"


@pytest.fixture(scope="module")
def rr01():
    spec = importlib.util.spec_from_file_location("rr01", RR01_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def env():
    arc_agi = pytest.importorskip("arc_agi")
    arc = arc_agi.Arcade(environments_dir=str(ENV_DIR))
    env = arc.make("rr01-v1", seed=7)
    assert env is not None
    env.reset()
    return env


@pytest.fixture
def dir_actions(rr01):
    return {direction: action for action, direction in rr01.ACTION_DIRS.items()}


def legal_direction(board, color):
    for d in Direction:
        if move_robot_one(board.copy(), color, d):
            return d
    return None


def movable_bystander(session):
    """A robot that can move but is not the one the target asks for."""
    for color in ROBOT_COLORS:
        if color == session.board.target.color:
            continue
        if legal_direction(session.board, color) is not None:
            return color
    raise AssertionError("no movable robot besides the target robot")


def click(env, rr01, board, color):
    x, y = board.robots[color]
    return env.step(GameAction.ACTION6, data={"x": x * rr01.CELL + 1, "y": y * rr01.CELL + 1})


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def test_draw_board_shape_and_walls(rr01):
    board = build_board()
    px = rr01.draw_board(board)
    assert px.shape == (rr01.BOARD_PX, rr01.BOARD_PX)
    # top boundary of cell (5, 0) and left boundary of cell (0, 5)
    assert (px[0, 20:24] == rr01.WALL).all()
    assert (px[20:24, 0] == rr01.WALL).all()
    # interior of an empty cell stays floor
    assert px[4 * 5 + 1, 4 * 5 + 1] == rr01.FLOOR


def test_draw_board_robots_target_and_selection(rr01):
    board = build_board(robots={"y": (6, 6)}, target=Target(9, 9, "b"))
    px = rr01.draw_board(board, selected="y")
    assert px[25, 25] == rr01.ROBOT_PALETTE["y"]
    assert px[24, 24] == rr01.SELECT_CLR
    assert px[37, 37] == rr01.ROBOT_PALETTE["b"]
    assert px[37, 38] == rr01.FLOOR


def test_draw_board_overlays(rr01):
    board = build_board(mirrors=[Mirror(4, 4, "/")], wormholes=[(10, 10), (12, 3)])
    px = rr01.draw_board(board)
    assert px[17, 18] == rr01.MIRROR_CLR
    assert px[18, 17] == rr01.MIRROR_CLR
    assert px[41, 41] == rr01.WORMHOLE_CLR
    assert px[13, 49] == rr01.WORMHOLE_CLR


def test_level_configs_cover_both_modes(rr01):
    modes = {(cfg["mode"], cfg["hard"]) for cfg in rr01.LEVEL_CONFIGS}
    assert modes == {("c", False), ("r", False), ("c", True), ("r", True)}


# ---------------------------------------------------------------------------
# Game loop
# ---------------------------------------------------------------------------


def test_level_starts_with_target_robot_selected(env):
    game = env._game
    assert game.level_index == 0
    assert game.session.selected == game.session.board.target.color
    assert game.session.proof_count == 0


def test_select_action_cycles_robots(env):
    game = env._game
    start = ROBOT_COLORS.index(game.session.selected)
    seen = []
    for _ in range(len(ROBOT_COLORS)):
        env.step(GameAction.ACTION5)
        seen.append(game.session.selected)
    expected = [ROBOT_COLORS[(start + k) % 4] for k in range(1, 5)]
    assert seen == expected
    assert seen[-1] == ROBOT_COLORS[start]


def test_click_selects_robot_under_cursor(env, rr01):
    game = env._game
    other = next(c for c in ROBOT_COLORS if c != game.session.selected)
    click(env, rr01, game.session.board, other)
    assert game.session.selected == other


def test_click_on_empty_cell_keeps_selection(env, rr01):
    game = env._game
    selected = game.session.selected
    occupied = set(game.session.board.robots.values())
    x, y = next((x, y) for y in range(16) for x in range(16) if (x, y) not in occupied)
    env.step(GameAction.ACTION6, data={"x": x * rr01.CELL + 1, "y": y * rr01.CELL + 1})
    assert game.session.selected == selected


def test_move_then_undo_restores_board(env, dir_actions):
    game = env._game
    before = game.session.board.copy()
    color = movable_bystander(game.session)
    game.session.select(color)
    direction = legal_direction(before, color)

    env.step(dir_actions[direction])
    expected = before.copy()
    move_robot_one(expected, color, direction)
    assert game.session.board.robots == expected.robots
    assert game.session.moves == color + direction.char

    env.step(GameAction.ACTION7)
    assert game.session.board == before
    assert game.session.proof_count == 0


def test_move_budget_ends_in_loss(env, dir_actions):
    game = env._game
    game.max_moves = 2
    color = movable_bystander(game.session)
    game.session.select(color)
    direction = legal_direction(game.session.board, color)

    frame = env.step(dir_actions[direction])
    assert game.session.proof_count == 1
    assert frame.state.name == "NOT_FINISHED"

    # blocked the same way now, so nothing is spent
    frame = env.step(dir_actions[direction])
    assert game.session.proof_count == 1
    assert frame.state.name == "NOT_FINISHED"

    frame = env.step(dir_actions[direction.opposite])
    assert game.session.proof_count == 2
    assert frame.state.name == "GAME_OVER"


def test_replayed_proof_advances_level(env, rr01, dir_actions):
    game = env._game
    session = game.session
    color = session.board.target.color
    direction = legal_direction(session.board, color)
    landing = session.board.copy()
    move_robot_one(landing, color, direction)
    x, y = landing.robots[color]
    session.board.target = Target(x, y, color)

    proof = find_proof(session.board, 3, 20000)
    assert proof

    frame = None
    for mover, step in parse_moves(proof):
        click(env, rr01, game.session.board, mover)
        frame = env.step(dir_actions[step])
    assert frame.levels_completed == 1
    assert game.level_index == 1
    assert game.session.proof_count == 0
