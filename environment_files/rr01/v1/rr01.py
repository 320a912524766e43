"""
RR01 - Ricochet Proof: deliver the target robot to the target cell.

Four robots (red, yellow, blue, green) slide until something stops them:
a wall, the board edge or another robot. The target cell shows the color of
the robot that has to reach it. Hard levels add mirrors, which turn a
sliding robot 90°, and a wormhole pair, which teleports it.

Levels (16×16 cells, 4×4 pixels per cell):
    1. Classic      — quadrant-template board
    2. Scatter      — randomly scattered walls
    3. Classic+     — classic board with mirrors and a wormhole
    4. Scatter+     — scattered board with mirrors and a wormhole

Controls:
    ACTION1-4 = slide selected robot Up / Down / Left / Right
    ACTION5   = select next robot
    ACTION6   = click a robot to select it
    ACTION7   = undo last move
"""

import logging

import numpy as np
from arcengine import ARCBaseGame, Camera, GameAction, Level, Sprite
from arcengine.enums import BlockingMode

from ricochet import ROBOT_COLORS, Direction, ProofSession, XorShift32
from ricochet.config import GRID_SIZE

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CELL = 4
BOARD_PX = GRID_SIZE * CELL  # 64

FLOOR = 0          # palette: white
GRID_DOT = 1       # palette: light gray (cell corners)
MIRROR_CLR = 3     # palette: dark gray
WALL = 5           # palette: black
SELECT_CLR = 6     # palette: magenta
WORMHOLE_CLR = 15  # palette: purple

ROBOT_PALETTE = {
    "r": 8,   # red
    "y": 11,  # yellow
    "b": 9,   # blue
    "g": 14,  # green
}

ACTION_DIRS = {
    GameAction.ACTION1: Direction.UP,
    GameAction.ACTION2: Direction.DOWN,
    GameAction.ACTION3: Direction.LEFT,
    GameAction.ACTION4: Direction.RIGHT,
}

LEVEL_CONFIGS = [
    {"name": "Classic",   "mode": "c", "hard": False, "max_moves": 40},
    {"name": "Scatter",   "mode": "r", "hard": False, "max_moves": 40},
    {"name": "Classic+",  "mode": "c", "hard": True,  "max_moves": 50},
    {"name": "Scatter+",  "mode": "r", "hard": True,  "max_moves": 50},
]


# ---------------------------------------------------------------------------
# Board rendering
# ---------------------------------------------------------------------------


def draw_board(board, selected=None) -> np.ndarray:
    """Paint ``board`` into a BOARD_PX × BOARD_PX palette-index array."""
    size = board.size
    px = np.full((size * CELL, size * CELL), FLOOR, dtype=np.int8)

    for y in range(size):
        for x in range(size):
            ox, oy = x * CELL, y * CELL
            for cx, cy in ((0, 0), (CELL - 1, 0), (0, CELL - 1), (CELL - 1, CELL - 1)):
                px[oy + cy, ox + cx] = GRID_DOT
            up, right, down, left = board.walls[y][x]
            if up:
                px[oy, ox:ox + CELL] = WALL
            if down:
                px[oy + CELL - 1, ox:ox + CELL] = WALL
            if left:
                px[oy:oy + CELL, ox] = WALL
            if right:
                px[oy:oy + CELL, ox + CELL - 1] = WALL

    for mirror in board.mirrors:
        ox, oy = mirror.x * CELL + 1, mirror.y * CELL + 1
        if mirror.kind == "/":
            px[oy, ox + 1] = MIRROR_CLR
            px[oy + 1, ox] = MIRROR_CLR
        else:
            px[oy, ox] = MIRROR_CLR
            px[oy + 1, ox + 1] = MIRROR_CLR

    for wx, wy in board.wormholes:
        px[wy * CELL + 1:wy * CELL + 3, wx * CELL + 1:wx * CELL + 3] = WORMHOLE_CLR

    # Target: checkered in the target robot's color
    t = board.target
    tx, ty = t.x * CELL + 1, t.y * CELL + 1
    px[ty, tx] = ROBOT_PALETTE[t.color]
    px[ty + 1, tx + 1] = ROBOT_PALETTE[t.color]

    for color in ROBOT_COLORS:
        rx, ry = board.robots[color]
        ox, oy = rx * CELL, ry * CELL
        px[oy + 1:oy + 3, ox + 1:ox + 3] = ROBOT_PALETTE[color]
        if color == selected:
            for cx, cy in ((0, 0), (CELL - 1, 0), (0, CELL - 1), (CELL - 1, CELL - 1)):
                px[oy + cy, ox + cx] = SELECT_CLR
    return px


# ---------------------------------------------------------------------------
# Main game class
# ---------------------------------------------------------------------------


class Rr01(ARCBaseGame):
    """rr01 puzzle game — Ricochet Proof."""

    def __init__(self, seed: int = 0):
        rng = XorShift32(seed)
        self._level_seeds = [rng.next() for _ in LEVEL_CONFIGS]
        self.session = None
        self.max_moves = 0

        levels = [
            Level(sprites=[], grid_size=(BOARD_PX, BOARD_PX), name=cfg["name"])
            for cfg in LEVEL_CONFIGS
        ]

        camera = Camera(
            background=FLOOR,
            letter_box=WALL,
            width=BOARD_PX,
            height=BOARD_PX,
        )

        super().__init__(
            game_id="rr01",
            levels=levels,
            camera=camera,
            available_actions=[1, 2, 3, 4, 5, 6, 7],
            seed=seed,
        )

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------

    def on_set_level(self, level):
        cfg = LEVEL_CONFIGS[self.level_index]
        self.session = ProofSession(
            self._level_seeds[self.level_index],
            mode=cfg["mode"],
            hard=cfg["hard"],
        )
        self.session.select(self.session.board.target.color)
        self.max_moves = cfg["max_moves"]
        logger.info("Level %d seed=%d", self.level_index + 1, self.session.seed)
        self._rebuild_sprites(level)

    def _rebuild_sprites(self, level):
        level.remove_all_sprites()
        pixels = draw_board(self.session.board, self.session.selected)
        level.add_sprite(
            Sprite(
                pixels=pixels.tolist(), name="board", x=0, y=0, layer=0,
                blocking=BlockingMode.NOT_BLOCKED, collidable=False,
            )
        )

    # ------------------------------------------------------------------
    # Core game loop
    # ------------------------------------------------------------------

    def step(self):
        aid = self.action.id
        session = self.session
        moved = False

        if aid in ACTION_DIRS:
            moved = session.move_selected(ACTION_DIRS[aid])
        elif aid == GameAction.ACTION5:
            self._cycle_selection()
        elif aid == GameAction.ACTION6:
            self._handle_click()
        elif aid == GameAction.ACTION7:
            session.undo()

        self._rebuild_sprites(self.current_level)

        if moved and session.solved:
            logger.info("Level %d proof: %s", self.level_index + 1, session.moves)
            self.next_level()
        elif session.proof_count >= self.max_moves:
            self.lose()

        self.complete_action()

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def _cycle_selection(self):
        current = self.session.selected
        idx = ROBOT_COLORS.index(current) if current in ROBOT_COLORS else -1
        self.session.select(ROBOT_COLORS[(idx + 1) % len(ROBOT_COLORS)])

    def _handle_click(self):
        display_x = self.action.data.get("x", None)
        display_y = self.action.data.get("y", None)
        if display_x is None or display_y is None:
            return
        grid_coords = self.camera.display_to_grid(display_x, display_y)
        if grid_coords is None:
            return
        self.session.select_at(grid_coords[0] // CELL, grid_coords[1] // CELL)
