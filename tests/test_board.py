from ricochet.board import (
    Board,
    Direction,
    Mirror,
    Target,
    add_wall,
    has_any_wall,
    has_wall,
    make_walls,
)

from conftest import build_board


class TestDirection:
    def test_vectors_and_opposites(self):
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
        assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
        for d in Direction:
            assert d.opposite.opposite is d
            assert d.opposite.dx == -d.dx and d.opposite.dy == -d.dy

    def test_chars_round_trip(self):
        assert [d.char for d in Direction] == ["u", "r", "d", "l"]
        assert Direction.from_char("L") is Direction.LEFT

    def test_rotation_is_clockwise(self):
        assert Direction.UP.rotated(1) is Direction.RIGHT
        assert Direction.LEFT.rotated(1) is Direction.UP
        assert Direction.DOWN.rotated(6) is Direction.UP


class TestWalls:
    def test_boundary_is_closed(self):
        walls = make_walls(5)
        for i in range(5):
            assert has_wall(walls, i, 0, Direction.UP)
            assert has_wall(walls, i, 4, Direction.DOWN)
            assert has_wall(walls, 0, i, Direction.LEFT)
            assert has_wall(walls, 4, i, Direction.RIGHT)
        assert not has_any_wall(walls, 2, 2)

    def test_add_wall_mirrors_onto_neighbour(self):
        walls = make_walls(5)
        assert add_wall(walls, 2, 2, Direction.RIGHT)
        assert has_wall(walls, 2, 2, Direction.RIGHT)
        assert has_wall(walls, 3, 2, Direction.LEFT)
        assert add_wall(walls, 1, 1, Direction.UP)
        assert has_wall(walls, 1, 0, Direction.DOWN)

    def test_add_wall_out_of_bounds_is_refused(self):
        walls = make_walls(5)
        assert not add_wall(walls, 5, 0, Direction.LEFT)
        assert not add_wall(walls, -1, 2, Direction.RIGHT)
        assert not has_wall(walls, 4, 0, Direction.LEFT)


class TestBoard:
    def test_is_solved_checks_target_color(self):
        board = build_board(robots={"y": (4, 4)}, target=Target(4, 4, "y"))
        assert board.is_solved()
        board.target = Target(4, 4, "r")
        assert not board.is_solved()

    def test_copy_is_independent(self):
        board = build_board(robots={"r": (5, 5)})
        clone = board.copy()
        clone.robots["r"] = (6, 6)
        clone.walls[5][5][0] = True
        clone.markers.append("x")
        assert board.robots["r"] == (5, 5)
        assert not board.walls[5][5][0]
        assert board.markers == []
        assert clone != board

    def test_overlay_lookups(self):
        board = build_board(
            mirrors=[Mirror(4, 4, "/")],
            wormholes=[(2, 2), (9, 9)],
        )
        assert board.mirror_at(4, 4).kind == "/"
        assert board.mirror_at(5, 4) is None
        assert board.wormhole_exit(2, 2) == (9, 9)
        assert board.wormhole_exit(9, 9) == (2, 2)
        assert board.wormhole_exit(3, 3) is None

    def test_single_wormhole_is_inert(self):
        board = build_board(wormholes=[(2, 2)])
        assert board.wormhole_exit(2, 2) is None

    def test_robot_at(self):
        board = build_board(robots={"g": (7, 3)})
        assert board.robot_at(7, 3) == "g"
        assert board.robot_at(8, 3) is None

    def test_to_text_shows_robots_and_target(self):
        board = build_board(size=4, robots={"r": (0, 0), "y": (1, 0), "b": (2, 0), "g": (3, 0)},
                            target=Target(3, 3, "b"))
        text = board.to_text()
        lines = text.splitlines()
        assert len(lines) == 2 * 4 + 1
        assert lines[0] == "+---+---+---+---+"
        assert lines[1] == "| R   Y   B   G |"
        assert " b |" in lines[7]

    def test_equality_ignores_markers(self):
        a = build_board()
        b = build_board()
        b.markers.append(("anything",))
        assert a == b
        assert isinstance(a, Board)
