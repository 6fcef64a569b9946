import unittest

from tetris_autoplan.game.grid import World
from tetris_autoplan.game.pieces import Figure, FigureKind
from tetris_autoplan.planning.planner import Planner, find_path, pose_distance, solve, successor_poses


class PlanAssertions(unittest.TestCase):
    def assertValidPlan(self, world: World, start: Figure, plan) -> None:
        self.assertTrue(plan)
        self.assertEqual(plan[0], start)
        for pose in plan[1:]:
            self.assertTrue(world.figure_in_bounds(pose))
            self.assertTrue(world.may_place(pose))
        for prev, nxt in zip(plan, plan[1:]):
            reachable = {p.key for p in successor_poses(world, prev)}
            self.assertIn(nxt.key, reachable)


class TestSuccessors(PlanAssertions):
    def test_square_in_corner(self) -> None:
        world = World(4, 4)
        square = Figure.create(FigureKind.O)
        keys = [p.key for p in successor_poses(world, square)]
        self.assertEqual(keys, [square.moved(0, 1).key, square.moved(1, 0).key, square.key])

    def test_successors_respect_walls(self) -> None:
        world = World.from_rows([
            "....",
            "....",
            "##..",
            "....",
        ])
        square = Figure.create(FigureKind.O)
        self.assertNotIn(square.moved(0, 1).key, {p.key for p in successor_poses(world, square)})

    def test_pose_distance_is_mean_manhattan(self) -> None:
        square = Figure.create(FigureKind.O)
        self.assertEqual(pose_distance(square.moved(2, 1), square), 3.0)
        self.assertEqual(pose_distance(square, square), 0.0)


class TestFindPath(PlanAssertions):
    def test_start_is_goal(self) -> None:
        world = World(4, 4)
        square = Figure.create(FigureKind.O)
        self.assertEqual(find_path(world, square, square), (square,))

    def test_path_reaches_goal_with_rotation(self) -> None:
        world = World(5, 5)
        start = Figure.create(FigureKind.L)
        goal = start.translated((2, 3)).rotated(90)
        plan = find_path(world, start, goal)
        self.assertValidPlan(world, start, plan)
        self.assertEqual(plan[-1], goal)

    def test_figure_never_rises(self) -> None:
        world = World(4, 4)
        start = Figure.create(FigureKind.O).moved(0, 2)
        self.assertEqual(find_path(world, start, Figure.create(FigureKind.O)), ())

    def test_expansion_cap_gives_empty_plan(self) -> None:
        world = World(6, 6)
        start = Figure.create(FigureKind.O)
        self.assertEqual(find_path(world, start, start.moved(3, 4), max_expansions=2), ())


class TestSolve(PlanAssertions):
    def test_empty_world_lands_on_bottom_row(self) -> None:
        world = World(4, 4)
        square = Figure.create(FigureKind.O)
        plan = solve(world, square)
        self.assertValidPlan(world, square, plan)
        (_, _), (_, y1) = plan[-1].bounds()
        self.assertEqual(y1, 3)

    def test_blocked_bottom_row_settles_one_higher(self) -> None:
        world = World.from_rows([
            "....",
            "....",
            "....",
            "###.",
        ])
        square = Figure.create(FigureKind.O)
        plan = solve(world, square)
        self.assertValidPlan(world, square, plan)
        (_, _), (_, y1) = plan[-1].bounds()
        self.assertEqual(y1, 2)

    def test_full_world_has_no_plan(self) -> None:
        world = World.from_rows(["####"] * 4)
        self.assertEqual(solve(world, Figure.create(FigureKind.O)), ())

    def test_unreachable_rows_fall_through(self) -> None:
        world = World.from_rows([
            "....",
            "....",
            "####",
            "....",
            "....",
            "....",
        ])
        square = Figure.create(FigureKind.O)
        plan = solve(world, square)
        self.assertValidPlan(world, square, plan)
        self.assertEqual(plan[-1].center[1], 0)
        (_, y0), (_, y1) = plan[-1].bounds()
        self.assertEqual((y0, y1), (0, 1))

    def test_every_kind_lands_in_empty_world(self) -> None:
        world = World(6, 6)
        for kind in FigureKind:
            with self.subTest(kind=kind.name):
                figure = Figure.create(kind).moved(1, 0)
                plan = solve(world, figure)
                self.assertValidPlan(world, figure, plan)
                (_, _), (_, y1) = plan[-1].bounds()
                self.assertEqual(y1, 5)

    def test_world_is_not_modified(self) -> None:
        world = World.from_rows([
            "......",
            "......",
            "......",
            "..#...",
            ".##..#",
            "###.##",
        ])
        before = world.to_text()
        solve(world, Figure.create(FigureKind.T))
        self.assertEqual(world.to_text(), before)


class TestPlanner(PlanAssertions):
    def test_rejects_non_positive_cap(self) -> None:
        with self.assertRaises(ValueError):
            Planner(max_expansions=0)

    def test_cap_limits_plan_depth(self) -> None:
        world = World(4, 4)
        square = Figure.create(FigureKind.O)
        plan = Planner(max_expansions=1).solve(world, square)
        self.assertTrue(1 <= len(plan) <= 2)

    def test_unbounded_planner_matches_solve(self) -> None:
        world = World(4, 4)
        square = Figure.create(FigureKind.O)
        self.assertEqual(Planner().solve(world, square), solve(world, square))


if __name__ == "__main__":
    unittest.main()
