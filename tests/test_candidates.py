import unittest

from tetris_autoplan.game.grid import World
from tetris_autoplan.game.pieces import Figure, FigureKind
from tetris_autoplan.planning.candidates import legal_subset, poses_at, poses_at_many, row_candidates


class TestPoses(unittest.TestCase):
    def test_four_poses_around_the_point(self) -> None:
        figure = Figure.create(FigureKind.L)
        poses = poses_at(figure, (4, 4))
        self.assertEqual(len(poses), 4)
        for pose in poses:
            self.assertEqual(pose.center, (4, 4))
        self.assertEqual(poses[0], figure.translated((4, 4)))
        self.assertEqual(poses[2], figure.translated((4, 4)).rotated(180))
        self.assertEqual(len({p.key for p in poses}), 4)

    def test_many_points_are_deduplicated(self) -> None:
        figure = Figure.create(FigureKind.T)
        points = [(1, 1), (2, 1), (1, 1), (3, 3)]
        poses = poses_at_many(figure, points)
        self.assertLessEqual(len(poses), 4 * len(points))
        self.assertEqual(len(poses), 12)
        self.assertEqual(len({p.key for p in poses}), len(poses))

    def test_first_occurrence_order_is_kept(self) -> None:
        figure = Figure.create(FigureKind.S)
        poses = poses_at_many(figure, [(2, 2), (5, 5)])
        self.assertEqual(poses[:4], poses_at(figure, (2, 2)))
        self.assertEqual(poses[4:], poses_at(figure, (5, 5)))

    def test_no_points_no_poses(self) -> None:
        self.assertEqual(poses_at_many(Figure.create(FigureKind.O), []), [])


class TestLegalSubset(unittest.TestCase):
    def setUp(self) -> None:
        self.world = World.from_rows([
            "....",
            "....",
            "....",
            "###.",
        ])

    def test_subset_is_legal(self) -> None:
        figure = Figure.create(FigureKind.O)
        candidates = poses_at_many(figure, [(x, y) for y in range(4) for x in range(4)])
        legal = legal_subset(self.world, candidates)
        self.assertTrue(legal)
        self.assertLess(len(legal), len(candidates))
        keys = {c.key for c in candidates}
        for pose in legal:
            self.assertIn(pose.key, keys)
            self.assertTrue(self.world.figure_in_bounds(pose))
            self.assertTrue(self.world.may_place(pose))

    def test_blocked_bottom_row_has_no_candidates(self) -> None:
        figure = Figure.create(FigureKind.O)
        self.assertEqual(row_candidates(self.world, figure, 3), [])
        self.assertTrue(row_candidates(self.world, figure, 2))


if __name__ == "__main__":
    unittest.main()
