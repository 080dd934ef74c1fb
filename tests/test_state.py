import unittest

from galaxies_core.board import pl
from galaxies_core.state import DEFAULT_SIZE, PuzzleState


class TestPuzzleState(unittest.TestCase):
    def test_given_default_board_when_created_then_seven_by_seven(self):
        s = PuzzleState()
        self.assertEqual((s.cols, s.rows), (DEFAULT_SIZE, DEFAULT_SIZE))
        self.assertEqual((s.xlim, s.ylim), (15, 15))
        self.assertEqual(len(list(s.cells())), 49)
        self.assertEqual(s.centers(), ())
        self.assertEqual(s.boundaries(), frozenset())

    def test_given_bad_size_when_resizing_then_value_error(self):
        with self.assertRaises(ValueError):
            PuzzleState(0, 3)
        s = PuzzleState(2, 2)
        with self.assertRaises(ValueError):
            s.resize(3, -1)

    def test_given_frame_edges_when_querying_boundary_then_every_side_is_boundary(self):
        s = PuzzleState(3, 2)  # xlim 7, ylim 5
        self.assertTrue(s.is_boundary(pl(0, 1)))   # left
        self.assertTrue(s.is_boundary(pl(6, 3)))   # right
        self.assertTrue(s.is_boundary(pl(3, 4)))   # top
        self.assertTrue(s.is_boundary(pl(1, 0)))   # bottom
        self.assertTrue(s.is_boundary(pl(5, 0)))   # bottom
        # Corners and frame intersections are not edges, hence never boundaries.
        self.assertFalse(s.is_boundary(pl(0, 0)))
        self.assertFalse(s.is_boundary(pl(2, 0)))
        self.assertFalse(s.is_boundary(pl(6, 4)))
        self.assertFalse(s.is_boundary(pl(2, 1)))  # inner edge
        self.assertFalse(s.is_boundary(pl(1, 1)))  # cell

    def test_given_inner_edge_when_toggled_twice_then_boundary_comes_and_goes(self):
        s = PuzzleState(3, 3)
        s.toggle_boundary(pl(2, 3))
        self.assertTrue(s.is_boundary(pl(2, 3)))
        self.assertIn(pl(2, 3), s.boundaries())
        s.toggle_boundary((2, 3))
        self.assertFalse(s.is_boundary(pl(2, 3)))

    def test_given_frame_edge_when_toggled_then_still_boundary(self):
        s = PuzzleState(3, 3)
        s.toggle_boundary(pl(0, 3))
        self.assertTrue(s.is_boundary(pl(0, 3)))
        s.toggle_boundary(pl(0, 3))
        self.assertTrue(s.is_boundary(pl(0, 3)))

    def test_given_non_edge_when_toggled_then_value_error(self):
        s = PuzzleState(3, 3)
        for p in [pl(1, 1), pl(2, 2), pl(9, 1)]:
            with self.assertRaises(ValueError):
                s.toggle_boundary(p)

    def test_given_centers_when_placed_then_ordered_and_deduplicated(self):
        s = PuzzleState(3, 3)
        s.place_center(pl(3, 3))
        s.place_center(pl(2, 2))
        s.place_center(pl(3, 3))
        self.assertEqual(s.centers(), (pl(3, 3), pl(2, 2)))
        self.assertTrue(s.is_center(pl(2, 2)))
        self.assertFalse(s.is_center(pl(1, 1)))
        s.remove_center(pl(3, 3))
        self.assertEqual(s.centers(), (pl(2, 2),))
        s.remove_center(pl(5, 5))  # absent: no-op
        self.assertEqual(s.centers(), (pl(2, 2),))

    def test_given_frame_or_outside_point_when_placing_center_then_value_error(self):
        s = PuzzleState(3, 3)
        for p in [pl(0, 3), pl(3, 0), pl(6, 6), pl(7, 3), pl(-1, -1)]:
            with self.assertRaises(ValueError):
                s.place_center(p)
        self.assertEqual(s.centers(), ())

    def test_given_cells_when_marking_then_values_and_sentinel(self):
        s = PuzzleState(3, 3)
        self.assertEqual(s.mark(pl(1, 1)), 0)
        s.set_mark(pl(1, 1), 4)
        self.assertEqual(s.mark(pl(1, 1)), 4)
        # Non-cells give the invalid sentinel, never a mark value.
        self.assertIsNone(s.mark(pl(2, 1)))
        self.assertIsNone(s.mark(pl(2, 2)))
        self.assertIsNone(s.mark(pl(7, 7)))

    def test_given_bad_arguments_when_setting_mark_then_value_error(self):
        s = PuzzleState(3, 3)
        with self.assertRaises(ValueError):
            s.set_mark(pl(1, 1), -1)
        with self.assertRaises(ValueError):
            s.set_mark(pl(2, 1), 1)
        with self.assertRaises(ValueError):
            s.mark_all(-2)
        self.assertEqual(s.mark(pl(1, 1)), 0)

    def test_given_fractional_coordinates_when_editing_then_rejected_not_truncated(self):
        s = PuzzleState(3, 3)
        self.assertIsNone(s.mark((1.5, 1)))
        self.assertIsNone(s.mark((1.0, 1.0)))
        with self.assertRaises(ValueError):
            s.set_mark((1.9, 1.2), 1)
        with self.assertRaises(ValueError):
            s.set_mark(pl(1, 1), 1.5)
        with self.assertRaises(ValueError):
            s.set_mark(pl(1, 1), True)
        with self.assertRaises(ValueError):
            s.toggle_boundary((2.0, 1))
        with self.assertRaises(ValueError):
            s.place_center((3.5, 3))
        self.assertEqual(s.marked_cells(), {})
        self.assertEqual(s.boundaries(), frozenset())
        self.assertEqual(s.centers(), ())

    def test_given_one_bad_cell_when_mark_all_then_no_cell_is_written(self):
        s = PuzzleState(3, 3)
        with self.assertRaises(ValueError):
            s.mark_all(2, [pl(1, 1), pl(2, 2)])
        self.assertEqual(s.marked_cells(), {})
        with self.assertRaises(ValueError):
            s.mark_all(2, [pl(1, 1), (3.5, 3)])
        self.assertEqual(s.mark(pl(1, 1)), 0)

    def test_given_marked_cells_when_mark_all_then_only_known_cells_touched(self):
        s = PuzzleState(3, 3)
        s.mark_all(2, [pl(1, 1), pl(3, 3)])
        self.assertEqual(s.marked_cells(), {pl(1, 1): 2, pl(3, 3): 2})
        s.mark_all(5)
        self.assertEqual(s.marked_cells(), {pl(1, 1): 5, pl(3, 3): 5})
        self.assertEqual(s.mark(pl(5, 5)), 0)
        s.mark_all(0)
        self.assertEqual(s.marked_cells(), {})
        for c in s.cells():
            self.assertGreaterEqual(s.mark(c), 0)

    def test_given_edited_board_when_cleared_then_only_frame_remains(self):
        s = PuzzleState(3, 2)
        s.toggle_boundary(pl(2, 1))
        s.place_center(pl(3, 2))
        s.set_mark(pl(1, 1), 1)
        s.clear()
        self.assertEqual((s.cols, s.rows), (3, 2))
        self.assertEqual(s.boundaries(), frozenset())
        self.assertEqual(s.centers(), ())
        self.assertEqual(s.marked_cells(), {})
        self.assertTrue(s.is_boundary(pl(1, 0)))
        s.resize(4, 4)
        self.assertEqual((s.xlim, s.ylim), (9, 9))

    def test_given_board_when_copied_then_copies_are_independent(self):
        s = PuzzleState(3, 3)
        s.place_center(pl(3, 3))
        t = s.copy()
        t.place_center(pl(2, 2))
        t.toggle_boundary(pl(2, 3))
        t.set_mark(pl(1, 1), 3)
        self.assertEqual(s.centers(), (pl(3, 3),))
        self.assertFalse(s.is_boundary(pl(2, 3)))
        self.assertEqual(s.mark(pl(1, 1)), 0)
        self.assertEqual(t.centers(), (pl(3, 3), pl(2, 2)))

    def test_given_single_cell_board_when_pretty_then_frame_drawn(self):
        s = PuzzleState(1, 1)
        self.assertEqual(s.pretty(), " = \nI I\n = \n")
        s.place_center(pl(1, 1))
        self.assertEqual(s.pretty(), " = \nIoI\n = \n")
        s.set_mark(pl(1, 1), 1)
        self.assertEqual(str(s), " = \nIOI\n = \n")

    def test_given_edge_center_and_inner_boundary_when_pretty_then_symbols_rendered(self):
        s = PuzzleState(2, 2)
        s.place_center(pl(2, 1))
        s.toggle_boundary(pl(1, 2))
        s.set_mark(pl(3, 3), 1)
        lines = s.pretty().splitlines()
        self.assertEqual(lines[0], " = = ")
        self.assertEqual(lines[1], "I |*I")
        self.assertEqual(lines[2], " = - ")
        self.assertEqual(lines[3], "I o I")
        self.assertEqual(lines[4], " = = ")


if __name__ == '__main__':
    unittest.main(verbosity=2)
