import unittest

import numpy as np

from rubik_nxn.colors import StickerColor
from rubik_nxn.side import COL, ROW, Side


class TestSide(unittest.TestCase):
    def setUp(self):
        self.side = Side.from_grid("F", [[0, 1, 2], [3, 4, 5], [0, 0, 0]])

    def test_new_side_is_monochrome(self):
        for size in range(2, 8):
            side = Side(size, StickerColor.GREEN, "R")
            self.assertEqual(side.size, size)
            self.assertEqual(side.position, "R")
            self.assertTrue(side.is_monochrome())
            self.assertEqual(side.get_color_at(size - 1, size - 1), StickerColor.GREEN)

    def test_rotate_clockwise(self):
        self.side.rotate_clockwise()
        self.assertTrue(np.array_equal(self.side.as_array(), [[0, 3, 0], [0, 4, 1], [0, 5, 2]]))

    def test_rotate_counter_clockwise(self):
        self.side.rotate_counter_clockwise()
        self.assertTrue(np.array_equal(self.side.as_array(), [[2, 5, 0], [1, 4, 0], [0, 3, 0]]))

    def test_spins_are_inverse_and_order_four(self):
        grid = np.arange(16).reshape(4, 4) % 6
        side = Side.from_grid("U", grid)
        side.rotate_clockwise()
        side.rotate_counter_clockwise()
        self.assertTrue(np.array_equal(side.as_array(), grid))
        for _ in range(4):
            side.rotate_clockwise()
        self.assertTrue(np.array_equal(side.as_array(), grid))

    def test_get_color_out_of_range_returns_none(self):
        with self.assertLogs("rubik_nxn.side", level="ERROR"):
            self.assertIsNone(self.side.get_color_at(3, 0))
        with self.assertLogs("rubik_nxn.side", level="ERROR"):
            self.assertIsNone(self.side.get_color_at(0, -1))

    def test_set_color_out_of_range_is_noop(self):
        before = self.side.as_array()
        with self.assertLogs("rubik_nxn.side", level="ERROR"):
            self.assertFalse(self.side.set_color_at(-1, 2, StickerColor.BLUE))
        self.assertTrue(np.array_equal(before, self.side.as_array()))

    def test_set_color_in_range(self):
        self.assertTrue(self.side.set_color_at(2, 1, StickerColor.BLUE))
        self.assertEqual(self.side.get_color_at(2, 1), StickerColor.BLUE)
        self.assertEqual(self.side.colors[2], [StickerColor.RED, StickerColor.BLUE, StickerColor.RED])

    def test_line_access_with_reversal(self):
        self.assertEqual(self.side.read_line(ROW, 1).tolist(), [3, 4, 5])
        self.assertEqual(self.side.read_line(COL, 2, reverse=True).tolist(), [0, 5, 2])
        self.side.write_line(COL, 0, np.array([1, 2, 3], dtype=np.int8), reverse=True)
        self.assertEqual(self.side.read_line(COL, 0).tolist(), [3, 2, 1])

    def test_invalid_grid_rejected(self):
        with self.assertRaises(ValueError):
            Side.from_grid("U", [[0, 1], [2, 9]])
        with self.assertRaises(ValueError):
            Side.from_grid("U", [[0, 1, 2], [2, 3, 4]])
        with self.assertRaises(ValueError):
            Side(3, StickerColor.RED, "M")

    def test_grid_smaller_than_two_rejected(self):
        with self.assertRaises(ValueError):
            Side.from_grid("U", [[0]])
        with self.assertRaises(ValueError):
            Side.from_grid("U", np.zeros((0, 0), dtype=np.int8))

    def test_non_integer_grid_rejected(self):
        with self.assertRaises(ValueError):
            Side.from_grid("U", [[0.0, 1.5], [2.0, 3.0]])
        with self.assertRaises(ValueError):
            Side.from_grid("U", [["RED", "RED"], ["RED", "RED"]])

    def test_str_uses_color_codes(self):
        self.assertEqual(str(Side(2, StickerColor.WHITE, "F")), "w w w w")
        self.assertEqual(str(self.side), "r w g o y b r r r")


if __name__ == "__main__":
    unittest.main()
