import unittest

from rubik_nxn.scrambler import Scrambler, scramble_length


class TestScrambler(unittest.TestCase):
    def test_length_by_target_size(self):
        self.assertEqual(len(Scrambler(2, seed=0).moves), 15)
        self.assertEqual(len(Scrambler(3, seed=0).moves), 25)
        self.assertEqual(len(Scrambler(4, seed=0).moves), 40)
        self.assertEqual(len(Scrambler(17, seed=0).moves), 300)
        self.assertEqual(scramble_length(25), 460)

    def test_no_repeated_letter_at_distance_one_or_two(self):
        for size in range(2, 26):
            moves = Scrambler(size, seed=size).moves
            letters = [m.side_position for m in moves]
            for i in range(1, len(letters)):
                self.assertNotEqual(letters[i], letters[i - 1], msg=f"size={size} index={i}")
                if i >= 2:
                    self.assertNotEqual(letters[i], letters[i - 2], msg=f"size={size} index={i}")

    def test_moves_fit_target_cube(self):
        for size in range(2, 12):
            for move in Scrambler(size, seed=3):
                self.assertTrue(move.is_valid_for(size), msg=f"size={size} move={move}")

    def test_regenerate_keeps_length(self):
        scrambler = Scrambler(6, seed=42)
        first = scrambler.moves
        scrambler.regenerate()
        self.assertEqual(len(scrambler), len(first))
        self.assertNotEqual(scrambler.moves, first)
        scrambler.generate_new_scramble()
        self.assertEqual(len(scrambler), 80)

    def test_deterministic_for_fixed_seed(self):
        self.assertEqual(Scrambler(7, seed=123).moves, Scrambler(7, seed=123).moves)

    def test_moves_returns_copy(self):
        scrambler = Scrambler(3, seed=1)
        moves = scrambler.moves
        self.assertIsInstance(moves, tuple)
        self.assertEqual(moves, scrambler.moves)

    def test_str_joins_move_names(self):
        scrambler = Scrambler(5, seed=9)
        text = str(scrambler)
        self.assertEqual(text.split(" "), [m.name for m in scrambler.moves])

    def test_invalid_target_size_is_clamped(self):
        with self.assertLogs("rubik_nxn.scrambler", level="ERROR"):
            scrambler = Scrambler(1, seed=0)
        self.assertEqual(scrambler.target_cube_size, 3)
        self.assertEqual(len(scrambler), 25)


if __name__ == "__main__":
    unittest.main()
