import unittest

from crossword_architect.core.constants import Orientation
from crossword_architect.core.exceptions import PlacementBoundsError
from crossword_architect.core.models import Placement
from crossword_architect.engine.grid import LetterGrid, derive_board


def _placement(word_id: str, word: str, row: int, col: int, orientation: Orientation) -> Placement:
    return Placement(id=word_id, word=word, clue=f"Clue for {word}", row=row, col=col, orientation=orientation)


class DeriveBoardTests(unittest.TestCase):
    def test_empty_placements_give_empty_board(self) -> None:
        board, clues = derive_board([], 5, 6)
        self.assertEqual(board.rows, 5)
        self.assertEqual(board.cols, 6)
        self.assertEqual(clues, [])
        for row in board.cells:
            for cell in row:
                self.assertIsNone(cell.letter)
                self.assertIsNone(cell.clue_number)
                self.assertEqual(cell.word_ids, set())
                self.assertFalse(cell.is_error)

    def test_letters_written_along_orientation(self) -> None:
        placements = [
            _placement("a", "CAT", 0, 0, Orientation.ACROSS),
            _placement("b", "ART", 0, 1, Orientation.DOWN),
        ]
        board, _ = derive_board(placements, 5, 5)
        self.assertEqual([board.letter_at(0, c) for c in range(3)], ["C", "A", "T"])
        self.assertEqual([board.letter_at(r, 1) for r in range(3)], ["A", "R", "T"])
        self.assertEqual(board.cell(0, 1).word_ids, {"a", "b"})
        self.assertFalse(board.has_collisions)

    def test_derivation_is_deterministic(self) -> None:
        placements = [
            _placement("a", "REACT", 7, 5, Orientation.ACROSS),
            _placement("b", "STATE", 6, 9, Orientation.DOWN),
        ]
        first = derive_board(placements, 15, 15)
        second = derive_board(placements, 15, 15)
        self.assertEqual(first, second)
        self.assertEqual(first[0].to_jsonable(), second[0].to_jsonable())

    def test_collision_flag_independent_of_order(self) -> None:
        across = _placement("a", "CAT", 0, 0, Orientation.ACROSS)
        down = _placement("b", "DOG", 0, 1, Orientation.DOWN)
        for order in ([across, down], [down, across]):
            board, _ = derive_board(order, 5, 5)
            self.assertTrue(board.cell(0, 1).is_error)
            self.assertTrue(board.has_collisions)
            self.assertFalse(board.cell(0, 0).is_error)

    def test_numbering_is_row_major_and_shared_at_origin(self) -> None:
        placements = [
            _placement("low", "DOG", 2, 0, Orientation.ACROSS),
            _placement("down", "TOE", 0, 3, Orientation.DOWN),
            _placement("across", "TO", 0, 3, Orientation.ACROSS),
        ]
        board, clues = derive_board(placements, 6, 6)
        self.assertEqual(board.cell(0, 3).clue_number, 1)
        self.assertEqual(board.cell(2, 0).clue_number, 2)
        self.assertEqual([entry.number for entry in clues], [1, 1, 2])
        self.assertEqual([entry.word for entry in clues], ["TOE", "TO", "DOG"])
        numbers = {p.id: p.number for p in board.placements}
        self.assertEqual(numbers, {"low": 2, "down": 1, "across": 1})

    def test_inputs_are_not_mutated(self) -> None:
        placement = _placement("a", "CAT", 1, 1, Orientation.ACROSS)
        board, _ = derive_board([placement], 5, 5)
        self.assertIsNone(placement.number)
        self.assertEqual(board.placement("a").number, 1)

    def test_out_of_bounds_cells_are_clipped(self) -> None:
        board, clues = derive_board([_placement("a", "CAT", 0, 3, Orientation.ACROSS)], 4, 4)
        self.assertEqual(board.letter_at(0, 3), "C")
        self.assertEqual(len(clues), 1)

    def test_strict_derivation_rejects_out_of_bounds(self) -> None:
        with self.assertRaises(PlacementBoundsError):
            derive_board([_placement("a", "CAT", 0, 3, Orientation.ACROSS)], 4, 4, strict=True)

    def test_off_board_origin_gets_no_number(self) -> None:
        placements = [
            _placement("cat", "CAT", -1, 0, Orientation.DOWN),
            _placement("dog", "DOG", 0, 2, Orientation.ACROSS),
        ]
        board, clues = derive_board(placements, 5, 5)
        self.assertEqual(board.letter_at(0, 0), "A")
        self.assertIsNone(board.cell(0, 0).clue_number)
        self.assertEqual(board.cell(0, 2).clue_number, 1)
        self.assertEqual([(entry.number, entry.word) for entry in clues], [(1, "DOG")])
        self.assertIsNone(board.placement("cat").number)
        self.assertEqual(board.placement("dog").number, 1)

    def test_origin_past_far_edge_has_no_clue(self) -> None:
        placements = [
            _placement("in", "TO", 1, 1, Orientation.ACROSS),
            _placement("out", "DOG", 6, 0, Orientation.ACROSS),
        ]
        board, clues = derive_board(placements, 5, 5)
        numbered = [
            board.cell(r, c).clue_number
            for r in range(board.rows)
            for c in range(board.cols)
            if board.cell(r, c).clue_number is not None
        ]
        self.assertEqual(numbered, [1])
        self.assertEqual([entry.word for entry in clues], ["TO"])
        self.assertIsNone(board.placement("out").number)

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            derive_board([], 0, 5)
        with self.assertRaises(ValueError):
            derive_board([], 5, -1)

    def test_jsonable_sorts_word_ids(self) -> None:
        placements = [
            _placement("z", "CAT", 0, 0, Orientation.ACROSS),
            _placement("a", "ART", 0, 1, Orientation.DOWN),
        ]
        board, _ = derive_board(placements, 3, 3)
        payload = board.to_jsonable()
        self.assertEqual(payload[0][1]["word_ids"], ["a", "z"])
        self.assertEqual(payload[0][0]["clue_number"], 1)


class LetterGridTests(unittest.TestCase):
    def test_place_and_lookup(self) -> None:
        grid = LetterGrid(5, 5)
        grid.place(_placement("a", "CAT", 1, 1, Orientation.DOWN))
        self.assertEqual(grid.letter_at(2, 1), "A")
        self.assertTrue(grid.is_occupied(3, 1))
        self.assertFalse(grid.is_occupied(4, 1))
        self.assertIsNone(grid.letter_at(-1, 0))
        self.assertEqual(len(grid), 3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
