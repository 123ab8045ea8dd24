"""
tests/test_verify.py

Тесты проверки решений.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board, Location, Move, Slot, canonical_board
from solutions.verify import is_jump_shape, is_legal_move, final_board, verify_solution
from utils.error_handling import ValidationError

P, E = Slot.PEG, Slot.EMPTY


def _two_step_board():
    return Board.from_rows([[E], [E, E], [E, E, E], [P, P, E, P]])


TWO_STEP_SOLUTION = (
    Move(Location(4, 1), Location(4, 3)),
    Move(Location(4, 4), Location(4, 2)),
)


@pytest.mark.parametrize("move, expected", [
    (((3, 1), (1, 1)), True),
    (((3, 3), (1, 1)), True),
    (((5, 1), (5, 3)), True),
    (((3, 1), (3, 1)), False),
    (((3, 1), (1, 3)), False),
    (((1, 1), (3, 0)), False),
    (((1, 1), (2, 1)), False),
    (((1, 1), (4, 1)), False),
])
def test_is_jump_shape(move, expected):
    assert is_jump_shape(move) is expected


def test_is_legal_move():
    board = canonical_board()

    assert is_legal_move(board, Move(Location(3, 1), Location(1, 1)))
    # Цель занята
    assert not is_legal_move(board, Move(Location(5, 1), Location(3, 1)))
    # Цель вне доски
    assert not is_legal_move(board, Move(Location(4, 4), Location(4, 6)))
    # Источник пуст
    assert not is_legal_move(board, Move(Location(1, 1), Location(3, 1)))


def test_verify_solution_valid():
    assert verify_solution(_two_step_board(), TWO_STEP_SOLUTION) is True


def test_verify_solution_wrong_order():
    """Тест: ходы решения в обратном порядке недопустимы."""
    assert verify_solution(_two_step_board(), tuple(reversed(TWO_STEP_SOLUTION))) is False


def test_verify_solution_incomplete():
    """Тест: после неполного решения остаётся больше одного колышка."""
    assert verify_solution(_two_step_board(), TWO_STEP_SOLUTION[:1]) is False


def test_verify_empty_solution():
    assert verify_solution(Board.from_rows([[P], [E, E]]), ()) is True
    assert verify_solution(canonical_board(), ()) is False


def test_final_board_raises_on_illegal_move():
    with pytest.raises(ValidationError):
        final_board(canonical_board(), [Move(Location(1, 1), Location(3, 1))])


def test_final_board():
    result = final_board(_two_step_board(), TWO_STEP_SOLUTION)

    assert result.peg_count() == 1
    assert result.is_occupied((4, 2))
