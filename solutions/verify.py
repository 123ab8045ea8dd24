"""
solutions/verify.py

Проверка решений на треугольной доске.
"""

from typing import Iterable

from core.board import Board, Move, midpoint
from core.moves import apply_move
from utils.error_handling import ValidationError


def is_jump_shape(move: Move) -> bool:
    """Источник и цель на расстоянии двух шагов по ряду или диагонали."""
    (sr, sc), (tr, tc) = move
    dr, dc = tr - sr, tc - sc
    if (dr, dc) == (0, 0) or abs(dr) not in (0, 2) or abs(dc) not in (0, 2):
        return False
    # Направления (-2, +2) и (+2, -2) на треугольной сетке не существуют
    return (dr, dc) not in ((-2, 2), (2, -2))


def is_legal_move(board: Board, move: Move) -> bool:
    """
    Проверяет ход полностью:
    - форма прыжка;
    - все три клетки на доске;
    - в source и середине колышки, в target — пусто.
    """
    if not is_jump_shape(move):
        return False
    source, target = move
    jumped = midpoint(source, target)
    if not all(board.is_valid_location(loc) for loc in (source, jumped, target)):
        return False
    return board.is_occupied(source) and board.is_occupied(jumped) and not board.is_occupied(target)


def final_board(board: Board, moves: Iterable[Move]) -> Board:
    """
    Применяет ходы по очереди с проверкой каждого.

    Raises:
        ValidationError: если очередной ход недопустим
    """
    for number, move in enumerate(moves, 1):
        if not is_legal_move(board, move):
            raise ValidationError(f"Ход {number} недопустим: {move}")
        board = apply_move(board, move)
    return board


def verify_solution(board: Board, moves: Iterable[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим в позиции, где он сделан;
    - после всех ходов остаётся ровно один колышек.
    """
    try:
        return final_board(board, moves).peg_count() == 1
    except ValidationError:
        return False
