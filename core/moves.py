"""
core/moves.py

Генерация ходов и применение ходов к доске.
"""

from typing import Iterable, List, Tuple

from .board import Board, Location, Move, Slot, midpoint

# Смещения на два шага: по диагоналям и по ряду в обе стороны.
# (-2, +2) и (+2, -2) на треугольной сетке не существуют.
JUMP_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-2, -2), (-2, 0), (0, -2), (0, 2), (2, 0), (2, 2)
)


def potential_destinations(location: Location) -> List[Location]:
    """
    Шесть кандидатов на цель прыжка. Часть из них может быть вне доски,
    они отсеиваются в legal_targets.
    """
    row, col = location
    return [Location(row + dr, col + dc) for dr, dc in JUMP_OFFSETS]


def legal_targets(board: Board, source: Location) -> List[Location]:
    """
    Цели, куда может прыгнуть колышек из source.

    Цель должна быть на доске, быть пустой и иметь колышек
    между собой и source.
    """
    if not board.is_occupied(source):
        return []

    return [
        target for target in potential_destinations(source)
        if board.is_valid_location(target)
        and not board.is_occupied(target)
        and board.is_occupied(midpoint(source, target))
    ]


def moves_from(board: Board, source: Location) -> List[Move]:
    """Все допустимые ходы из одной позиции."""
    source = Location(*source)
    return [Move(source, target) for target in legal_targets(board, source)]


def all_legal_moves(board: Board) -> List[Move]:
    """Все допустимые ходы на доске (от вершины к основанию, слева направо)."""
    moves = []
    for location in board.locations():
        moves.extend(moves_from(board, location))
    return moves


def apply_move(board: Board, move: Move) -> Board:
    """
    Возвращает новую доску после хода.

    Ход не перепроверяется: вызывающий передаёт только ходы,
    полученные из all_legal_moves для этой же доски.
    """
    source, target = move
    changes = {
        tuple(source): Slot.EMPTY,
        tuple(midpoint(source, target)): Slot.EMPTY,
        tuple(target): Slot.PEG,
    }
    return Board(tuple(
        tuple(
            changes.get((row, col), slot)
            for col, slot in enumerate(cells, 1)
        )
        for row, cells in enumerate(board.rows, 1)
    ))


def apply_moves(board: Board, moves: Iterable[Move]) -> List[Board]:
    """Применяет каждый ход к ОДНОЙ и той же доске (все потомки позиции)."""
    return [apply_move(board, move) for move in moves]


def replay(board: Board, path: Iterable[Move]) -> Board:
    """Последовательно применяет ходы решения (в хронологическом порядке)."""
    for move in path:
        board = apply_move(board, move)
    return board
