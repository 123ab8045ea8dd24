"""
analysis/symmetry.py

Поворотная симметрия треугольной доски.

Отражения намеренно не учитываются: зеркальные позиции
считаются разными стартами.
"""

from typing import Iterable, List, Tuple

from core.board import Board, Location, make_board
from core.utils import DEFAULT_EDGE_SIZE


def rotate(board: Board) -> Board:
    """
    Поворот на 120°: левое ребро становится основанием.

    Читаем доску по диагоналям (c, c), (c+1, c), ... для c = 1..n,
    каждая диагональ даёт ряд, затем переворачиваем порядок рядов,
    чтобы вершина снова была первой.

        p               e
       p p             e p
      p p p    →      p p p
     p p p e         p p p p
    p p p p e       p p p p p
    """
    size = board.size
    diagonals = [
        tuple(board.rows[row - 1][col - 1] for row in range(col, size + 1))
        for col in range(1, size + 1)
    ]
    return Board(tuple(reversed(diagonals)))


def rotate_location(location: Location, size: int) -> Location:
    """Куда переходит позиция при rotate: (r, c) → (n - c + 1, r - c + 1)."""
    row, col = location
    return Location(size - col + 1, row - col + 1)


def location_orbit(location: Location, size: int) -> List[Location]:
    """Позиция и её образы при поворотах, без повторов (центр — одна позиция)."""
    orbit = [Location(*location)]
    for _ in range(2):
        rotated = rotate_location(orbit[-1], size)
        if rotated in orbit:
            break
        orbit.append(rotated)
    return orbit


def rotations(board: Board) -> Tuple[Board, Board, Board]:
    """Доска и два её поворота."""
    once = rotate(board)
    return board, once, rotate(once)


def boards_equivalent_under_rotation(b1: Board, b2: Board) -> bool:
    """True, если b1 совпадает с b2 или с одним из её поворотов."""
    return b1 in rotations(b2)


def contains_equivalent(board: Board, boards: Iterable[Board]) -> bool:
    """Есть ли в boards доска, эквивалентная board с точностью до поворота."""
    return any(boards_equivalent_under_rotation(board, other) for other in boards)


def deduplicate_by_rotation(boards: Iterable[Board]) -> List[Board]:
    """
    Убирает повороты уже встреченных досок.
    Остаётся первый встреченный представитель каждого класса.
    """
    distinct: List[Board] = []
    for board in boards:
        if not contains_equivalent(board, distinct):
            distinct.append(board)
    return distinct


def all_starting_boards(edge_size: int = DEFAULT_EDGE_SIZE) -> List[Board]:
    """Все доски с одной пустой ячейкой: n(n+1)/2 штук."""
    return [
        make_board(edge_size, Location(row, col))
        for row in range(1, edge_size + 1)
        for col in range(1, row + 1)
    ]


def distinct_starting_boards(edge_size: int = DEFAULT_EDGE_SIZE) -> List[Board]:
    """Стартовые позиции без повторов по поворотам."""
    return deduplicate_by_rotation(all_starting_boards(edge_size))


def canonical_key(board: Board) -> Tuple:
    """
    Каноническая форма (минимальная из поворотов).
    Одинакова для всех трёх поворотов доски — используется для мемоизации.
    """
    return min(rotated.rows for rotated in rotations(board))


def count_symmetries(board: Board) -> int:
    """Количество различных поворотов: 1 для симметричной доски, иначе 3."""
    return len(set(rotations(board)))
