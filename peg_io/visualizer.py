"""
peg_io/visualizer.py

Визуализация доски и решений.
"""

from typing import Dict, Optional

from core.board import Board, Move, Path, Slot, SolutionSet
from core.utils import PEG, HOLE
from analysis.symmetry import count_symmetries, location_orbit

SYMBOLS = {Slot.PEG: PEG, Slot.EMPTY: HOLE}


def display_board(board: Board) -> str:
    """
    Треугольник: один ряд на строку, отступ пропорционален (n - номер ряда).

        ○
       ● ●
      ● ● ●
    """
    lines = []
    for index, row in enumerate(board.rows, 1):
        indent = " " * (board.size - index)
        lines.append(indent + " ".join(SYMBOLS[slot] for slot in row))
    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход в виде 'source → target'."""
    return str(move)


def format_solution(path: Optional[Path]) -> str:
    """
    Форматирует путь решения для вывода.

    Args:
        path: ходы в хронологическом порядке (пустой кортеж — доска уже решена) или None

    Returns:
        Форматированная строка
    """
    if path is None:
        return "❌ Решение не найдено"

    lines = [f"✅ Решение за {len(path)} ходов:"]
    for i, move in enumerate(path, 1):
        lines.append(f"  {i:2}. {format_move(move)}")
    return "\n".join(lines)


def summarize(solutions_by_start: Dict[Board, SolutionSet]) -> str:
    """
    Сводка: число решений для каждой стартовой позиции.

    Для доски с одной пустой ячейкой перечисляются пустые ячейки
    всех стартов, эквивалентных ей по повороту.
    """
    lines = []
    total = 0
    for board, solutions in solutions_by_start.items():
        total += len(solutions)
        lines.append(display_board(board))
        holes = [loc for loc in board.locations() if not board.is_occupied(loc)]
        if len(holes) == 1:
            orbit = ", ".join(str(tuple(loc)) for loc in location_orbit(holes[0], board.size))
            lines.append(f"Пустая ячейка: {orbit}")
        lines.append(f"Эквивалентных стартов: {count_symmetries(board)}")
        lines.append(f"Решений: {len(solutions)}")
        lines.append("")
    lines.append(f"Всего решений: {total}")
    return "\n".join(lines)
