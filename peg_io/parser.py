"""
peg_io/parser.py

Парсинг текстового описания треугольной доски.
"""

import re
from typing import List

from core.board import Board, Location, Slot
from core.utils import PEG_TOKENS, HOLE_TOKENS


def parse_board(text: str) -> Board:
    """
    Парсит доску из текста.

    Формат: ряды через перевод строки или '/', ячейки через пробел:
        e / p p / p p p / p p p p / p p p p p
    Допустимы обозначения p/e и ●/○.

    Args:
        text: строка с описанием

    Returns:
        Board

    Raises:
        ValueError: неизвестный символ
        InvalidBoardError: ряды не образуют треугольник
    """
    rows: List[List[Slot]] = []
    for line in re.split(r'[/\n]', text):
        tokens = line.split()
        if not tokens:
            continue
        row = []
        for token in tokens:
            if token in PEG_TOKENS:
                row.append(Slot.PEG)
            elif token in HOLE_TOKENS:
                row.append(Slot.EMPTY)
            else:
                raise ValueError(f"Неизвестный символ '{token}'. Ожидается p/e или ●/○")
        rows.append(row)
    return Board.from_rows(rows)


def parse_location(text: str) -> Location:
    """Парсит позицию вида '3,2' или '(3, 2)'."""
    match = re.fullmatch(r'\s*\(?\s*(\d+)\s*,\s*(\d+)\s*\)?\s*', text)
    if not match:
        raise ValueError(f"Неверный формат позиции '{text}'. Ожидается: row,col")
    return Location(int(match.group(1)), int(match.group(2)))
