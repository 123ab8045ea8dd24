"""
peg_io - Ввод/вывод

Экспортирует:
- Парсинг доски и позиций
- Визуализацию доски и решений
"""

from .parser import parse_board, parse_location
from .visualizer import display_board, format_move, format_solution, summarize

__all__ = [
    'parse_board',
    'parse_location',
    'display_board',
    'format_move',
    'format_solution',
    'summarize',
]
