"""
core/utils.py

Общие константы и утилиты для треугольной доски.
"""

# Стандартная доска "cracker barrel": 5 ячеек по ребру, 15 всего
DEFAULT_EDGE_SIZE = 5

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустая ячейка

# Текстовые обозначения для ввода
PEG_TOKENS = frozenset(['p', 'P', PEG])
HOLE_TOKENS = frozenset(['e', 'E', HOLE])


def slot_total(edge_size: int) -> int:
    """Количество ячеек треугольной доски: n(n+1)/2."""
    return edge_size * (edge_size + 1) // 2


def is_valid_position(row: int, col: int, size: int) -> bool:
    """Проверяет, находится ли (row, col) в пределах треугольника (1-индексация)."""
    return 0 < row <= size and 0 < col <= row
