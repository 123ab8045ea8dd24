"""
utils/error_handling.py

Иерархия исключений и проверка корректности доски.
"""


class SolverError(Exception):
    """Базовое исключение для решателя."""
    pass


class OutOfRangeLocation(SolverError, IndexError):
    """Позиция вне треугольной доски."""

    def __init__(self, location, size: int):
        self.location = location
        self.size = size
        super().__init__(f"Позиция {tuple(location)} вне доски размера {size}")


class InvalidBoardError(SolverError, ValueError):
    """Ошибка невалидной доски."""
    pass


class SearchCancelled(SolverError):
    """Поиск остановлен по сигналу или по таймауту."""
    pass


class ValidationError(SolverError):
    """Ошибка валидации решения."""
    pass


def validate_board(rows) -> bool:
    """
    Проверяет треугольную форму доски.

    Args:
        rows: последовательность рядов (ряд i содержит ровно i ячеек)

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    if rows is None:
        raise InvalidBoardError("Доска не может быть None")

    if len(rows) == 0:
        raise InvalidBoardError("Доска должна содержать хотя бы один ряд")

    for index, row in enumerate(rows, 1):
        if len(row) != index:
            raise InvalidBoardError(
                f"Ряд {index} содержит {len(row)} ячеек, ожидается {index}"
            )

    return True
