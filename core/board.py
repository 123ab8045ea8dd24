"""
core/board.py

Треугольная доска: ряд 1 — вершина, ряд n — основание.
Координаты (row, col) начинаются с единицы, поэтому номер ряда
совпадает с его шириной:

            1,1
          2,1 2,2
        3,1 3,2 3,3
      4,1 4,2 4,3 4,4
    5,1 5,2 5,3 5,4 5,5
"""

from enum import Enum
from typing import FrozenSet, Iterator, List, NamedTuple, Sequence, Tuple, Union

from .utils import DEFAULT_EDGE_SIZE, is_valid_position
from utils.error_handling import OutOfRangeLocation, validate_board


class Location(NamedTuple):
    """Позиция (row, col) на треугольной доске."""
    row: int
    col: int


class Slot(str, Enum):
    """Содержимое ячейки."""
    PEG = 'p'
    EMPTY = 'e'


class Move(NamedTuple):
    """Прыжок: source теряет колышек, target получает, середина теряет."""
    source: Location
    target: Location

    def __str__(self) -> str:
        return f"{tuple(self.source)} → {tuple(self.target)}"


Row = Tuple[Slot, ...]
Path = Tuple[Move, ...]
SolutionSet = FrozenSet[Path]


class Board:
    """
    Иммутабельная треугольная доска.

    Хранит ряды как кортежи Slot. Равенство и хеш — по содержимому,
    поэтому две доски с одинаковыми ячейками считаются одной доской.
    """
    __slots__ = ('rows', '_hash')

    def __init__(self, rows: Tuple[Row, ...]):
        self.rows = rows
        self._hash = hash(rows)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[Slot, str]]]) -> 'Board':
        """
        Создаёт Board из вложенных последовательностей.

        Args:
            rows: ряды из Slot или строк 'p'/'e', вершина первой

        Raises:
            InvalidBoardError: если ряд i не содержит ровно i ячеек
        """
        validate_board(rows)
        return cls(tuple(tuple(Slot(value) for value in row) for row in rows))

    def to_rows(self) -> List[List[Slot]]:
        """Конвертирует обратно во вложенные списки."""
        return [list(row) for row in self.rows]

    @property
    def size(self) -> int:
        """Размер ребра (количество рядов)."""
        return len(self.rows)

    def is_valid_location(self, location: Location) -> bool:
        """Позиция внутри треугольника. Никогда не бросает исключений."""
        row, col = location
        return is_valid_position(row, col, self.size)

    def slot_at(self, location: Location) -> Slot:
        """Содержимое ячейки; OutOfRangeLocation для позиции вне доски."""
        if not self.is_valid_location(location):
            raise OutOfRangeLocation(location, self.size)
        row, col = location
        return self.rows[row - 1][col - 1]

    def is_occupied(self, location: Location) -> bool:
        return self.slot_at(location) is Slot.PEG

    def peg_count(self) -> int:
        """Количество колышков."""
        return sum(row.count(Slot.PEG) for row in self.rows)

    def empty_count(self) -> int:
        return sum(row.count(Slot.EMPTY) for row in self.rows)

    def locations(self) -> Iterator[Location]:
        """Все позиции доски: от вершины к основанию, слева направо."""
        for row in range(1, self.size + 1):
            for col in range(1, row + 1):
                yield Location(row, col)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Board(size={self.size}, {self.peg_count()} pegs)"

    def __reduce__(self):
        # Хеш строк различается между процессами: пересчитываем при распаковке
        return (Board, (self.rows,))


def make_row(row_number: int, empty_location: Location) -> Row:
    """
    Строит ряд с номером row_number (его ширина равна номеру).

    Args:
        row_number: номер ряда, он же количество ячеек
        empty_location: единственная пустая ячейка доски

    Returns:
        Кортеж Slot: EMPTY в empty_location (если она в этом ряду), иначе PEG
    """
    return tuple(
        Slot.EMPTY if Location(row_number, col) == empty_location else Slot.PEG
        for col in range(1, row_number + 1)
    )


def make_board(edge_size: int, empty_location: Location) -> Board:
    """Доска с одной пустой ячейкой; ряды от вершины к основанию."""
    return Board(tuple(make_row(row, empty_location) for row in range(1, edge_size + 1)))


def canonical_board(edge_size: int = DEFAULT_EDGE_SIZE) -> Board:
    """Стандартная стартовая позиция: пустая вершина."""
    return make_board(edge_size, Location(1, 1))


def midpoint(a: Location, b: Location) -> Location:
    """
    Ячейка между двумя позициями, отстоящими на два шага по ряду,
    столбцу или диагонали. По диагонали смещения по row и col равны,
    поэтому одно правило работает для всех трёх направлений.
    """
    def between(i: int, j: int) -> int:
        return i if i == j else min(i, j) + 1

    (a_row, a_col), (b_row, b_col) = a, b
    return Location(between(a_row, b_row), between(a_col, b_col))
