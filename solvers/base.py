"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional
import threading
import time

from core.board import Board, Move, Path, SolutionSet
from core.moves import all_legal_moves, apply_move
from core.utils import DEFAULT_EDGE_SIZE
from analysis.symmetry import distinct_starting_boards
from utils.error_handling import SearchCancelled
from utils.logging import get_solver_logger


class SearchState(Enum):
    """Состояние узла поиска."""
    ACTIVE = 'active'   # есть ходы
    WON = 'won'         # ходов нет, остался один колышек
    DEAD = 'dead'       # ходов нет, колышков больше одного


def classify(board: Board, moves: List[Move]) -> SearchState:
    """Классифицирует узел по списку его ходов и числу колышков."""
    if moves:
        return SearchState.ACTIVE
    if board.peg_count() == 1:
        return SearchState.WON
    return SearchState.DEAD


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    dead_ends: int = 0
    solutions: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def merge(self, other: 'SolverStats') -> None:
        """Добавляет статистику поддерева (для параллельного поиска)."""
        self.nodes_visited += other.nodes_visited
        self.nodes_pruned += other.nodes_pruned
        self.dead_ends += other.dead_ends
        self.solutions += other.solutions
        self.max_depth = max(self.max_depth, other.max_depth)
        self.time_elapsed += other.time_elapsed

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Dead ends: {self.dead_ends}, "
            f"Solutions: {self.solutions}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатель находит ВСЕ последовательности ходов, оставляющие один колышек.
    Путь накапливается в обратном порядке (последний ход первым) и
    разворачивается один раз, когда решение принято.

    Остановка кооперативная: stop_event и timeout проверяются в начале
    каждого рекурсивного вызова, при срабатывании бросается SearchCancelled.
    """

    def __init__(self, verbose: bool = False, timeout: Optional[float] = None,
                 stop_event: Optional[threading.Event] = None):
        """
        Args:
            verbose: выводить отладочную информацию
            timeout: ограничение времени поиска в секундах (None — без ограничения)
            stop_event: внешний сигнал остановки
        """
        self.verbose = verbose
        self.timeout = timeout
        self.stop_event = stop_event
        self.stats = SolverStats()
        self._deadline: Optional[float] = None

    def solve(self, board: Board, path: Path = ()) -> SolutionSet:
        """
        Находит все решения из позиции board.

        Args:
            board: начальная позиция
            path: уже сделанные ходы, последний ход первым

        Returns:
            frozenset путей; каждый путь — кортеж ходов в хронологическом порядке

        Raises:
            SearchCancelled: поиск остановлен сигналом или таймаутом
        """
        self.stats = SolverStats()
        start = time.time()
        self._deadline = start + self.timeout if self.timeout is not None else None

        self._log(f"Starting {self.__class__.__name__} (pegs={board.peg_count()})")
        try:
            result = self._search(board, path)
        finally:
            self.stats.time_elapsed = time.time() - start

        self._log(f"Found {len(result)} solutions. Stats: {self.stats}")
        return result

    def solve_all(self, boards: Iterable[Board]) -> SolutionSet:
        """Объединение решений для всех досок; stats суммируется по всем доскам."""
        solutions = frozenset()
        for solved in self._solve_each(boards).values():
            solutions |= solved
        return solutions

    def solve_starts(self, edge_size: int = DEFAULT_EDGE_SIZE) -> Dict[Board, SolutionSet]:
        """Решения для каждой стартовой позиции без повторов по поворотам."""
        return self._solve_each(distinct_starting_boards(edge_size))

    def _solve_each(self, boards: Iterable[Board]) -> Dict[Board, SolutionSet]:
        """Решает доски по очереди, накапливая статистику всех запусков."""
        total = SolverStats()
        results = {}
        for board in boards:
            results[board] = self.solve(board)
            total.merge(self.stats)
        self.stats = total
        return results

    @abstractmethod
    def _search(self, board: Board, path: Path) -> SolutionSet:
        """Рекурсивный поиск; path хранит ходы в обратном порядке."""
        pass

    def _expand(self, board: Board, path: Path):
        """
        Общий шаг поиска: проверка остановки, генерация ходов, терминальные узлы.

        Returns:
            (SearchState, решения терминального узла, ходы)
        """
        self._check_cancelled()

        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, len(path))

        moves = all_legal_moves(board)
        state = classify(board, moves)

        if state is SearchState.WON:
            self.stats.solutions += 1
            return state, frozenset([tuple(reversed(path))]), moves
        if state is SearchState.DEAD:
            self.stats.dead_ends += 1
        return state, frozenset(), moves

    def _branch(self, board: Board, move: Move, path: Path) -> SolutionSet:
        """Рекурсия в потомка: новый путь для каждой ветки, общего списка нет."""
        return self._search(apply_move(board, move), (move,) + path)

    def _check_cancelled(self) -> None:
        if self.stop_event is not None and self.stop_event.is_set():
            raise SearchCancelled("Поиск остановлен по сигналу")
        if self._deadline is not None and time.time() > self._deadline:
            raise SearchCancelled(f"Превышен таймаут {self.timeout}s")

    def _log(self, message: str) -> None:
        """Пишет в лог, если verbose=True."""
        if self.verbose:
            get_solver_logger(self.__class__.__name__).info(message)
