"""
solvers/dfs_memo.py

Полный перебор с мемоизацией тупиковых позиций.
"""

from typing import Hashable, Set

from .base import BaseSolver, SearchState
from core.board import Board, Path, SolutionSet
from analysis.symmetry import canonical_key


class DFSMemoSolver(BaseSolver):
    """
    DFS решатель с мемоизацией позиций без решений.

    Особенности:
    - Запоминает позиции, из которых нет ни одного решения
    - Ключ — каноническая форма доски (повороты считаются одной позицией)
    - Множество решений совпадает с ExhaustiveSolver: отсекаются только
      поддеревья, в которых решений нет

    Позиции с решениями не кэшируются: их пути зависят от пройденного префикса.
    """

    def __init__(self, use_symmetry: bool = True, **kwargs):
        """
        Args:
            use_symmetry: использовать канонические формы для мемоизации
        """
        super().__init__(**kwargs)
        self.use_symmetry = use_symmetry
        self.memo: Set[Hashable] = set()

    def solve(self, board: Board, path: Path = ()) -> SolutionSet:
        self.memo.clear()
        return super().solve(board, path)

    def _get_key(self, board: Board) -> Hashable:
        """Возвращает ключ для memo."""
        if self.use_symmetry:
            return canonical_key(board)
        return board

    def _search(self, board: Board, path: Path) -> SolutionSet:
        key = self._get_key(board)
        if key in self.memo:
            self.stats.nodes_pruned += 1
            return frozenset()

        state, solutions, moves = self._expand(board, path)
        if state is SearchState.ACTIVE:
            for move in moves:
                solutions |= self._branch(board, move, path)

        if not solutions:
            self.memo.add(key)
        return solutions
