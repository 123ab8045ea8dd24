"""
solvers/exhaustive.py

Полный перебор без отсечений: эталонный решатель.
"""

from .base import BaseSolver, SearchState
from core.board import Board, Path, SolutionSet


class ExhaustiveSolver(BaseSolver):
    """
    Exhaustive решатель.

    Особенности:
    - Полный перебор всех последовательностей ходов
    - Без мемоизации и эвристик
    - Глубина не превышает (колышков в начале - 1): каждый ход снимает колышек
    """

    def _search(self, board: Board, path: Path) -> SolutionSet:
        state, solutions, moves = self._expand(board, path)
        if state is not SearchState.ACTIVE:
            return solutions

        for move in moves:
            solutions |= self._branch(board, move, path)
        return solutions
