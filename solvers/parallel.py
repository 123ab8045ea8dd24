"""
solvers/parallel.py

Parallel DFS — ветки первого хода решаются независимо.
"""

from typing import Optional, Tuple, Type
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
import multiprocessing
import time

from .base import BaseSolver, SearchState, SolverStats
from .dfs_memo import DFSMemoSolver
from core.board import Board, Move, Path, SolutionSet
from core.moves import apply_move


def _solve_branch(solver_class: Type[BaseSolver], solver_kwargs: dict,
                  board: Board, move: Move, path: Path,
                  deadline: Optional[float] = None) -> Tuple[SolutionSet, SolverStats]:
    """
    Решает поддерево после первого хода (для параллельного запуска).

    deadline — общий срок родительского поиска (time.time()); ветка получает
    остаток времени на момент своего старта, а не полный timeout.
    """
    if deadline is not None:
        solver_kwargs = dict(solver_kwargs, timeout=deadline - time.time())
    solver = solver_class(**solver_kwargs)
    solutions = solver.solve(apply_move(board, move), (move,) + path)
    return solutions, solver.stats


class ParallelSolver(BaseSolver):
    """
    Параллельный решатель.

    Распределяет ходы из стартовой позиции между воркерами. Каждая ветка
    получает свою копию доски и свой префикс пути; решения объединяются
    только после завершения всех веток.
    """

    def __init__(self, num_workers: Optional[int] = None, use_processes: bool = True,
                 inner_solver: Type[BaseSolver] = DFSMemoSolver, **kwargs):
        """
        Args:
            num_workers: количество воркеров (по умолчанию — число CPU)
            use_processes: процессы (True) или потоки (False)
            inner_solver: класс решателя для поддеревьев
        """
        super().__init__(**kwargs)
        self.num_workers = num_workers or multiprocessing.cpu_count()
        self.use_processes = use_processes
        self.inner_solver = inner_solver

    def _inner_kwargs(self) -> dict:
        kwargs = {}
        # threading.Event не передаётся в другой процесс
        if not self.use_processes:
            kwargs['stop_event'] = self.stop_event
        return kwargs

    def _search(self, board: Board, path: Path) -> SolutionSet:
        state, solutions, moves = self._expand(board, path)
        if state is not SearchState.ACTIVE:
            return solutions

        self._log(f"Fan-out: workers={self.num_workers}, branches={len(moves)}")

        executor_class = ProcessPoolExecutor if self.use_processes else ThreadPoolExecutor
        inner_kwargs = self._inner_kwargs()

        with executor_class(max_workers=self.num_workers) as executor:
            futures = [
                executor.submit(_solve_branch, self.inner_solver, inner_kwargs,
                                board, move, path, self._deadline)
                for move in moves
            ]
            try:
                for future in as_completed(futures):
                    branch_solutions, branch_stats = future.result()
                    solutions |= branch_solutions
                    self.stats.merge(branch_stats)
                    self._check_cancelled()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        return solutions
