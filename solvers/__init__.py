"""
solvers - Решатели треугольного Peg Solitaire

Экспортирует:
- ExhaustiveSolver: полный перебор без отсечений
- DFSMemoSolver: полный перебор с мемоизацией тупиков
- ParallelSolver: ветки первого хода в пуле процессов или потоков
"""

from .base import BaseSolver, SolverStats, SearchState, classify
from .exhaustive import ExhaustiveSolver
from .dfs_memo import DFSMemoSolver
from .parallel import ParallelSolver

SOLVERS = {
    'exhaustive': ExhaustiveSolver,
    'memo': DFSMemoSolver,
    'parallel': ParallelSolver,
}

__all__ = [
    'BaseSolver', 'SolverStats', 'SearchState', 'classify',
    'ExhaustiveSolver', 'DFSMemoSolver', 'ParallelSolver',
    'SOLVERS',
]
