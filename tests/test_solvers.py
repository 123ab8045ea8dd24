"""
tests/test_solvers.py

Тесты решателей: терминальные узлы, совпадение множеств решений,
полный поиск со стандартной доски, остановка поиска.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import threading
import time

import pytest

from core.board import Board, Location, Move, Slot, canonical_board, make_board
from core.moves import all_legal_moves, replay
from solvers import (
    ExhaustiveSolver, DFSMemoSolver, ParallelSolver,
    SearchState, classify
)
from solvers.parallel import _solve_branch
from solutions.verify import verify_solution
from utils.error_handling import SearchCancelled

P, E = Slot.PEG, Slot.EMPTY


def make_two_step_board() -> Board:
    """
    Доска с ребром 4 и единственным решением из двух ходов:

       ○
      ○ ○
     ○ ○ ○
    ● ● ○ ●

    (4,1) → (4,3), затем (4,4) → (4,2).
    """
    return Board.from_rows([[E], [E, E], [E, E, E], [P, P, E, P]])


def make_dead_end_board() -> Board:
    """Три колышка, два хода, оба ведут в тупик с двумя колышками."""
    return Board.from_rows([[P], [P, P], [E, E, E]])


def make_midgame_board() -> Board:
    """Позиция середины игры на стандартной доске (10 колышков)."""
    return Board.from_rows([[E], [E, E], [P, E, P], [P, P, P, P], [P, P, E, P, P]])


def test_classify():
    assert classify(canonical_board(), all_legal_moves(canonical_board())) is SearchState.ACTIVE
    assert classify(Board.from_rows([[P], [E, E]]), []) is SearchState.WON
    assert classify(Board.from_rows([[P], [E, P]]), []) is SearchState.DEAD


@pytest.mark.parametrize("solver_class", [ExhaustiveSolver, DFSMemoSolver])
def test_two_step_board(solver_class):
    """Тест: единственное решение возвращается в хронологическом порядке."""
    solver = solver_class()

    solutions = solver.solve(make_two_step_board())

    assert solutions == frozenset([(
        Move(Location(4, 1), Location(4, 3)),
        Move(Location(4, 4), Location(4, 2)),
    )])
    assert solver.stats.solutions == 1


def test_two_step_board_stats():
    solver = ExhaustiveSolver()
    solver.solve(make_two_step_board())

    assert solver.stats.nodes_visited == 3
    assert solver.stats.max_depth == 2
    assert solver.stats.dead_ends == 0


@pytest.mark.parametrize("solver_class", [ExhaustiveSolver, DFSMemoSolver])
def test_dead_end_returns_empty_set(solver_class):
    """Тест: позиция без решений даёт пустое множество."""
    solver = solver_class()

    assert solver.solve(make_dead_end_board()) == frozenset()
    assert solver.stats.dead_ends >= 1


def test_board_without_moves():
    """Тест: нет ходов и больше одного колышка — пустое множество."""
    board = Board.from_rows([[P], [E, E], [E, E, P]])

    assert all_legal_moves(board) == []
    assert ExhaustiveSolver().solve(board) == frozenset()


def test_already_solved_board():
    """Тест: один колышек — одно решение из нуля ходов."""
    board = Board.from_rows([[E], [E, P], [E, E, E]])

    assert ExhaustiveSolver().solve(board) == frozenset([()])


def test_accumulated_path_is_prefixed():
    """Тест: переданный префикс (последний ход первым) входит в решение."""
    start = Board.from_rows([[E], [E, E], [E, E, E], [P, P, E, P]])
    first = Move(Location(4, 1), Location(4, 3))
    after_first = Board.from_rows([[E], [E, E], [E, E, E], [E, E, P, P]])

    solutions = ExhaustiveSolver().solve(after_first, (first,))

    assert solutions == frozenset([(first, Move(Location(4, 4), Location(4, 2)))])
    assert all(verify_solution(start, path) for path in solutions)


def test_memo_matches_exhaustive_midgame():
    """Тест: мемоизация не меняет множество решений."""
    board = make_midgame_board()

    exhaustive = ExhaustiveSolver().solve(board)
    memo = DFSMemoSolver().solve(board)
    memo_plain = DFSMemoSolver(use_symmetry=False).solve(board)

    assert memo == exhaustive
    assert memo_plain == exhaustive
    for path in exhaustive:
        assert len(path) == board.peg_count() - 1
        assert verify_solution(board, path)


def test_memo_prunes_nodes():
    board = make_midgame_board()
    exhaustive = ExhaustiveSolver()
    memo = DFSMemoSolver()

    exhaustive.solve(board)
    memo.solve(board)

    assert memo.stats.nodes_visited <= exhaustive.stats.nodes_visited


@pytest.mark.parametrize("use_processes", [False, True])
def test_parallel_matches_exhaustive(use_processes):
    board = make_midgame_board()

    expected = ExhaustiveSolver().solve(board)
    solver = ParallelSolver(num_workers=2, use_processes=use_processes)

    assert solver.solve(board) == expected
    assert solver.stats.nodes_visited > 0


def test_parallel_terminal_board():
    """Тест: без ходов параллельный решатель не создаёт пул."""
    solver = ParallelSolver(num_workers=2, use_processes=False)

    assert solver.solve(Board.from_rows([[P], [E, E]])) == frozenset([()])


def test_canonical_board_all_solutions():
    """
    Тест: полный поиск с пустой вершиной.

    Каждое решение состоит из (колышков - 1) ходов и при
    последовательном применении оставляет один колышек.
    """
    board = canonical_board()
    solver = DFSMemoSolver()

    solutions = solver.solve(board)

    assert len(solutions) > 0, "Решения должны быть найдены"
    assert solver.stats.solutions == len(solutions)
    assert all(len(path) == board.peg_count() - 1 for path in solutions)
    for path in sorted(solutions)[:50]:
        assert replay(board, path).peg_count() == 1
        assert verify_solution(board, path)
    # Доска симметрична относительно вертикальной оси: первых ходов два
    first_moves = {path[0] for path in solutions}
    assert first_moves == set(all_legal_moves(board))


def test_solve_all_unions_results():
    boards = [make_two_step_board(), make_dead_end_board(), Board.from_rows([[P], [E, E]])]

    solutions = ExhaustiveSolver().solve_all(boards)

    assert len(solutions) == 2
    assert () in solutions


def test_solve_all_accumulates_stats():
    """Тест: статистика solve_all описывает все доски, а не только последнюю."""
    solver = ExhaustiveSolver()

    solver.solve_all([make_two_step_board(), make_dead_end_board(), Board.from_rows([[P], [E, E]])])

    assert solver.stats.nodes_visited == 7
    assert solver.stats.solutions == 2
    assert solver.stats.dead_ends == 2
    assert solver.stats.max_depth == 2


def test_solve_starts_small_board():
    """Тест: решения для каждой стартовой позиции с ребром 3."""
    results = ExhaustiveSolver().solve_starts(3)

    assert len(results) == 2
    assert make_board(3, Location(1, 1)) in results
    for board, solutions in results.items():
        for path in solutions:
            assert verify_solution(board, path)


def test_stop_event_cancels_search():
    stop = threading.Event()
    stop.set()
    solver = ExhaustiveSolver(stop_event=stop)

    with pytest.raises(SearchCancelled):
        solver.solve(canonical_board())


def test_timeout_cancels_search():
    solver = DFSMemoSolver(timeout=-1.0)

    with pytest.raises(SearchCancelled):
        solver.solve(canonical_board())
    assert solver.stats.time_elapsed >= 0.0


def test_parallel_branch_uses_remaining_time():
    """Тест: ветка получает остаток общего срока, а не собственный полный timeout."""
    board = canonical_board()
    move = all_legal_moves(board)[0]

    with pytest.raises(SearchCancelled):
        _solve_branch(DFSMemoSolver, {'timeout': 3600.0}, board, move, (), time.time() - 1.0)


def test_parallel_timeout_reaches_branches():
    solver = ParallelSolver(num_workers=2, use_processes=False, timeout=0.05)

    with pytest.raises(SearchCancelled):
        solver.solve(canonical_board())
