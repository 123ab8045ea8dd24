#!/usr/bin/env python3
"""
main.py

Точка входа для решателя треугольного Peg Solitaire.

Использование:
    python main.py                                  # все стартовые позиции, ребро 5
    python main.py --board "e / p p / p p p / p p p p / p p p p p" --show 3
    python main.py --empty 3,2 --solver parallel    # одна стартовая позиция
"""

import sys
import argparse
import logging

from core.board import make_board
from core.utils import DEFAULT_EDGE_SIZE, is_valid_position
from peg_io import parse_board, parse_location, display_board, format_solution, summarize
from solutions.verify import verify_solution
from solvers import SOLVERS, ParallelSolver
from utils.error_handling import OutOfRangeLocation, SolverError
from utils.logging import get_logger, setup_file_logging


def build_solver(args):
    """Создаёт решатель по аргументам командной строки."""
    solver_class = SOLVERS[args.solver]
    kwargs = {'verbose': args.verbose, 'timeout': args.timeout}
    if solver_class is ParallelSolver:
        kwargs['num_workers'] = args.workers
    return solver_class(**kwargs)


def solve_single(solver, board, show: int) -> int:
    """Решает одну позицию и печатает первые show решений."""
    print(f"\nСтартовая позиция ({board.peg_count()} колышков):")
    print(display_board(board))

    solutions = solver.solve(board)
    print(f"\nНайдено решений: {len(solutions)}")
    print(f"📊 Статистика: {solver.stats}")

    for path in sorted(solutions)[:show]:
        if not verify_solution(board, path):
            get_logger().error(f"Некорректное решение: {path}")
            return 1
        print(f"\n{format_solution(path)}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Triangle Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                          # все стартовые позиции
  python main.py --empty 1,1 --show 2     # пустая вершина, два решения
  python main.py --solver exhaustive      # полный перебор без отсечений
        """
    )
    parser.add_argument('--size', '-n', type=int, default=DEFAULT_EDGE_SIZE,
                        help=f'Размер ребра (default: {DEFAULT_EDGE_SIZE})')
    parser.add_argument('--board', '-b',
                        help='Стартовая доска: "e / p p / p p p ..."')
    parser.add_argument('--empty', '-e',
                        help='Пустая ячейка стартовой доски: row,col')
    parser.add_argument('--solver', '-s', choices=list(SOLVERS.keys()),
                        default='memo', help='Выбор решателя (default: memo)')
    parser.add_argument('--workers', '-w', type=int, default=None,
                        help='Количество воркеров для parallel')
    parser.add_argument('--timeout', '-t', type=float, default=None,
                        help='Ограничение времени на одну позицию, секунды')
    parser.add_argument('--show', type=int, default=1,
                        help='Сколько решений вывести (default: 1)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Отладочный вывод решателя')
    parser.add_argument('--log-file', help='Дополнительно писать лог в файл')

    args = parser.parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file)

    print("=" * 50)
    print("🎯 Triangle Peg Solitaire Solver")
    print("=" * 50)
    print(f"\n🔧 Решатель: {args.solver}")

    try:
        solver = build_solver(args)
        if args.board:
            return solve_single(solver, parse_board(args.board), args.show)
        if args.empty:
            empty = parse_location(args.empty)
            if not is_valid_position(empty.row, empty.col, args.size):
                raise OutOfRangeLocation(empty, args.size)
            board = make_board(args.size, empty)
            return solve_single(solver, board, args.show)

        print(summarize(solver.solve_starts(args.size)))
        return 0
    except (SolverError, ValueError) as e:
        logger.error(f"Ошибка: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
