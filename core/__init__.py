"""
core - Ядро треугольного Peg Solitaire

Доска, позиции, генерация и применение ходов.
"""

from .board import (
    Board, Location, Move, Slot, Path, SolutionSet,
    make_row, make_board, canonical_board, midpoint
)
from .moves import (
    potential_destinations, legal_targets, moves_from,
    all_legal_moves, apply_move, apply_moves, replay
)
from .utils import DEFAULT_EDGE_SIZE, PEG, HOLE, slot_total

__all__ = [
    'Board', 'Location', 'Move', 'Slot', 'Path', 'SolutionSet',
    'make_row', 'make_board', 'canonical_board', 'midpoint',
    'potential_destinations', 'legal_targets', 'moves_from',
    'all_legal_moves', 'apply_move', 'apply_moves', 'replay',
    'DEFAULT_EDGE_SIZE', 'PEG', 'HOLE', 'slot_total',
]
