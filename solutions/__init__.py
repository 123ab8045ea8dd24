"""
solutions - Проверка найденных решений
"""

from .verify import is_jump_shape, is_legal_move, final_board, verify_solution

__all__ = ['is_jump_shape', 'is_legal_move', 'final_board', 'verify_solution']
