"""
utils - Логирование и обработка ошибок.
"""

from .logging import SolverLogger, get_logger, get_solver_logger, setup_file_logging
from .error_handling import (
    SolverError, OutOfRangeLocation, InvalidBoardError,
    SearchCancelled, ValidationError, validate_board
)

__all__ = [
    'SolverLogger', 'get_logger', 'get_solver_logger', 'setup_file_logging',
    'SolverError', 'OutOfRangeLocation', 'InvalidBoardError',
    'SearchCancelled', 'ValidationError', 'validate_board',
]
