"""
analysis - Симметрии доски

Экспортирует:
- Поворот доски и позиций
- Дедупликацию стартовых позиций
- Канонический ключ для мемоизации
"""

from .symmetry import (
    rotate, rotate_location, location_orbit, rotations,
    boards_equivalent_under_rotation, contains_equivalent,
    deduplicate_by_rotation, all_starting_boards, distinct_starting_boards,
    canonical_key, count_symmetries
)

__all__ = [
    'rotate', 'rotate_location', 'location_orbit', 'rotations',
    'boards_equivalent_under_rotation', 'contains_equivalent',
    'deduplicate_by_rotation', 'all_starting_boards', 'distinct_starting_boards',
    'canonical_key', 'count_symmetries',
]
