"""
utils/logging.py

Логирование: корневой логгер "peg_triangle" и дочерние логгеры
решателей ("peg_triangle.ExhaustiveSolver", ...).

Handlers висят только на корневом логгере, дочерние передают
записи наверх, поэтому имя решателя видно в %(name)s.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "peg_triangle"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


class SolverLogger:
    """Корневой логгер проекта с консольным выводом."""

    def __init__(self, name: str = ROOT_LOGGER_NAME, level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Повторное создание не добавляет второй консольный handler
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(_formatter())
            self.logger.addHandler(console_handler)

    def child(self, name: str) -> logging.Logger:
        """Дочерний логгер, например для конкретного решателя."""
        return self.logger.getChild(name)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_root: Optional[SolverLogger] = None


def get_logger() -> SolverLogger:
    """Возвращает корневой логгер проекта, создавая его при первом вызове."""
    global _root
    if _root is None:
        _root = SolverLogger()
    return _root


def get_solver_logger(solver_name: str) -> logging.Logger:
    """Логгер решателя: peg_triangle.<solver_name>."""
    return get_logger().child(solver_name)


def setup_file_logging(log_file: str = "peg_triangle.log", level: int = logging.INFO) -> logging.FileHandler:
    """
    Добавляет запись лога в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень логирования

    Returns:
        Добавленный FileHandler (чтобы вызывающий мог его снять и закрыть)
    """
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(_formatter())

    get_logger().logger.addHandler(file_handler)
    return file_handler
