"""
utils/logging.py

Централизованное логирование решателя треугольной доски.
"""

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "cracker_barrel"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SolverLogger:
    """Тонкая обёртка над logging.Logger с консольным выводом."""

    def __init__(self, name: str = LOGGER_NAME, level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Один консольный handler на логгер, повторные вызовы его не дублируют
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)


# Глобальный логгер
_default_logger: Optional[SolverLogger] = None


def get_logger() -> SolverLogger:
    """Возвращает глобальный логгер проекта, создавая его при первом вызове."""
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger()
    return _default_logger


def configure_logging(level: Union[int, str] = logging.INFO,
                      log_file: Optional[str] = None) -> SolverLogger:
    """
    Настраивает уровень логирования и (опционально) запись в файл.

    Args:
        level: уровень логирования (число или имя, например "DEBUG")
        log_file: путь к файлу лога или None

    Returns:
        SolverLogger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = get_logger()
    logger.set_level(level)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.logger.addHandler(file_handler)

    return logger
