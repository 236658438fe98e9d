"""
Central logging management for petcare.
Handles logger setup and configuration.
"""

import logging
import os
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional
from dotenv import load_dotenv
from config import Config
from .formatters import PetFormatter, EventFormatter, ConsoleFormatter

class LogManager:
    """Log management with one file stream per subsystem."""

    LEVELS = {
        'CRITICAL': logging.CRITICAL,
        'ERROR': logging.ERROR,
        'WARNING': logging.WARNING,
        'INFO': logging.INFO,
        'DEBUG': logging.DEBUG,
    }

    @staticmethod
    def level_for(logger_name: str) -> int:
        """
        Resolves the level for a logger from the environment.

        'petcare.pet' reads LOG_LEVEL_PETCARE_PET, defaulting to INFO.
        """
        env_var_key = f"LOG_LEVEL_{logger_name.upper().replace('.', '_')}"
        log_level_name = os.getenv(env_var_key, 'INFO')
        return LogManager.LEVELS.get(log_level_name.upper(), logging.INFO)

    @staticmethod
    def setup_logging(log_base: Optional[Path] = None, console: bool = False) -> Dict[str, Path]:
        """
        Initialize all loggers with file handlers and configurable levels.

        Args:
            log_base (Path, optional): Base log directory. Defaults to Config.get_log_dir().
            console (bool): Also echo warnings and errors to stderr.

        Returns:
            dict: Logger name to the log file it writes.
        """
        load_dotenv()

        if log_base is None:
            log_base = Config.get_log_dir()
        log_base = Path(log_base)

        pet_dir = log_base / 'pet'
        system_dir = log_base / 'system'
        event_dir = log_base / 'events'
        for directory in [pet_dir, system_dir, event_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

        config = {
            'petcare.pet': (pet_dir / f"pet_{timestamp}.log", PetFormatter()),
            'petcare.system': (system_dir / f"system_{timestamp}.log", PetFormatter()),
            'petcare.events': (event_dir / f"events_{timestamp}.log", EventFormatter()),
        }

        for logger_name, (log_file, formatter) in config.items():
            logger = logging.getLogger(logger_name)
            logger.setLevel(LogManager.level_for(logger_name))
            logger.propagate = False

            # calling setup twice must not duplicate output
            if logger.handlers:
                continue

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            if console:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(logging.WARNING)
                console_handler.setFormatter(ConsoleFormatter())
                logger.addHandler(console_handler)

        return {name: log_file for name, (log_file, _) in config.items()}
