# storefront/utils/logging.py
from loguru import logger
import sys
from pathlib import Path
from typing import Optional, Union

from storefront.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


class AppLogger:
    """Centralized logging configuration for the application"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def configure(self, settings: Settings, log_path: Optional[Path] = None):
        # Remove default logger and anything added by a previous configure()
        logger.remove()

        logger.add(
            sys.stdout,
            colorize=True,
            format=CONSOLE_FORMAT,
            level=settings.LOG_LEVEL
        )

        if settings.LOG_TO_FILE:
            self.log_path = log_path or Path(settings.LOG_DIR)
            self.log_path.mkdir(parents=True, exist_ok=True)

            logger.add(
                self.log_path / "app.log",
                rotation="500 MB",
                retention="10 days",
                compression="zip",
                format=FILE_FORMAT,
                level=settings.LOG_LEVEL
            )

            logger.add(
                self.log_path / "error.log",
                rotation="100 MB",
                retention="30 days",
                compression="zip",
                format=FILE_FORMAT,
                level="ERROR"
            )

    @staticmethod
    def get_logger(name: Union[str, None] = None):
        """Get a logger instance for a specific module"""
        return logger.bind(module=name if name else "app")

app_logger = AppLogger()

def configure_logging(settings: Settings, log_path: Optional[Path] = None):
    app_logger.configure(settings, log_path)

def get_logger(name: Union[str, None] = None):
    return app_logger.get_logger(name)
