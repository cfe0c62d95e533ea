from pathlib import Path
import logging
from typing import Optional

from .log_level import LogLevel

EXHIBITION = 15  # Between DEBUG (10) and INFO (20)
COLLECTION = 25  # Between INFO (20) and WARNING (30)

logging.addLevelName(EXHIBITION, 'EXHIBITION')
logging.addLevelName(COLLECTION, 'COLLECTION')

# Add convenience methods
def exhibition(self, message, *args, **kwargs):
    self.log(EXHIBITION, message, *args, **kwargs)

def collection(self, message, *args, **kwargs):
    self.log(COLLECTION, message, *args, **kwargs)


logging.Logger.exhibition = exhibition
logging.Logger.collection = collection

LOGGER_NAME = "gallery"

def setup_logging(log_dir: Optional[Path], log_level: LogLevel, log_name: str = "gallery") -> logging.Logger:
    """Configure logging for the gallery package.

    Args:
        log_dir: Directory where the log file will be stored. If None, only the
            console handler is attached
        log_level: LogLevel enum specifying logging verbosity
        log_name: Base name of the log file

    Returns:
        The package logger every ``gallery.*`` module logger propagates to
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers = []
    logger.propagate = False

    # Map log levels
    level_map = {
        LogLevel.NONE: logging.CRITICAL + 1,
        LogLevel.ERRORS_ONLY: logging.ERROR,
        LogLevel.COLLECTION: COLLECTION,
        LogLevel.EXHIBITION: EXHIBITION,
        LogLevel.DEBUG: logging.DEBUG
    }

    if log_level != LogLevel.NONE:
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / f"{log_name}.log", encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            )
            logger.addHandler(file_handler)

        # Console only gets warnings so the menu output stays readable
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(
            logging.Formatter('%(levelname)s - %(message)s'))
        logger.addHandler(console_handler)

    logger.setLevel(level_map.get(log_level, logging.INFO))
    return logger


def format_price(amount: float, symbol: str = "$") -> str:
    """Format a price as currency, e.g. ``$1,500.00`` or ``-$50.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"
