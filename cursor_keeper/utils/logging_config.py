"""
Logging configuration for cursor_keeper.
Provides consistent logging across all modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a configured logger instance.
    
    Args:
        name: Logger name (usually module name)
        level: Logging level (default INFO)
    
    Returns:
        Logger namespaced under "cursor_keeper."
    """
    logger = logging.getLogger(f"cursor_keeper.{name}")
    
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        
        logger.addHandler(console_handler)
        logger.setLevel(level)
        logger.propagate = False
    
    return logger


def setup_file_logging(log_dir: Optional[Path] = None, level: int = logging.DEBUG) -> Path:
    """
    Add a file handler to every cursor_keeper logger.
    
    Module loggers do not propagate, so the handler is attached to the
    root "cursor_keeper" logger and to each logger already created under it.
    
    Args:
        log_dir: Directory for log files. If None, uses ./logs
        level: File logging level (default DEBUG)
    
    Returns:
        Path of the log file
    """
    if log_dir is None:
        log_dir = Path.cwd() / "logs"
    
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "cursor_keeper.log"
    
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    
    root_logger = logging.getLogger("cursor_keeper")
    root_logger.addHandler(file_handler)
    
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("cursor_keeper.") and isinstance(logger, logging.Logger):
            logger.addHandler(file_handler)
    
    return log_file
