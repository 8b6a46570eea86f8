"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler exactly
once. The format includes the timestamp, logger name, level and message.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    If the root logger already has handlers (uvicorn, pytest or a second
    ``create_app`` call), only the level is adjusted.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``). Case insensitive.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
