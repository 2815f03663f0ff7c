"""
Centralized logging configuration.
"""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str = None, level: str = "WARNING") -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from brief.logging_config import setup_logger
        logger = setup_logger("brief", level="INFO")
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'brief'.
        level: Name of the log level, e.g. "INFO".

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or "brief")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    return logger

