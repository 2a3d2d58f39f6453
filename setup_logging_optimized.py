import logging
import os


def setup_logging(level: str = None) -> None:
    """Install one console handler on the root logger.

    - Level comes from the argument, then LOG_LEVEL, then INFO
    - Safe to call repeatedly; the handler is only attached once
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, initializing logging on first use."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
