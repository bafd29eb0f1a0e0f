# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOGGER_NAME = "shopping_cart"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(log_dir: str | Path = "data/logs", level: str = "INFO"):
    """
    Return the "shopping_cart" logger, writing to the console and to
    <log_dir>/shopping_cart.log (new file each midnight, a week kept).

    The cart and repository modules use child loggers such as
    "shopping_cart.repository"; their records go through these handlers
    once this has run. Calling it again only updates the level.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [
        TimedRotatingFileHandler(
            filename=log_dir / "shopping_cart.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8"
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"logging to {log_dir} at level {level}")
    return logger
