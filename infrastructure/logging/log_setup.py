# infrastructure/logging/log_setup.py
from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}"


def setup_console_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=level.upper(), format=CONSOLE_FORMAT, colorize=False)
