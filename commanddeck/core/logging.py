import os
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = "logs",
                  rotation: str = "10 MB", retention: str = "1 week"):
    """
    Route framework and device narration to the console and, optionally, a file.

    Command tracing (enqueue, execute, undo) is logged at DEBUG, so it only
    reaches the console when debug_mode is on. Device narration and no-op
    notices ("Nothing to undo") are INFO and always shown.

    Args:
        debug_mode: Show DEBUG records on stderr
        log_dir: Directory for a rotating DEBUG-level log file; None disables it
        rotation: loguru rotation policy for the file sink
        retention: loguru retention policy for the file sink
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug_mode else "INFO", format=CONSOLE_FORMAT)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            os.path.join(log_dir, "commanddeck_{time}.log"),
            rotation=rotation,
            retention=retention,
            level="DEBUG",
        )

    logger.debug(f"Logging configured (debug={debug_mode}, log_dir={log_dir})")
