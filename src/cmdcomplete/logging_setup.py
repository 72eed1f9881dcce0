# cmdcomplete.logging_setup - Logging configuration
"""
Logging setup for the command line tool.

Library modules only create loggers; handlers are installed here by the
application.
"""
import logging

DEBUG_FORMAT = r"%(name)s - %(message)s // %(filename)s:%(lineno)d"
PLAIN_FORMAT = r"%(message)s"


def init_logger(debug: bool = False, filename: str | None = None) -> logging.Logger:
    """
    Initialize logging for the cmdcomplete package.

    Args:
        debug: Log debug messages, with their origin
        filename: Optional file to log to as well

    Returns:
        The package logger
    """
    logger = logging.getLogger("cmdcomplete")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else PLAIN_FORMAT))
    logger.addHandler(stream_handler)

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(
            logging.Formatter(r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
