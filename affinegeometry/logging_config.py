"""
Logging Configuration
Sets up the 'affinegeometry' logger for applications and scripts.
"""
import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the logger for the 'affinegeometry' namespace.

    Parameters:
    -----------
    level : int
        Logging level (e.g. logging.DEBUG, logging.INFO)
    log_file : str, optional
        Path to also write logs to
    """
    logger = logging.getLogger("affinegeometry")
    logger.setLevel(level)

    # Drop handlers from earlier calls so output is not duplicated
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
