import logging
import sys


def setup_logging(level=logging.INFO):
    """Configures logging for the application."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger()  # Root logger
    logger.setLevel(level)

    # Streamlit reruns the script on every interaction; replace handlers
    # instead of stacking a new one per run.
    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
