"""
Application-wide logging setup.

Records go to ``logs/transcriptstudio.log`` and to stdout. The level of the
application logger follows ``config.LOG_LEVEL``, so stale-response and
diagnostic messages show up in development only.
"""

import sys
import logging as _logging

from transcript_studio.config import config

LOG_FORMAT = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
LOG_FILE = config.LOGS_DIR / "transcriptstudio.log"
LOGGER_NAME = "transcriptstudio"


def setup_logging() -> _logging.Logger:
    """
    Attach the file and stdout handlers to the application logger.

    Safe to call more than once; Streamlit re-executes the app script on every
    interaction, so handlers are only added the first time.

    Returns:
        The configured application logger
    """
    logger = _logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(config, "LOG_LEVEL", "INFO"))

    if not logger.handlers:
        formatter = _logging.Formatter(LOG_FORMAT)
        for handler in (_logging.FileHandler(LOG_FILE, encoding="utf-8"), _logging.StreamHandler(sys.stdout)):
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.propagate = False

    return logger


logging = setup_logging()
