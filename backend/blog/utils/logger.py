import logging
import os
from logging.handlers import RotatingFileHandler

from blog.config import Config


def get_logger(name: str):
    """
    Shared application logger.
    - console output at LOG_LEVEL
    - rotating file log (DEBUG and up) when LOG_DIR is set
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(Config.LOG_LEVEL.upper())
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if Config.LOG_DIR:
            os.makedirs(Config.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(Config.LOG_DIR, "blog.log"),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
