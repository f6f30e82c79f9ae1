import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog

LOG_COLORS = {
    'DEBUG': 'bold_blue',
    'INFO': 'bold_green',
    'WARNING': 'bold_yellow',
    'ERROR': 'bold_red',
    'CRITICAL': 'bold_purple'
}

# httpx/httpcore log every request (with its authenticated URL) at INFO/DEBUG
TRANSPORT_LOGGERS = ('httpx', 'httpcore')


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the centralised logging settings.

    Args:
        level: Log level overriding SUBSONIC_LOG_LEVEL (default INFO)
    """
    log_level = (level or os.getenv('SUBSONIC_LOG_LEVEL', 'INFO')).upper()
    log_file = os.getenv('SUBSONIC_LOG_FILE')
    max_bytes = int(os.getenv('LOG_FILE_MAX_BYTES', '10485760'))  # 10 MB
    backup_count = int(os.getenv('LOG_FILE_BACKUP_COUNT', '5'))

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Request URLs carry credentials; only show them when debugging
    transport_level = logging.DEBUG if log_level == 'DEBUG' else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    if logger.hasHandlers():
        return

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)s:%(name)s:%(message)s",
        log_colors=LOG_COLORS
    ))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)'
        ))
        logger.addHandler(file_handler)
