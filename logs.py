import logging
import os
from logging.handlers import RotatingFileHandler

from common import LOG_DIR, LOG_LEVEL

LOG_FILE_NAME = 'country_enums.log'


def setup_logger():
    logger = logging.getLogger('CountryEnums')

    # Check if the logger already has handlers to avoid duplicate handlers
    if not logger.handlers:
        logger.setLevel(LOG_LEVEL)

        log_file = os.path.join(LOG_DIR, LOG_FILE_NAME)
        formatter = logging.Formatter('%(asctime)s - PID: %(process)d - %(levelname)s - %(message)s')

        try:
            os.makedirs(LOG_DIR, exist_ok=True)
            handler = RotatingFileHandler(log_file, maxBytes=5000000, backupCount=5)
        except OSError as e:
            handler = logging.StreamHandler()
            print(f"Error setting up log file {log_file}, logging to stderr: {e}")

        handler.setLevel(LOG_LEVEL)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# Initialize logger
app_logger = setup_logger()
