"""
Centralized Logging Module for the i18n translator.

Provides consistent logging across all modules with output to:
- Console (progress of a translation run)
- File (i18n_translator.log in $I18N_TRANSLATOR_LOG_DIR, when set)
"""
import logging
import os
import sys

# File logging is enabled only when this points to a directory
LOG_DIR_ENV = "I18N_TRANSLATOR_LOG_DIR"
LOG_FILE_NAME = "i18n_translator.log"

# Formatter with timestamp, level, module, and message
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s() | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """
    Returns a configured logger instance.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A logging.Logger instance with console output, plus file output
        when I18N_TRANSLATOR_LOG_DIR is set.
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    # Console Handler - only INFO and above for cleaner output
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    # File Handler - captures everything (DEBUG and above)
    log_dir = os.environ.get(LOG_DIR_ENV)
    if not log_dir:
        return logger

    log_file = os.path.join(log_dir, LOG_FILE_NAME)
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        logger.warning(f"File logging disabled, cannot open {log_file}: {e}")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def setup_exception_hook():
    """
    Installs a global exception hook to log uncaught exceptions before exit.
    Call this once at startup.
    """
    root_logger = get_logger("CRASH")

    def exception_hook(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            # Allow Ctrl+C to exit without logging
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        root_logger.critical("Uncaught exception!", exc_info=(exc_type, exc_value, exc_tb))
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = exception_hook
