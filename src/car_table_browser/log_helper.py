"""
Filename:       log_helper.py
Author:         jole
Created:        19.10.2026

Description:    Logger setup for the browser: everything goes to a log file, NOTICE and up can go to stdout as well.

Notes:          curses owns the terminal while the table is shown, so TableBrowser turns the stdout handler off before
                starting the UI (set_stdout_threshold()).
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import sys

from typing import Optional

# --- Project defined
from .defs  import DEFAULT_LOG_FILE
# --- END OF Import section --------------------------------------------------------------------------------------------


LOGGER_NAME = "car_table_browser"

# --- Custom level: NOTICE (between INFO=20 and WARNING=30)
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

def notice(self: logging.Logger, message, *args, **kwargs):
    if self.isEnabledFor(NOTICE):
        self._log(NOTICE, message, args, **kwargs)

# Add as a real method on Logger
logging.Logger.notice = notice  # type: ignore[attr-defined]

SILENT = logging.CRITICAL + 10



def _has_file_handler(_logger: logging.Logger, _filename: str) -> bool:
    for h in _logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "_is_ctb_file", None) == _filename:
            return True
    return False
# --- END OF _has_file_handler() ---------------------------------------------------------------------------------------



def _get_stream_handler(_logger: logging.Logger) -> Optional[logging.Handler]:
    for h in _logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "_is_ctb_stdout", False):
            return h
    return None
# --- END OF _get_stream_handler() -------------------------------------------------------------------------------------



def setup_logger(_filename:     Optional[str]   = DEFAULT_LOG_FILE,
                 *,
                 _file_level:   int             = logging.DEBUG,
                 _stream_level: int             = NOTICE
                 ) -> logging.Logger:
    """
    Configure the package logger. Writes _file_level and up to _filename (no file if _filename is None) and only
    _stream_level and up to stdout. Calling it again does not add handlers twice.

    :return:    The "car_table_browser" logger, parent of every module logger in the package
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(_file_level, _stream_level, logging.DEBUG))

    # --- File handler: add once
    if _filename and not _has_file_handler(logger, _filename):
        fh = logging.FileHandler(_filename)
        fh.setLevel(_file_level)
        fh.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
        setattr(fh, "_is_ctb_file", _filename)
        logger.addHandler(fh)

    # --- Stream handler: add once
    if _get_stream_handler(logger) is None:
        sh = logging.StreamHandler(sys.stdout)
        sh.setLevel(_stream_level)
        sh.setFormatter(logging.Formatter("%(message)s"))
        # --- Mark so we can find it later
        setattr(sh, "_is_ctb_stdout", True)
        logger.addHandler(sh)

    return logger
# --- END OF setup_logger() --------------------------------------------------------------------------------------------



def set_stdout_threshold(_logger: logging.Logger, _level: int = NOTICE) -> None:
    """
    Change what goes to stdout at runtime, without touching file logging. SILENT turns stdout off.
    """

    sh = _get_stream_handler(_logger)
    if sh is not None:
        sh.setLevel(_level)
# --- END OF set_stdout_threshold() ------------------------------------------------------------------------------------
