# simedit/utils/logging_config.py
"""simedit.utils.logging_config
==============================

Logging configuration for the simedit text core.

It defines the global logger objects and a single setup function,
`setup_logging`, which configures application-wide logging handlers and log
levels from a configuration dictionary.

Features:
    - Rotating file logging for general events (simedit.log).
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Optional highlighter tracing (highlight.log) enabled via the
      SIMEDIT_HLTRACE environment variable.
    - Automatic creation of log directories, with fallback to the system temp
      directory on failure.
    - Safe reconfiguration: clears existing handlers to avoid duplicate logs
      when called multiple times.

Usage:
    >>> from simedit.utils import logging_config
    >>> logging_config.setup_logging({"logging": {"console_level": "ERROR"}})

Globals:
    logger: Main logger ("simedit").
    HIGHLIGHT_LOGGER: Per-row highlighter trace ("simedit.highlight").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global loggers ========================
# Created at import-time, unconfigured until ``setup_logging()`` runs.
logger = logging.getLogger("simedit")
HIGHLIGHT_LOGGER = logging.getLogger("simedit.highlight")

TRACE_ENV_VAR = "SIMEDIT_HLTRACE"


def _rotating_handler(
    filename: str, max_bytes: int, backup_count: int
) -> logging.handlers.RotatingFileHandler:
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)
    return logging.handlers.RotatingFileHandler(
        filename, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Up to four independent handlers are set up:

    1. File handler – rotating simedit.log capturing everything from the
       configured `file_level` (default DEBUG) upward.
    2. Console handler – optional `stderr` output whose threshold is
       `console_level` (default WARNING).
    3. Error-file handler – optional rotating error.log that stores only
       ERROR and CRITICAL events.
    4. Highlight-trace handler – optional rotating highlight.log enabled when
       ``SIMEDIT_HLTRACE`` is set to ``1/true/yes``; attached to the
       ``simedit.highlight`` logger.

    Existing handlers on the root logger are cleared so repeated calls (for
    example from unit tests) do not duplicate records.

    Args:
        config (dict | None): Application configuration blob. Only the
            ``["logging"]`` sub-section is consulted; recognised keys are
            ``file_level``, ``console_level``, ``log_to_console`` and
            ``separate_error_log``.

    Notes:
        The function never raises; I/O or permission errors are reported to
        stderr and logging continues with a best-effort configuration.
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})

    log_filename = "simedit.log"
    log_file_level_str = logging_config.get("file_level", "DEBUG").upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-17s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = _rotating_handler(log_filename, 2 * 1024 * 1024, 5)
    except OSError as e_fh:
        print(
            f"Error setting up file logger for '{log_filename}': {e_fh}.",
            file=sys.stderr,
        )
        log_filename = os.path.join(tempfile.gettempdir(), "simedit.log")
        print(f"Logging to temporary file: '{log_filename}'", file=sys.stderr)
        try:
            file_handler = _rotating_handler(log_filename, 2 * 1024 * 1024, 5)
        except OSError as e_tmp:
            print(f"File logging disabled: {e_tmp}", file=sys.stderr)
    if file_handler:
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_file_level)

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = logging_config.get("console_level", "WARNING").upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s")
        )
        console_handler.setLevel(getattr(logging, console_level_str, logging.WARNING))

    # Optional Separate Error Log File
    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        try:
            error_file_handler = _rotating_handler("error.log", 1 * 1024 * 1024, 3)
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except OSError as e_efh:
            print(f"Error setting up separate error log 'error.log': {e_efh}.", file=sys.stderr)

    root_logger = logging.getLogger()
    root_logger.handlers = []

    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)
    root_logger.setLevel(log_file_level)

    # Highlight trace logger
    HIGHLIGHT_LOGGER.propagate = False
    HIGHLIGHT_LOGGER.setLevel(logging.DEBUG)
    HIGHLIGHT_LOGGER.handlers = []

    if os.environ.get(TRACE_ENV_VAR, "").lower() in {"1", "true", "yes"}:
        try:
            trace_handler = _rotating_handler("highlight.log", 1 * 1024 * 1024, 3)
            trace_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            HIGHLIGHT_LOGGER.addHandler(trace_handler)
            HIGHLIGHT_LOGGER.disabled = False
            logging.info("Highlight tracing enabled, logging to 'highlight.log'.")
        except OSError as e_trace:
            logging.error(f"Failed to set up highlight trace logging: {e_trace}", exc_info=True)
            HIGHLIGHT_LOGGER.disabled = True
    else:
        HIGHLIGHT_LOGGER.addHandler(logging.NullHandler())
        HIGHLIGHT_LOGGER.disabled = True
        logging.debug("Highlight tracing is disabled.")

    logging.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logging.info(
            f"File logging to '{log_filename}' at level: {logging.getLevelName(file_handler.level)}."
        )
    if console_handler:
        logging.info(
            f"Console logging to stderr at level: {logging.getLevelName(console_handler.level)}."
        )
    if error_file_handler:
        logging.info("Error logging to 'error.log' at level: ERROR.")
