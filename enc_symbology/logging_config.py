"""
Logging configuration for the enc_symbology package.

Two kinds of messages leave the package. Progress messages (cells
indexed, features symbolized) go to the ``enc_symbology`` logger and
follow the verbosity. Data anomalies found while indexing and
symbolizing go to ``enc_symbology.diagnostics`` through a
``DiagnosticLog``, which reports each distinct (procedure, condition)
pair once per process so that bulk cell processing does not flood the
log. Both are written to stderr so that standard output carries only
render instructions.
"""

import logging
import os
import sys
from typing import Optional, Set, Tuple


PACKAGE_LOGGER = "enc_symbology"
DIAGNOSTICS_LOGGER = "enc_symbology.diagnostics"

PROGRESS_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DIAGNOSTIC_FORMAT = "%(levelname)s: %(message)s"

# -v / default / -q / -qq
VERBOSITY_LEVELS = {1: logging.DEBUG, 0: logging.INFO, -1: logging.WARNING, -2: logging.ERROR}


def _is_diagnostic(record: logging.LogRecord) -> bool:
    return record.name == DIAGNOSTICS_LOGGER or record.name.startswith(DIAGNOSTICS_LOGGER + ".")


class ConsoleFilter(logging.Filter):
    """
    Console policy: progress messages by level, diagnostics by switch.

    Diagnostics are warnings about the chart data rather than about the
    run, so quieting progress does not hide them.
    """

    def __init__(self, level: int, diagnostics: bool):
        super().__init__()
        self.level = level
        self.diagnostics = diagnostics

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_diagnostic(record):
            return self.diagnostics and (record.levelno >= logging.WARNING or self.level <= logging.DEBUG)
        return record.levelno >= self.level


class ConsoleFormatter(logging.Formatter):
    """Timestamped lines for progress, short lines for diagnostics."""

    def __init__(self):
        super().__init__(PROGRESS_FORMAT)
        self._short = logging.Formatter(DIAGNOSTIC_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if _is_diagnostic(record):
            return self._short.format(record)
        return super().format(record)


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    diagnostics: bool = True
) -> None:
    """
    Configure console (and optional file) output for the package loggers.

    Args:
        verbosity: 1 for DEBUG, 0 for INFO, -1 for WARNING, -2 or lower
            for ERROR; applies to progress messages
        log_file: Optional file that receives every message, diagnostics
            included, whatever the console shows
        diagnostics: Show data anomaly diagnostics on the console

    Environment Variables:
        ENC_SYMBOLOGY_LOG_LEVEL: Override the progress level (DEBUG, INFO,
            WARNING, ERROR, CRITICAL)

    Example:
        >>> setup_logging(verbosity=-1)  # warnings and diagnostics only
        >>> setup_logging(diagnostics=False, log_file="symbology.log")
    """
    level = VERBOSITY_LEVELS[max(-2, min(1, verbosity))]

    env_level = os.environ.get("ENC_SYMBOLOGY_LOG_LEVEL", "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)

    # Handlers do the filtering so that the log file can see everything
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.addFilter(ConsoleFilter(level, diagnostics))
    console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a')
            file_handler.setFormatter(logging.Formatter(PROGRESS_FORMAT))
            logger.addHandler(file_handler)
            logger.info(f"Logging to file: {log_file}")
        except OSError as e:
            logger.warning(f"Failed to create log file {log_file}: {e}")


class DiagnosticLog:
    """
    Rate-limited reporter for data anomalies.

    Each distinct ``(procedure, condition)`` key is emitted once; later
    reports with the same key are counted but not logged. The detail text
    is not part of the key, so the first occurrence decides the message.

    Args:
        logger_name: Logger that receives the diagnostics
        level: Logging level used for emitted diagnostics

    Example:
        >>> diagnostics = DiagnosticLog()
        >>> diagnostics.report("LIGHTS05", "missing COLOUR", "light 12")
        True
        >>> diagnostics.report("LIGHTS05", "missing COLOUR", "light 13")
        False
    """

    def __init__(self, logger_name: str = DIAGNOSTICS_LOGGER, level: int = logging.WARNING):
        self._logger = logging.getLogger(logger_name)
        self._level = level
        self._seen: Set[Tuple[str, str]] = set()
        self.suppressed = 0

    def report(self, procedure: str, condition: str, detail: Optional[str] = None) -> bool:
        """
        Report an anomaly, logging it only the first time its key is seen.

        Returns:
            True if the diagnostic was emitted, False if it was suppressed
        """
        key = (procedure, condition)
        if key in self._seen:
            self.suppressed += 1
            return False
        self._seen.add(key)
        message = f"{procedure}: {condition}"
        if detail:
            message = f"{message} ({detail})"
        self._logger.log(self._level, message)
        self._logger.debug(f"{procedure}: further '{condition}' reports suppressed")
        return True

    def seen(self, procedure: str, condition: str) -> bool:
        return (procedure, condition) in self._seen

    def reset(self) -> None:
        """Forget every reported key so that diagnostics are emitted again."""
        self._seen.clear()
        self.suppressed = 0


_default_diagnostics = DiagnosticLog()


def get_diagnostics() -> DiagnosticLog:
    """Return the process-scoped diagnostics log."""
    return _default_diagnostics


# Initialize default logging when module is imported
setup_logging()
