"""Logging configuration.

While the relay runs, stdout carries the remote terminal in raw mode, so
log output goes to a file when one is configured. Otherwise only
warnings reach stderr, and console records raised while the terminal is
raw are held back until it has been restored.
"""

import logging
import os
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "XRELAY_LOG_LEVEL"
LOG_FILE_ENV = "XRELAY_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
MAX_HELD_RECORDS = 200


class ConsoleHold(logging.Filter):
    """Handler filter that can hold records and emit them later."""

    def __init__(self, limit: int = MAX_HELD_RECORDS) -> None:
        super().__init__()
        self.holding = False
        self.handler: logging.Handler | None = None
        self._records: deque[logging.LogRecord] = deque(maxlen=limit)

    def filter(self, record: logging.LogRecord) -> bool:
        if self.holding:
            self._records.append(record)
            return False
        return True

    def release(self) -> int:
        """Stop holding and emit held records through the handler.

        Returns:
            Number of records emitted.
        """
        self.holding = False
        records = list(self._records)
        self._records.clear()
        if self.handler is not None:
            for record in records:
                self.handler.handle(record)
        return len(records)


_console_hold = ConsoleHold()


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | None = None,
    debug_transport: bool = False,
) -> None:
    """Configure the xrelay logger.

    Args:
        level: Level for the xrelay logger.
        log_file: Write records to this file instead of stderr.
        debug_transport: Also log paramiko's transport trace.
    """
    logger = logging.getLogger("xrelay")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _console_hold.release()
    _console_hold.handler = None

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.addFilter(_console_hold)
        _console_hold.handler = handler
    logger.addHandler(handler)
    logger.propagate = False

    if debug_transport:
        transport_logger = logging.getLogger("paramiko.transport")
        transport_logger.setLevel(logging.DEBUG)
        transport_logger.addHandler(handler)


@contextmanager
def console_paused() -> Iterator[None]:
    """Hold stderr log records for the duration of the block.

    Held records are emitted when the block exits. Has no effect when
    logging goes to a file.
    """
    _console_hold.holding = True
    try:
        yield
    finally:
        _console_hold.release()


def setup_logging_from_env(
    verbose: bool = False,
    debug_transport: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure logging from XRELAY_LOG_LEVEL / XRELAY_LOG_FILE.

    An explicit ``log_file`` wins over the environment.
    """
    default_level = "INFO" if verbose else "WARNING"
    if debug_transport:
        default_level = "DEBUG"
    level = os.environ.get(LOG_LEVEL_ENV, default_level).upper()
    setup_logging(
        level=level,
        log_file=log_file or os.environ.get(LOG_FILE_ENV),
        debug_transport=debug_transport,
    )
