import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


class AppendingFileHandler(logging.Handler):
    """Writes each record by reopening the log file in append mode."""

    def __init__(self, log_file: Path):
        super().__init__()
        self.log_file = Path(log_file)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with self.log_file.open('a', encoding='utf-8') as stream:
                stream.write(line + '\n')
        except Exception:
            self.handleError(record)


class CompactFormatter(logging.Formatter):
    """``hhmmss.fff: message``"""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%H%M%S.%f")[:-3]
        return f"{stamp}: {record.getMessage()}"


class LogManager:
    """
    Owns the 'qwstabs' logger.

    Records go to a daily file (yyyyMMdd_qwstabs.log) at DEBUG and to the
    console at INFO. Tab bookkeeping is tagged [TAB], redirection cache
    bookkeeping [CACHE], application lifecycle [SYSTEM].
    """

    LOGGER_NAME = "qwstabs"

    # category -> (logging level, tag)
    CATEGORIES = {
        "DEBUG": (logging.DEBUG, None),
        "INFO": (logging.INFO, None),
        "WARNING": (logging.WARNING, None),
        "ERROR": (logging.ERROR, None),
        "SYSTEM": (logging.INFO, "SYSTEM"),
        "TAB": (logging.INFO, "TAB"),
        "CACHE": (logging.DEBUG, "CACHE"),
    }

    def __init__(self, log_dir: Path, app_name: str = "qwstabs"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"{datetime.now():%Y%m%d}_{app_name}.log"

        self.logger = self._configure_logger()
        self.log("Application starting", "SYSTEM")

    def _configure_logger(self) -> logging.Logger:
        logger = logging.getLogger(self.LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # a second LogManager replaces the first one's handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        for handler, level in (
            (AppendingFileHandler(self.log_file), logging.DEBUG),
            (logging.StreamHandler(), logging.INFO),
        ):
            handler.setLevel(level)
            handler.setFormatter(CompactFormatter())
            logger.addHandler(handler)
        return logger

    def log(self, message: str, category: str = "INFO") -> None:
        level, tag = self.CATEGORIES.get(category, (logging.INFO, None))
        self.logger.log(level, f"[{tag}] {message}" if tag else message)

    @staticmethod
    def _describe(action: str, title: Optional[str], details: str) -> str:
        subject = f"'{title}' " if title else ""
        return f"{subject}{action} {details}".strip()

    def log_tab_action(self, action: str, tab_title: Optional[str] = None, details: str = "") -> None:
        self.log(self._describe(action, tab_title, details), "TAB")

    def log_cache_event(self, action: str, tab_title: Optional[str] = None, details: str = "") -> None:
        self.log(self._describe(action, tab_title, details), "CACHE")

    def log_error(self, message: str, where: str = "") -> None:
        self.log(f"{message} | Context: {where}" if where else message, "ERROR")

    def log_system_event(self, event: str, details: str = "") -> None:
        self.log(f"{event} | {details}" if details else event, "SYSTEM")

    @property
    def log_path(self) -> Path:
        return self.log_file
