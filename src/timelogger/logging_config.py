# logging_config.py
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional


class MaxLevelFilter(logging.Filter):
    """
    Filter that allows only log records up to a certain level.
    """
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def configure_logging(log_dir: Optional[str] = "logs") -> None:
    """
    Configures logging:
    - INFO+ to info log
    - ERROR+ to error log
    - DEBUG/INFO only to console (no WARNING+)
    - Silences HTTP + Google client noise

    With log_dir=None (read-only hosts such as Cloud Functions) no files are
    written and WARNING+ goes to stderr instead.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        # ── File handler: INFO and above ───────────────────────
        info_handler = RotatingFileHandler(
            filename=os.path.join(log_dir, "timelogger-info.log"),
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8"
        )
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(formatter)
        root.addHandler(info_handler)

        # ── File handler: ERROR only ───────────────────────────
        error_handler = RotatingFileHandler(
            filename=os.path.join(log_dir, "timelogger-errors.log"),
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root.addHandler(error_handler)
    else:
        # ── Stderr handler: WARNING and above ──────────────────
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(formatter)
        root.addHandler(stderr_handler)

    # ── Console handler: only DEBUG and INFO ───────────────────
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.addFilter(MaxLevelFilter(logging.INFO))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(console_handler)

    # ── Suppress external noise ────────────────────────────────
    noisy_modules = [
        "urllib3",
        "google",
        "google.auth",
        "oauth2client",
        "werkzeug",
    ]
    for module in noisy_modules:
        logging.getLogger(module).setLevel(logging.WARNING)
