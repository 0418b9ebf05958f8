"""Structured JSON logger for per-file scan results and errors."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from gluadoc.constants import ERROR_TRUNCATION_CHARS
from gluadoc.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["ScanLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class ScanLogger:
    """JSON-lines logger, one record per scanned file or failure."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("gluadoc.scan")
        self._logger.setLevel(getattr(logging, level.upper()))

        if not self._logger.handlers:
            handler = logging.FileHandler(log_dir / "scan.log")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_scan(
        self,
        uri: str,
        edits: int,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "scan",
                "timestamp": datetime.now(UTC).isoformat(),
                "uri": uri,
                "edits": edits,
                "duration_ms": duration_ms,
            })
        )

    def log_error(
        self,
        uri: str,
        stage: str,
        error_class: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "uri": uri,
                "stage": stage,
                "error_class": error_class,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
