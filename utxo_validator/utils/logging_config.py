# utxo_validator/utils/logging_config.py
import logging
import logging.handlers
import json
import os
import sys
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

ROOT_LOGGER_NAME = "utxo_validator"


class LogFormat(Enum):
    """Log format types"""
    DETAILED = "detailed"
    JSON = "json"


class StructuredFormatter(logging.Formatter):
    """Formatter that renders the ``structured_data`` extra alongside the message"""

    def __init__(self, fmt_type: LogFormat = LogFormat.DETAILED, include_context: bool = True):
        self.fmt_type = fmt_type
        self.include_context = include_context
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        structured_data = getattr(record, 'structured_data', {})

        if self.fmt_type == LogFormat.JSON:
            return self._format_json(record, structured_data)
        return self._format_text(record, structured_data)

    def _format_json(self, record: logging.LogRecord, structured_data: Dict) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if structured_data:
            log_entry["data"] = structured_data

        return json.dumps(log_entry, default=str)

    def _format_text(self, record: logging.LogRecord, structured_data: Dict) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

        base_msg = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        if self.include_context and structured_data:
            base_msg += f" | {json.dumps(structured_data, default=str)}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        return base_msg


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None,
                  max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5,
                  log_format: Union[str, LogFormat] = LogFormat.DETAILED) -> logging.Logger:
    """Configure the ``utxo_validator`` logger with a console handler and an optional rotating file.

    Only the package logger is touched; the embedding application keeps
    control of the root logger.
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    if isinstance(log_format, str):
        log_format = LogFormat(log_format.lower())

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger
