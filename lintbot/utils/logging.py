"""
Structured logging utilities with JSON formatting and context injection.

This module provides structured logging capabilities with:
- JSON formatted log output for machine-readable logs
- Context injection (build_id, linter_name, file_path) via LoggerAdapter
- Integration with Python's standard logging module
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from logging import LogRecord
from typing import Any, Dict, MutableMapping, Optional

# Fields promoted to the top level of every JSON log line
CONTEXT_FIELDS = (
    "build_id",
    "commit_sha",
    "pull_request_number",
    "linter_name",
    "file_path",
)

_RESERVED_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
}


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    
    Outputs log records as JSON with standard fields:
    - timestamp: ISO 8601 formatted timestamp
    - level: Log level (INFO, WARNING, ERROR, etc.)
    - logger: Logger name
    - message: Log message
    - build_id, linter_name, file_path, ...: promoted context fields
    - context: Any other extra fields
    - error: Error details when exc_info is set
    """
    
    def format(self, record: LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)
        
        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and key not in CONTEXT_FIELDS
        }
        if extra_fields:
            log_data["context"] = extra_fields
        
        if record.exc_info:
            log_data["error"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "stack_trace": "".join(traceback.format_exception(*record.exc_info))
            }
        
        log_data["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName
        }
        
        return json.dumps(log_data, default=str)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that injects context fields into all log records.
    """
    
    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None):
        super().__init__(logger, extra or {})
    
    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs
    
    def with_context(self, **context: Any) -> "ContextLoggerAdapter":
        """
        Create a new logger adapter with additional context.
        
        Args:
            **context: Additional context fields
            
        Returns:
            New logger adapter with merged context
        """
        new_extra = dict(self.extra)
        new_extra.update(context)
        return ContextLoggerAdapter(self.logger, new_extra)


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging for the application.
    
    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    formatter = JSONFormatter()
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    
    # Reduce noise from third-party libraries
    logging.getLogger("aiomysql").setLevel(logging.WARNING)
    logging.getLogger("redis").setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> ContextLoggerAdapter:
    """
    Get a context-aware logger for a module.
    
    Args:
        name: Logger name (typically __name__)
        **context: Initial context fields (build_id, linter_name, etc.)
        
    Returns:
        Context logger adapter
    """
    base_logger = logging.getLogger(name)
    return ContextLoggerAdapter(base_logger, context)


def log_error_with_context(
    logger: logging.LoggerAdapter,
    message: str,
    error: Exception,
    **context: Any
) -> None:
    """
    Log error with full stack trace and context.
    
    Args:
        logger: Logger to use
        message: Error message
        error: Exception object
        **context: Additional context fields
    """
    context.setdefault("error_type", type(error).__name__)
    logger.error(
        message,
        extra=context,
        exc_info=(type(error), error, error.__traceback__)
    )
