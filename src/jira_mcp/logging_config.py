"""Logging configuration for jira-mcp."""

import logging
import os
import sys
import threading
import time
import types
import uuid
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5


class ContextualLogger(logging.Logger):
    """Logger that maintains context between related operations."""

    def __init__(self, name: str, level: int = 0) -> None:
        super().__init__(name, level)
        self._context_data = threading.local()

    def _get_context_str(self) -> str:
        context_data = getattr(self._context_data, "data", {})
        if not context_data:
            return "no-context"

        # operation=X,trace_id=Y,...
        return ",".join(f"{k}={v}" for k, v in context_data.items())

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        """Overrides _log method to include context."""
        if extra is None:
            extra = {}

        if "context" not in extra:
            extra = dict(extra)
            extra["context"] = self._get_context_str()

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """
        Sets context values for the logger.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        if not hasattr(self._context_data, "data"):
            self._context_data.data = {}

        self._context_data.data.update(kwargs)

    def clear_context(self) -> None:
        """Removes all context data from the logger."""
        if hasattr(self._context_data, "data"):
            self._context_data.data = {}


class ContextDefaultFilter(logging.Filter):
    """Gives records from plain loggers an empty context for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = "no-context"
        return True


class LoggingContextManager:
    """Context manager that logs the start, failure and duration of an operation."""

    def __init__(
        self, logger: logging.Logger, operation: str, **context: Any
    ) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger to write to (context is only kept by ContextualLogger)
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.time()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self.old_context: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContextManager":
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id

        if isinstance(self.logger, ContextualLogger):
            self.old_context = getattr(self.logger._context_data, "data", {}).copy()
            self.logger.set_context(**self.context)

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        if isinstance(self.logger, ContextualLogger):
            self.logger._context_data.data = self.old_context


def setup_logger(
    name: str = "jira-mcp",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Console output goes to stderr because stdout carries the MCP stdio stream.
    Calling this again for the same name replaces the previous handlers.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ContextDefaultFilter())
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ContextDefaultFilter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return cast(ContextualLogger, logger)


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger to write to
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a configuration parameter, masking it when sensitive."""
    if value is None:
        display_value = "Not Provided"
    elif sensitive:
        display_value = mask_sensitive(value)
    else:
        display_value = value
    logger.info(f"{service} {param}: {display_value}")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret, keeping only a few characters at each end."""
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return value[:keep_chars] + "*" * (len(value) - keep_chars * 2) + value[-keep_chars:]
