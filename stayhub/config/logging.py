"""
Logging Configuration and Utilities

Structured logging for the SDK: structlog processors on top of the
standard library, JSON output through python-json-logger, and a small
adapter that carries per-component context.
"""

import sys
import logging
import logging.handlers
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from pathlib import Path

import structlog
from pythonjsonlogger import jsonlogger

from stayhub.config.settings import Settings, settings as default_settings

SENSITIVE_KEYS = (
    'password', 'token', 'secret', 'authorization', 'cvv',
    'card_number', 'account_number', 'idempotency',
)

_configured = False


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(sensitive in lowered for sensitive in SENSITIVE_KEYS)


def redact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with sensitive values masked"""
    cleaned: Dict[str, Any] = {}
    for key, value in data.items():
        if _is_sensitive(key):
            cleaned[key] = '[REDACTED]'
        elif isinstance(value, dict):
            cleaned[key] = redact(value)
        else:
            cleaned[key] = value
    return cleaned


class ServiceContextProcessor:
    """Add service information to structlog events"""

    def __init__(self, app_settings: Settings):
        self.app_settings = app_settings

    def __call__(self, logger, method_name, event_dict):
        event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
        event_dict['service'] = 'stayhub-client'
        event_dict['environment'] = self.app_settings.ENVIRONMENT
        return event_dict


class SensitiveDataProcessor:
    """Mask tokens, passwords and card data before rendering"""

    def __call__(self, logger, method_name, event_dict):
        return redact(event_dict)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with standard fields and redacted extras"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        for key in list(log_record.keys()):
            if _is_sensitive(key):
                log_record[key] = '[REDACTED]'

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class LoggingConfig:
    """Centralized logging configuration"""

    @staticmethod
    def configure_structured_logging(app_settings: Settings):
        """Configure structured logging with structlog"""

        processors = [
            ServiceContextProcessor(app_settings),
            SensitiveDataProcessor(),
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]

        if app_settings.LOG_FORMAT == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.processors.KeyValueRenderer())

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def configure_standard_logging(app_settings: Settings):
        """Configure the ``stayhub`` logger hierarchy"""

        level = getattr(logging, app_settings.LOG_LEVEL)
        package_logger = logging.getLogger("stayhub")
        package_logger.setLevel(level)
        package_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        if app_settings.LOG_FORMAT == "json":
            formatter = CustomJsonFormatter(
                '%(asctime)s %(name)s %(levelname)s %(message)s'
            )
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

        if app_settings.LOG_FILE:
            log_path = Path(app_settings.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

        LoggingConfig._configure_library_loggers()

    @staticmethod
    def _configure_library_loggers():
        """Reduce noise from HTTP and database libraries"""
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class LoggerAdapter:
    """Logger adapter with context management"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._context: Dict[str, Any] = {}

    def add_context(self, **kwargs):
        """Add context to all log messages"""
        self._context.update(kwargs)
        return self

    def remove_context(self, *keys):
        """Remove context keys"""
        for key in keys:
            self._context.pop(key, None)
        return self

    def clear_context(self):
        self._context.clear()
        return self

    def _log(self, level: int, message: str, *args, **kwargs):
        extra = dict(self._context)
        extra.update(kwargs.get('extra') or {})
        kwargs['extra'] = redact(extra)
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Get a logger adapter for an SDK component.

    Args:
        name: Logger name, usually ``__name__`` of the caller

    Returns:
        Logger adapter bound to the named stdlib logger
    """
    return LoggerAdapter(logging.getLogger(name or "stayhub"))


def setup_logging(app_settings: Optional[Settings] = None, force: bool = False) -> None:
    """Initialize logging configuration once per process"""
    global _configured
    if _configured and not force:
        return

    app_settings = app_settings or default_settings
    if app_settings.ENABLE_STRUCTURED_LOGGING:
        LoggingConfig.configure_structured_logging(app_settings)

    LoggingConfig.configure_standard_logging(app_settings)
    _configured = True

    get_logger(__name__).info("Logging system initialized", extra={
        'log_level': app_settings.LOG_LEVEL,
        'log_format': app_settings.LOG_FORMAT,
        'structured_logging': app_settings.ENABLE_STRUCTURED_LOGGING,
    })


__all__ = [
    'get_logger',
    'setup_logging',
    'redact',
    'LoggerAdapter',
    'LoggingConfig',
]
