"""
hashspell Configuration & Logging Module
========================================
Centralized configuration, structured logging, and error types.

Configuration is read from HASHSPELL_* environment variables and may be
overridden by command-line flags. Logs go to stderr (and optionally a
rotating file) so stdout stays reserved for the report.
"""

import os
import sys
import json
import logging
import uuid
import time
import functools
import threading
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Callable
from pathlib import Path
from dataclasses import dataclass, field
from contextlib import contextmanager

__version__ = "1.0.0"
APP_NAME = "hashspell"

# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================
DEFAULT_CHUNK_SIZE = 8192            # Characters read per text chunk
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5MB max per log file
LOG_BACKUP_COUNT = 5                 # Number of log backup files to keep

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMATS = ('text', 'json')
REPORT_FORMATS = ('text', 'json')


# =============================================================================
# ENVIRONMENT CONFIGURATION
# =============================================================================

def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


@dataclass
class HashSpellConfig:
    """Runtime configuration for a spell-check run."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # Options: json, text
    log_to_console: bool = True
    log_to_file: bool = False
    log_dir: Path = field(default_factory=lambda: Path.cwd() / 'logs')

    # Input handling
    encoding: str = "utf-8"
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Output
    report_format: str = "text"  # Options: json, text

    def __post_init__(self):
        self.log_dir = Path(self.log_dir)
        if self.log_to_file:
            try:
                self.log_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ValidationError(f"Cannot create log directory {self.log_dir}: {e.strerror}",
                                      field='log_dir')

    @classmethod
    def from_env(cls) -> 'HashSpellConfig':
        """Load configuration from environment variables."""
        try:
            return cls(
                log_level=os.environ.get('HASHSPELL_LOG_LEVEL', 'WARNING').upper(),
                log_format=os.environ.get('HASHSPELL_LOG_FORMAT', 'text').lower(),
                log_to_console=_parse_bool(os.environ.get('HASHSPELL_LOG_CONSOLE', 'true')),
                log_to_file=_parse_bool(os.environ.get('HASHSPELL_LOG_FILE', 'false')),
                log_dir=Path(os.environ.get('HASHSPELL_LOG_DIR', str(Path.cwd() / 'logs'))),
                encoding=os.environ.get('HASHSPELL_ENCODING', 'utf-8'),
                chunk_size=int(os.environ.get('HASHSPELL_CHUNK_SIZE', str(DEFAULT_CHUNK_SIZE))),
                report_format=os.environ.get('HASHSPELL_REPORT_FORMAT', 'text').lower(),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid environment configuration: {e}", field='chunk_size')

    def validate(self) -> tuple:
        """Validate configuration and return (is_valid, errors)."""
        errors = []

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}")

        if self.log_format not in LOG_FORMATS:
            errors.append(f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'")

        if self.report_format not in REPORT_FORMATS:
            errors.append(f"Invalid report_format: {self.report_format}. Must be 'text' or 'json'")

        if self.chunk_size < 1:
            errors.append("chunk_size must be a positive integer")

        try:
            "".encode(self.encoding)
        except LookupError:
            errors.append(f"Unknown encoding: {self.encoding}")

        return (len(errors) == 0, errors)


# Global config instance
_config: Optional[HashSpellConfig] = None


def get_config() -> HashSpellConfig:
    """Get or create the global configuration."""
    global _config
    if _config is None:
        _config = HashSpellConfig.from_env()
    return _config


def set_config(config: HashSpellConfig):
    """Install an explicit configuration (CLI overrides, tests)."""
    global _config
    _config = config


def reset_config():
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


# =============================================================================
# STRUCTURED LOGGING
# =============================================================================

class StructuredLogger:
    """Structured logger with per-run correlation IDs."""

    _local = threading.local()

    def __init__(self, name: str, config: Optional[HashSpellConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._setup_logger()

    def _setup_logger(self):
        """Configure the underlying Python logger."""
        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.WARNING))
        self.logger.handlers.clear()
        self.logger.propagate = False

        if self.config.log_format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )

        # Console handler
        if self.config.log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler with rotation
        if self.config.log_to_file:
            from logging.handlers import RotatingFileHandler
            log_file = self.config.log_dir / f"{APP_NAME}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for the current run."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for the current run, creating one if unset."""
        correlation_id = getattr(cls._local, 'correlation_id', None)
        if correlation_id is None:
            correlation_id = cls.new_correlation_id()
        return correlation_id

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _extra(self, **kwargs) -> Dict[str, Any]:
        return {'correlation_id': self.get_correlation_id(), **kwargs}

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self.logger.debug(message, extra=self._extra(**kwargs))

    def info(self, message: str, **kwargs):
        """Log info message."""
        self.logger.info(message, extra=self._extra(**kwargs))

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self.logger.warning(message, extra=self._extra(**kwargs))

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self.logger.error(message, exc_info=exc_info, extra=self._extra(**kwargs))

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback."""
        self.error(message, exc_info=True, **kwargs)

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.info(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
            duration_ms = (time.time() - start_time) * 1000
            self.info(f"{operation} completed", operation=operation, status='completed',
                      duration_ms=round(duration_ms, 2), **context)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), **context)
            raise


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    RESERVED = frozenset((
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'stack_info', 'thread', 'threadName', 'exc_info', 'exc_text',
        'message', 'taskName', 'asctime',
    ))

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in self.RESERVED:
                log_data[key] = value

        return json.dumps(log_data, default=str)


# Factory function for getting loggers
def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name, get_config())


# =============================================================================
# ERROR HANDLING UTILITIES
# =============================================================================

class HashSpellError(Exception):
    """Base exception for hashspell."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR",
                 exit_code: int = 1, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.exit_code = exit_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            'success': False,
            'error': {
                'code': self.code,
                'message': self.message,
                'details': self.details
            }
        }


class ValidationError(HashSpellError):
    """Configuration or argument validation error."""
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, code="VALIDATION_ERROR", exit_code=2,
                         details={'field': field, **kwargs})


class FileError(HashSpellError):
    """Dictionary or text file could not be read."""
    def __init__(self, message: str, filename: Optional[str] = None, **kwargs):
        super().__init__(message, code="FILE_ERROR", exit_code=1,
                         details={'filename': filename, **kwargs})


class ProcessingError(HashSpellError):
    """Unexpected failure while loading or checking."""
    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        super().__init__(message, code="PROCESSING_ERROR", exit_code=1,
                         details={'stage': stage, **kwargs})


def handle_errors(logger: Optional[StructuredLogger] = None):
    """
    Decorator for standardized error handling.

    The fallback logger is only built when an error has to be logged, so a
    successful call never reconfigures the module logger.
    """
    def decorator(func: Callable):
        def _logger() -> StructuredLogger:
            return logger or get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HashSpellError:
                raise  # Re-raise our own errors
            except (FileNotFoundError, IsADirectoryError) as e:
                _logger().error(f"File not found: {e}")
                raise FileError(f"File not found: {e}", filename=getattr(e, 'filename', None))
            except PermissionError as e:
                _logger().error(f"Permission denied: {e}")
                raise FileError(f"Permission denied: {e}", filename=getattr(e, 'filename', None))
            except UnicodeDecodeError as e:
                _logger().error(f"Cannot decode input: {e}")
                raise FileError(f"Cannot decode input: {e.reason}", encoding=e.encoding)
            except ValueError as e:
                _logger().error(f"Validation error: {e}")
                raise ValidationError(str(e))
            except Exception as e:
                _logger().exception(f"Unexpected error in {func.__name__}: {e}")
                raise ProcessingError(f"An unexpected error occurred: {type(e).__name__}",
                                      stage=func.__name__)
        return wrapper
    return decorator
