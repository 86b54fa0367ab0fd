"""
Error handling utilities for the Uganda locations package.

This module provides retry configuration and safe file access used while
loading the dataset, plus helpers for logging errors with context.
"""

import time
import logging
from typing import Callable, Any, Optional, List, Dict, Type, Union
from pathlib import Path

from ..exceptions import FileAccessError, create_file_error, get_error_severity


class RetryConfig:
    """Configuration for retry mechanisms."""

    def __init__(self, max_attempts: int = 3, base_delay: float = 1.0,
                 max_delay: float = 60.0, backoff_factor: float = 2.0,
                 retry_exceptions: Optional[List[Type[Exception]]] = None):
        """
        Initialize retry configuration.

        Args:
            max_attempts: Maximum number of retry attempts
            base_delay: Base delay between retries in seconds
            max_delay: Maximum delay between retries in seconds
            backoff_factor: Factor to multiply delay by for exponential backoff
            retry_exceptions: List of exception types to retry on
        """
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.retry_exceptions = retry_exceptions or [
            PermissionError, InterruptedError, TimeoutError, BlockingIOError
        ]

    def get_delay(self, attempt: int) -> float:
        """Delay before the next attempt, with exponential backoff."""
        return min(
            self.base_delay * (self.backoff_factor ** (attempt - 1)),
            self.max_delay
        )


def safe_file_operation(operation: Callable, file_path: Union[str, Path],
                        operation_name: str, retry_config: Optional[RetryConfig] = None,
                        logger: Optional[logging.Logger] = None) -> Any:
    """
    Safely perform file operations with retry and error handling.

    Only exceptions listed in ``retry_config.retry_exceptions`` are retried;
    any other OSError is converted to FileAccessError straight away.
    Exceptions that are not OSErrors propagate unchanged so callers can
    translate decoding failures themselves.

    Args:
        operation: Function to perform the file operation
        file_path: Path to the file
        operation_name: Name of the operation for logging
        retry_config: Configuration for retry behavior
        logger: Optional logger instance

    Returns:
        Result of the file operation

    Raises:
        FileAccessError: If the operation fails after all retries
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if retry_config is None:
        retry_config = RetryConfig()

    file_path = Path(file_path)

    for attempt in range(1, retry_config.max_attempts + 1):
        try:
            logger.debug(f"Attempting {operation_name} on {file_path} (attempt {attempt})")
            return operation()

        except OSError as e:
            retryable = any(isinstance(e, exc_type) for exc_type in retry_config.retry_exceptions)

            if not retryable or attempt == retry_config.max_attempts:
                logger.error(f"{operation_name} failed after {attempt} attempt(s): {e}")
                raise create_file_error(operation_name, str(file_path), e) from e

            delay = retry_config.get_delay(attempt)
            logger.warning(f"{operation_name} failed (attempt {attempt}): {e}. Retrying in {delay:.2f} seconds")
            time.sleep(delay)

    # max_attempts < 1
    raise FileAccessError(
        f"No attempt made to {operation_name} file: {file_path}",
        file_path=str(file_path),
        operation=operation_name
    )


def create_error_context(operation: str, **kwargs) -> Dict[str, Any]:
    """
    Create standardized error context dictionary.

    Args:
        operation: Name of the operation being performed
        **kwargs: Additional context information

    Returns:
        Dictionary with error context information
    """
    context = {
        'operation': operation,
        'timestamp': time.time(),
    }
    context.update(kwargs)
    return context


def log_error_details(logger: logging.Logger, error: Exception,
                      context: Optional[Dict[str, Any]] = None):
    """
    Log detailed error information.

    Args:
        logger: Logger instance to use
        error: Exception to log
        context: Optional context information
    """
    error_details = {
        'error_type': type(error).__name__,
        'error_message': str(error),
        'severity': get_error_severity(error)
    }

    if hasattr(error, 'to_dict'):
        error_details.update(error.to_dict())

    if context:
        error_details['context'] = context

    severity = error_details.get('severity', 'medium')
    if severity == 'critical':
        logger.critical(f"Critical error occurred: {error_details}")
    elif severity == 'high':
        logger.error(f"High severity error: {error_details}")
    elif severity == 'medium':
        logger.warning(f"Medium severity error: {error_details}")
    else:
        logger.info(f"Low severity error: {error_details}")
