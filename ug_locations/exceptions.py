"""
Custom exception classes for the Uganda locations package.

Lookups never raise: a missing village, parish, subcounty or district is
reported as None or an empty list. The exceptions below cover loading the
dataset, configuration and the optional dataset quality checks.
"""

from typing import Optional, List, Dict, Any


class LocationError(Exception):
    """Base exception class for all location dataset errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        """
        Initialize the base location error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information about the error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'context': self.context
        }


class DataLoadError(LocationError):
    """Exception raised when the dataset payload cannot be decoded."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 field_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """
        Initialize data load error.

        Args:
            message: Human-readable error message
            file_path: Path to the file that caused the error
            field_name: Top-level dataset field that was missing or malformed
            original_error: Original exception that caused this error
        """
        context = {
            'file_path': file_path,
            'field_name': field_name,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='DATA_LOAD_ERROR', context=context)
        self.file_path = file_path
        self.field_name = field_name
        self.original_error = original_error


class FileAccessError(LocationError):
    """Exception raised for file access and I/O errors."""

    def __init__(self, message: str, file_path: str, operation: str,
                 original_error: Optional[Exception] = None):
        """
        Initialize file access error.

        Args:
            message: Human-readable error message
            file_path: Path to the file that caused the error
            operation: Type of operation that failed (read, write, etc.)
            original_error: Original exception that caused this error
        """
        context = {
            'file_path': file_path,
            'operation': operation,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='FILE_ACCESS_ERROR', context=context)
        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error


class ConfigurationError(LocationError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Any = None, valid_values: Optional[List[Any]] = None):
        """
        Initialize configuration error.

        Args:
            message: Human-readable error message
            config_key: Configuration key that has invalid value
            config_value: Invalid configuration value
            valid_values: List of valid values for the configuration key
        """
        context = {
            'config_key': config_key,
            'config_value': str(config_value) if config_value is not None else None,
            'valid_values': [str(v) for v in valid_values] if valid_values else None
        }
        super().__init__(message, error_code='CONFIGURATION_ERROR', context=context)
        self.config_key = config_key
        self.config_value = config_value
        self.valid_values = valid_values or []


class DataQualityError(LocationError):
    """Exception raised by strict dataset validation."""

    def __init__(self, message: str, quality_issue: str, affected_records: Optional[int] = None,
                 severity: str = 'medium', examples: Optional[List[str]] = None):
        """
        Initialize data quality error.

        Args:
            message: Human-readable error message
            quality_issue: Type of quality issue (orphan_villages, separator_in_name, etc.)
            affected_records: Number of records affected by the issue
            severity: Severity level (low, medium, high, critical)
            examples: A few offending keys or names
        """
        context = {
            'quality_issue': quality_issue,
            'affected_records': affected_records,
            'severity': severity,
            'examples': examples or []
        }
        super().__init__(message, error_code='DATA_QUALITY_ERROR', context=context)
        self.quality_issue = quality_issue
        self.affected_records = affected_records
        self.severity = severity
        self.examples = examples or []


def create_file_error(operation: str, file_path: str, original_error: Exception) -> FileAccessError:
    """
    Create a standardized file access error.

    Args:
        operation: Type of file operation that failed
        file_path: Path to the file
        original_error: Original exception

    Returns:
        FileAccessError instance
    """
    message = f"Failed to {operation} file '{file_path}': {str(original_error)}"

    return FileAccessError(
        message=message,
        file_path=file_path,
        operation=operation,
        original_error=original_error
    )


def get_error_severity(error: Exception) -> str:
    """
    Get the severity level of an error.

    Args:
        error: Exception to evaluate

    Returns:
        Severity level string (low, medium, high, critical)
    """
    if isinstance(error, ConfigurationError):
        return 'critical'
    elif isinstance(error, (DataLoadError, FileAccessError)):
        return 'high'
    elif isinstance(error, DataQualityError):
        return error.severity
    else:
        return 'medium'
