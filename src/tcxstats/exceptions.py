"""
Custom exceptions for tcxstats.

Defines specific exception types for better error handling and debugging.
"""


class TcxStatsError(Exception):
    """Base exception for all tcxstats errors."""


class TcxFileError(TcxStatsError):
    """Exception raised for TCX file loading errors."""


class TcxFileNotFoundError(TcxFileError):
    """Exception raised when a TCX file cannot be found."""


class TcxFileCorruptedError(TcxFileError):
    """Exception raised when a TCX file is not well-formed XML."""


class ConfigurationError(TcxStatsError):
    """Exception raised for configuration errors."""


class ValidationError(TcxStatsError):
    """Exception raised for data validation errors."""
