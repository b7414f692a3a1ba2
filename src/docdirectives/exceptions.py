#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docdirectives library.

This module defines the exception classes raised while configuring and
running directive transforms. Most shape mismatches are not errors at all:
a directive that does not fit a transform's expected pattern is simply left
in the tree. Exceptions are reserved for invalid configuration and for
derivation failures that the caller has to decide about.

Exception Hierarchy
-------------------
- DirectiveError (base exception)

  - ValidationError (option/parameter validation)

  - InvalidUrlError (link-preview URL could not be parsed)

  - TransformError (a transform pass failed)

  - ConfigError (configuration file loading)

"""

from typing import Any


class DirectiveError(Exception):
    """Base exception class for all docdirectives-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DirectiveError):
    """Exception raised for invalid options or parameters.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidUrlError(DirectiveError):
    """Exception raised when a link-preview URL cannot be turned into metadata.

    Raised for missing, relative or malformed URLs. The failure concerns a
    single directive; callers decide whether it aborts the whole run.

    Parameters
    ----------
    url : str or None
        The offending URL (None when the attribute was missing)
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying parse error

    """

    def __init__(self, url: str | None, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the URL that failed."""
        if message is None:
            message = f"Invalid URL: {url!r}"
        super().__init__(message, original_error)
        self.url = url


class TransformError(DirectiveError):
    """Exception raised when a transform pass fails.

    Parameters
    ----------
    message : str
        Description of the transform failure
    transform_name : str, optional
        Name of the transform that failed
    original_error : Exception, optional
        The underlying exception that caused the transform failure

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name


class ConfigError(DirectiveError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the configuration file
    original_error : Exception, optional
        The underlying I/O or parse error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error)
        self.config_path = config_path


__all__ = [
    "DirectiveError",
    "ValidationError",
    "InvalidUrlError",
    "TransformError",
    "ConfigError",
]
