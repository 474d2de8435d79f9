#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the plugdoc library.

This module defines the exception classes raised by the transcoding, rendering
and fetching code. The boundary layer in :mod:`plugdoc.api` catches them and
degrades to the empty string, ``False`` or an error sentinel, so host callers
never see them.

Exception Hierarchy
-------------------
- PlugdocError (base exception)

  - ValidationError (parameter validation)
    - ColorFormatError (color is not ``#RRGGBB``)
    - ArityError (wrong argument count for a plugin entry)
    - PluginEntryError (malformed or unknown plugin entry)

  - NetworkError (remote resource access)
    - FetchError (transport failure, HTTP error status)
    - NetworkDisabledError (network globally disabled)

  - ContentDecodingError (fetched bytes are not valid UTF-8)

  - DependencyError (missing optional packages)

"""

from typing import Any


class PlugdocError(Exception):
    """Base exception class for all plugdoc-specific errors.

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


class ValidationError(PlugdocError):
    """Exception raised for invalid input parameters.

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


class ColorFormatError(ValidationError):
    """Exception raised when a color string is not in ``#RRGGBB`` form.

    Parameters
    ----------
    color : any
        The rejected color value
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, color: Any, message: str | None = None):
        """Initialize the color format error."""
        if message is None:
            message = f"Invalid color format {color!r}. Expected format: #RRGGBB"
        super().__init__(message, parameter_name="color", parameter_value=color)


class ArityError(ValidationError):
    """Exception raised when a plugin entry is invoked with the wrong argument count."""

    def __init__(self, entry_name: str, expected: int, received: int):
        """Initialize the arity error."""
        message = f"{entry_name} expects {expected} argument(s) but received {received}"
        super().__init__(message, parameter_name="args", parameter_value=received)
        self.entry_name = entry_name
        self.expected = expected
        self.received = received


class PluginEntryError(ValidationError):
    """Exception raised for malformed or unknown plugin entries."""


class NetworkError(PlugdocError):
    """Base exception for failures reaching a remote resource.

    Parameters
    ----------
    message : str
        Description of the failure
    url : str, optional
        The URL that could not be fetched
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, url: str | None = None, original_error: Exception | None = None):
        """Initialize the network error with the offending URL."""
        super().__init__(message, original_error=original_error)
        self.url = url


class FetchError(NetworkError):
    """Exception raised when an HTTP transfer fails."""


class NetworkDisabledError(NetworkError):
    """Exception raised when network access is disabled by the environment."""


class ContentDecodingError(PlugdocError):
    """Exception raised when fetched content is not valid UTF-8.

    Parameters
    ----------
    message : str
        Description of the decoding failure
    url : str, optional
        Source of the undecodable bytes
    original_error : Exception, optional
        The underlying ``UnicodeDecodeError``

    """

    def __init__(self, message: str, url: str | None = None, original_error: Exception | None = None):
        """Initialize the decoding error."""
        super().__init__(message, original_error=original_error)
        self.url = url


class DependencyError(PlugdocError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import failure that triggered this error

    Attributes
    ----------
    feature_name : str
        The feature that has missing dependencies
    missing_packages : list[tuple[str, str]]
        Packages that need to be installed
    install_command : str
        Command to install missing dependencies

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        packages = " ".join(f"{name}{spec}" for name, spec in missing_packages)
        self.install_command = f"pip install {packages}" if packages else ""
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            if self.install_command:
                message += f". Install with: {self.install_command}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.original_import_error = original_import_error
