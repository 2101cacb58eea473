"""
Custom exceptions for projplot package.

This module defines exception classes for better error handling and messaging
across the package, particularly in the API and command-line workflows.

Errors raised by pyproj for malformed projection definitions are
not part of this hierarchy; they reach the caller unchanged.
"""


class ProjplotError(Exception):
    """Base exception class for all projplot errors."""
    pass


class InvalidParameterError(ProjplotError):
    """
    Raised for invalid user inputs.

    This exception is used for parameter validation failures such as
    malformed axis limits, empty projection definitions, or unknown
    geom names.
    """
    pass


class DataError(ProjplotError):
    """
    Raised when layer data cannot be used.

    This typically occurs when a mapped column is missing from the data
    frame or an input file cannot be read.
    """
    pass


class RenderError(ProjplotError):
    """
    Raised when plot rendering fails.

    This can occur due to invalid data, coordinate system issues, or
    matplotlib errors while drawing or saving the figure.
    """
    pass
