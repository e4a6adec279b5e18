# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the headerstamp CLI application.

Fatal errors (configuration, unsupported file types) stop the run before any
file is touched. Per-file errors (syntax, encoding) are caught by the update
pipeline and only affect the outcome reported for that file.
"""

import contextlib

import typer
from loguru import logger


class HeaderStampError(Exception):
    """
    Base exception for all headerstamp-related errors.

    All headerstamp-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a HeaderStampError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(HeaderStampError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid, missing,
    or contain incompatible settings.
    """

    pass


class LicenseFileNotFoundError(ConfigurationError):
    """Raised when the license header file cannot be located."""

    pass


class LicenseFileNotReadableError(ConfigurationError):
    """Raised when the license header file exists but cannot be read."""

    pass


class TargetDirectoryError(ConfigurationError):
    """Raised when the target directory is missing or is not a directory."""

    pass


class UnsupportedFileTypeError(HeaderStampError):
    """
    Raised when a file type has no known comment delimiters.

    This always points at a misconfigured extension list, so it is fatal.
    """

    pass


class HeaderSyntaxError(HeaderStampError):
    """
    Raised when a source file cannot be parsed.

    Recoverable: the file is left untouched and reported as failed.
    """

    pass


class EncodingFailureError(HeaderStampError):
    """
    Raised when structured metadata cannot be decoded or re-serialized.

    Recoverable: the file is left untouched and reported as failed.
    """

    pass


# Convenience functions for creating common errors
def license_file_not_found(path: str) -> LicenseFileNotFoundError:
    """Create an error for a license file that does not exist."""
    return LicenseFileNotFoundError(
        f"File {path} does not exist.",
        "Pass an existing file with --license, relative paths are resolved from the current directory",
    )


def license_file_not_readable(path: str) -> LicenseFileNotReadableError:
    """Create an error for a license file that cannot be read."""
    return LicenseFileNotReadableError(
        f"File {path} cannot be read.",
        "Check the file permissions",
    )


def target_not_found(path: str) -> TargetDirectoryError:
    """Create an error for a missing target directory."""
    return TargetDirectoryError(
        f"Target directory not found: {path}",
        "Please check that the path exists and is a readable directory",
    )


def unsupported_file_type(type_tag: str) -> UnsupportedFileTypeError:
    """Create an error for an unknown file type tag or extension."""
    return UnsupportedFileTypeError(
        f"Unsupported file type: {type_tag}",
        "Check the --extensions option, only known extensions can be processed",
    )


@contextlib.contextmanager
def handle_headerstamp_exception(exit_on_fail: bool = True):
    """
    Turn headerstamp errors into a readable message and a non-zero exit code.

    Can be used as a context manager or as a decorator.
    """
    try:
        yield
    except HeaderStampError as e:
        logger.error(f"Error: {e.message}")
        if e.details:
            logger.debug(f"Details: {e.details}")
        if exit_on_fail:
            raise typer.Exit(1) from e
        raise
