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

import pytest
import typer

from headerstamp.core.exceptions import (
    ConfigurationError,
    HeaderStampError,
    HeaderSyntaxError,
    LicenseFileNotFoundError,
    TargetDirectoryError,
    UnsupportedFileTypeError,
    handle_headerstamp_exception,
    license_file_not_found,
    target_not_found,
    unsupported_file_type,
)


def test_factories():
    error = license_file_not_found("foo.txt")
    assert isinstance(error, LicenseFileNotFoundError)
    assert isinstance(error, ConfigurationError)
    assert error.message == "File foo.txt does not exist."
    assert error.details

    assert isinstance(target_not_found("src"), TargetDirectoryError)

    error = unsupported_file_type("cobol")
    assert isinstance(error, UnsupportedFileTypeError)
    assert "cobol" in str(error)


def test_handler_exits_with_error_code():
    with pytest.raises(typer.Exit) as exc_info:
        with handle_headerstamp_exception():
            raise target_not_found("src")

    assert exc_info.value.exit_code == 1


def test_handler_reraises_without_exit():
    with pytest.raises(HeaderSyntaxError):
        with handle_headerstamp_exception(exit_on_fail=False):
            raise HeaderSyntaxError("Syntax error")


def test_handler_ignores_other_errors():
    with pytest.raises(KeyError):
        with handle_headerstamp_exception():
            raise KeyError("x")


def test_handler_as_decorator():
    @handle_headerstamp_exception()
    def failing():
        raise HeaderStampError("boom")

    with pytest.raises(typer.Exit):
        failing()
