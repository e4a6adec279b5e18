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

from pathlib import Path

import pytest
from loguru import logger

from headerstamp.constants import ASSETS_DIR

AFL_LICENSE = ASSETS_DIR / "afl.txt"
OSL_LICENSE = ASSETS_DIR / "osl.txt"


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path_factory, monkeypatch):
    """Keep log files of the tests out of the user log directory."""
    log_dir = tmp_path_factory.mktemp("logs")
    monkeypatch.setattr("headerstamp.core.logging.logging.LOG_DIR", log_dir)
    yield
    logger.remove()


@pytest.fixture
def afl_license() -> Path:
    return AFL_LICENSE


@pytest.fixture
def osl_license() -> Path:
    return OSL_LICENSE


@pytest.fixture
def write_tree(tmp_path):
    """Create files below tmp_path from a {relative path: content} mapping."""

    def _write(files: dict[str, str]) -> Path:
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        return tmp_path

    return _write


@pytest.fixture
def read_file():
    def _read(path: Path) -> str:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    return _read
