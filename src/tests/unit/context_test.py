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

from headerstamp.context import GlobalConfig, UpdateContext
from headerstamp.core.exceptions import (
    LicenseFileNotFoundError,
    TargetDirectoryError,
)


def test_from_global_config(tmp_path, afl_license):
    config = GlobalConfig(
        license=str(afl_license),
        target=str(tmp_path),
        extensions=["php", "js"],
        exclude=["vendor"],
        not_name=["*.min.js"],
        dry_run=True,
    )

    context = UpdateContext.from_global_config(config)

    assert context.target == tmp_path.resolve()
    assert context.extensions == ("php", "js")
    assert context.excludes == ("vendor",)
    assert context.not_names == ("*.min.js",)
    assert context.discrimination_string == "NOTICE OF LICENSE"
    assert context.dry_run
    assert context.license_path == afl_license.resolve()


def test_bundled_license_by_name(tmp_path):
    config = GlobalConfig(license="afl.txt", target=str(tmp_path))

    context = UpdateContext.from_global_config(config)

    assert context.license_path.name == "afl.txt"


def test_missing_target(tmp_path):
    config = GlobalConfig(target=str(tmp_path / "missing"))

    with pytest.raises(TargetDirectoryError):
        UpdateContext.from_global_config(config)


def test_target_is_a_file(tmp_path):
    path = tmp_path / "file.php"
    path.write_text("<?php\n")

    with pytest.raises(TargetDirectoryError):
        UpdateContext.from_global_config(GlobalConfig(target=str(path)))


def test_missing_license(tmp_path):
    config = GlobalConfig(license=str(tmp_path / "nope.txt"), target=str(tmp_path))

    with pytest.raises(LicenseFileNotFoundError):
        UpdateContext.from_global_config(config)
