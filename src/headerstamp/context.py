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

import os
from dataclasses import dataclass, field
from pathlib import Path

from headerstamp.constants import (
    DEFAULT_DISCRIMINATION_STRING,
    DEFAULT_EXTENSIONS,
    DEFAULT_LICENSE_FILE,
)
from headerstamp.core.config.type_constraints import (
    BoolConstraint,
    CommaListConstraint,
    StringConstraint,
)
from headerstamp.core.exceptions import target_not_found
from headerstamp.core.header.license_header import LicenseHeader


@dataclass
class GlobalConfig:
    license: str = str(DEFAULT_LICENSE_FILE)
    target: str = "."
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = field(default_factory=list)
    not_name: list[str] = field(default_factory=list)
    header_discrimination_string: str = DEFAULT_DISCRIMINATION_STRING
    dry_run: bool = False
    display_report: bool = False
    verbose: bool = False
    silent: bool = False

    constraints = {
        "license": StringConstraint(allow_empty=False),
        "target": StringConstraint(allow_empty=False),
        "extensions": CommaListConstraint(allow_empty=False),
        "exclude": CommaListConstraint(),
        "not_name": CommaListConstraint(),
        "header_discrimination_string": StringConstraint(allow_empty=False),
        "dry_run": BoolConstraint(),
        "display_report": BoolConstraint(),
        "verbose": BoolConstraint(),
        "silent": BoolConstraint(),
    }

    descriptions = {
        "license": "License file to apply, resolved from the cwd then from the bundled assets (afl.txt, osl.txt)",
        "target": "Folder in which files are updated",
        "extensions": "Comma-separated list of file extensions to update",
        "exclude": "Comma-separated list of folders to exclude from the update",
        "not_name": "Comma-separated list of file name patterns to exclude from the update",
        "header_discrimination_string": "Existing comments containing this string are replaced, others are kept",
        "dry_run": "Only report the files that need fixing, do not write anything",
        "display_report": "List every processed file at the end of the run",
        "verbose": "Enable verbose logging output",
        "silent": "Do not output any text to the console except the final report",
    }


@dataclass(frozen=True)
class UpdateContext:
    target: Path
    license_header: LicenseHeader
    extensions: tuple[str, ...]
    excludes: tuple[str, ...] = ()
    not_names: tuple[str, ...] = ()
    discrimination_string: str = DEFAULT_DISCRIMINATION_STRING
    dry_run: bool = False
    silent: bool = False

    @classmethod
    def from_global_config(cls, config: GlobalConfig) -> "UpdateContext":
        """
        Build the run context, failing fast on a bad target or license file
        so that nothing is touched when the configuration is wrong.
        """
        target = Path(config.target).expanduser()
        if not target.is_dir() or not os.access(target, os.R_OK):
            raise target_not_found(config.target)

        license_header = LicenseHeader(config.license)
        license_header.load()

        return cls(
            target=target.resolve(),
            license_header=license_header,
            extensions=tuple(config.extensions),
            excludes=tuple(config.exclude),
            not_names=tuple(config.not_name),
            discrimination_string=config.header_discrimination_string,
            dry_run=config.dry_run,
            silent=config.silent,
        )

    @property
    def license_path(self) -> Path:
        return self.license_header.source_path


@dataclass(frozen=True)
class GlobalContext:
    """Options given to the top level command, shared with every subcommand."""

    custom_config: Path | None = None
    verbose: bool | None = None
    silent: bool | None = None
