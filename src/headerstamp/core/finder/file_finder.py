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
from collections.abc import Sequence
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath

from loguru import logger


class FileFinder:
    """
    Finds files below a target directory by full name suffix.

    Hidden files and folders are always skipped. ``excludes`` are folder names
    or relative folder paths, matched at any depth. ``not_names`` are filename
    globs.
    """

    def __init__(
        self,
        target: Path,
        excludes: Sequence[str] = (),
        not_names: Sequence[str] = (),
    ):
        self.target = Path(target)
        self.excludes = [
            PurePosixPath(e).parts
            for e in (e.strip().strip("/") for e in excludes)
            if e
        ]
        self.not_names = [n.strip() for n in not_names if n.strip()]

    def relative_id(self, path: Path) -> str:
        return path.relative_to(self.target).as_posix()

    def find(self, extension: str) -> list[Path]:
        suffix = "." + extension.lstrip(".")
        found = []

        for dirpath, dirnames, filenames in os.walk(self.target):
            rel_dir = Path(dirpath).relative_to(self.target)
            dirnames[:] = sorted(
                d for d in dirnames if not self._is_excluded_dir(rel_dir / d)
            )

            for filename in sorted(filenames):
                if filename.startswith(".") or not filename.endswith(suffix):
                    continue
                if self._is_excluded_name(filename):
                    logger.debug(f"Skipping {filename}: excluded by name")
                    continue
                found.append(Path(dirpath) / filename)

        return sorted(found, key=self.relative_id)

    def _is_excluded_dir(self, rel_dir: Path) -> bool:
        if rel_dir.name.startswith("."):
            return True

        parts = rel_dir.parts
        for excluded in self.excludes:
            size = len(excluded)
            if any(
                parts[i : i + size] == excluded for i in range(len(parts) - size + 1)
            ):
                logger.debug(f"Skipping folder {rel_dir.as_posix()}")
                return True
        return False

    def _is_excluded_name(self, filename: str) -> bool:
        return any(fnmatchcase(filename, pattern) for pattern in self.not_names)
