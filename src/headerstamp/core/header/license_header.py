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
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from loguru import logger

from headerstamp.constants import ASSETS_DIR, CURRENT_YEAR_PLACEHOLDER
from headerstamp.core.exceptions import (
    license_file_not_found,
    license_file_not_readable,
)

from .profiles import FileTypeProfile, profile_for

_LINE_MARKER = re.compile(r"^([ \t]*)\*", re.MULTILINE)


@dataclass(frozen=True)
class CanonicalHeader:
    """License text exactly as loaded, plus where it was found."""

    raw_text: str
    source_path: Path


def render(text: str, profile: FileTypeProfile) -> str:
    """
    Re-wrap a ``/** ... */`` license text with the delimiters of ``profile``.

    Text that is not wrapped in a doc block is used as the comment body as is.
    For profiles with a continuation marker (twig), the leading `` *`` of every
    interior line is swapped for that marker.
    """
    stripped = text.strip()
    if stripped.startswith("/**") and stripped.endswith("*/") and len(stripped) >= 5:
        body = stripped[3:-2]
    else:
        body = "\n" + stripped + "\n"

    if profile.continuation is not None:
        body = _LINE_MARKER.sub(
            lambda m: m.group(1) + profile.continuation, body
        )

    return profile.header_start + body + profile.header_end


class LicenseHeader:
    """Loads the canonical license text once and renders it per file type."""

    def __init__(self, file_path: str | Path, assets_dir: Path = ASSETS_DIR):
        self.file_path = Path(file_path)
        self.assets_dir = assets_dir
        self._header: CanonicalHeader | None = None
        self._renderings: dict[str, str] = {}

    @property
    def content(self) -> str:
        return self.load().raw_text

    @property
    def source_path(self) -> Path:
        return self.load().source_path

    def load(self) -> CanonicalHeader:
        if self._header is None:
            self._header = self._load_file()
        return self._header

    def render_for_type(self, type_tag: str) -> str:
        if type_tag not in self._renderings:
            self._renderings[type_tag] = render(self.content, profile_for(type_tag))
        return self._renderings[type_tag]

    def candidate_paths(self) -> list[Path]:
        """Paths tried in order: as given, from the cwd, from the bundled assets."""
        if self.file_path.is_absolute():
            return [self.file_path]
        return [
            self.file_path,
            Path.cwd() / self.file_path,
            self.assets_dir / self.file_path,
        ]

    def _resolve(self) -> Path:
        for candidate in self.candidate_paths():
            if candidate.is_file():
                return candidate
        raise license_file_not_found(str(self.file_path))

    def _load_file(self) -> CanonicalHeader:
        path = self._resolve()

        if not os.access(path, os.R_OK):
            raise license_file_not_readable(str(path))

        try:
            with open(path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise license_file_not_readable(str(path)) from e

        text = text.replace(CURRENT_YEAR_PLACEHOLDER, str(date.today().year))
        logger.debug(f"Loaded license header from {path}")

        return CanonicalHeader(raw_text=text, source_path=path.resolve())
