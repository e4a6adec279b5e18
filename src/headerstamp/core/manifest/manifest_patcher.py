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

"""Author and license metadata for composer.json / package.json manifests."""

import json
from pathlib import Path

from headerstamp.constants import MANIFEST_AUTHOR, MANIFEST_FILENAMES
from headerstamp.core.exceptions import EncodingFailureError


def is_manifest(path: Path) -> bool:
    return path.name in MANIFEST_FILENAMES


def license_identifier(license_path: str | Path) -> str:
    return "AFL-3.0" if "afl" in str(license_path).lower() else "OSL-3.0"


def patch_manifest(content: str, license_path: str | Path) -> str:
    """
    Set the author and license keys of a JSON manifest.

    Existing keys keep their order, new keys are appended. A trailing newline
    is kept when the original had one.

    Raises:
        EncodingFailureError: if the content is not a JSON object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise EncodingFailureError("Invalid JSON manifest", str(e)) from e

    if not isinstance(data, dict):
        raise EncodingFailureError(
            "JSON manifest is not an object",
            f"Top level value is a {type(data).__name__}",
        )

    data["author"] = dict(MANIFEST_AUTHOR)
    data["license"] = license_identifier(license_path)

    patched = json.dumps(data, indent=4, ensure_ascii=False)
    if content.endswith("\n"):
        patched += "\n"
    return patched
