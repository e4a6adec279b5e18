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
Comment conventions for every supported file type.

A profile knows the delimiters of a block comment in its syntax (used to
detect an existing header) and the wrapper used to render a fresh one.
Detection patterns are always anchored at the start of the content, after
optional whitespace, so a header-shaped comment deep inside a file is never
picked up.
"""

import re
from dataclasses import dataclass, field

from headerstamp.core.exceptions import unsupported_file_type


def build_pattern(start: str, end: str) -> re.Pattern:
    """
    Anchored pattern for a block comment opening with ``start`` and closing
    with the first following ``end``.

    The body may contain anything, including newlines and lone ``*``, as long
    as it does not begin the end delimiter.
    """
    start, end = re.escape(start), re.escape(end)
    return re.compile(r"\A\s*(" + start + r"(?:(?!" + end + r")[\s\S])*" + end + r")")


@dataclass(frozen=True)
class FileTypeProfile:
    name: str
    start: str
    end: str
    header_start: str
    header_end: str
    continuation: str | None = None
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "pattern", build_pattern(self.start, self.end))


_DOC_BLOCK = {"start": "/*", "end": "*/", "header_start": "/**", "header_end": "*/"}

PROFILES: dict[str, FileTypeProfile] = {
    "php": FileTypeProfile("php", **_DOC_BLOCK),
    "js": FileTypeProfile("js", **_DOC_BLOCK),
    "ts": FileTypeProfile("ts", **_DOC_BLOCK),
    "css": FileTypeProfile("css", **_DOC_BLOCK),
    "scss": FileTypeProfile("scss", **_DOC_BLOCK),
    "json": FileTypeProfile("json", **_DOC_BLOCK),
    "tpl": FileTypeProfile("tpl", "{*", "*}", "{**", "*}"),
    "twig": FileTypeProfile("twig", "{#", "#}", "{#", "#}", continuation="#"),
    "html": FileTypeProfile("html", "<!--", "-->", "<!--**", "*-->"),
}

# file extension (full suffix after the first dot that matters) -> type tag
EXTENSION_TYPES: dict[str, str] = {
    "php": "php",
    "js": "js",
    "ts": "ts",
    "css": "css",
    "scss": "scss",
    "json": "json",
    "tpl": "tpl",
    "html.twig": "twig",
    "twig": "twig",
    "vue": "html",
    "html": "html",
}


def profile_for(type_tag: str) -> FileTypeProfile:
    try:
        return PROFILES[type_tag]
    except KeyError:
        raise unsupported_file_type(type_tag) from None


def regex_for(type_tag: str) -> re.Pattern:
    return profile_for(type_tag).pattern


def type_for_extension(extension: str) -> str:
    """Map a configured extension (``php``, ``html.twig``, ...) to its type tag."""
    try:
        return EXTENSION_TYPES[extension.lower().lstrip(".")]
    except KeyError:
        raise unsupported_file_type(extension) from None


# twig headers were written in several formats over time, these are tried in
# order before the canonical hash style
_TWIG_LINE = r"(?:(?!#\})[^\n])*"


def _twig_pattern(opening: str, marker: str) -> re.Pattern:
    return re.compile(
        r"\A\s*("
        + opening
        + _TWIG_LINE
        + r"(?:\r?\n[ \t]*"
        + marker
        + _TWIG_LINE
        + r")+\s*#\})"
    )


TWIG_CANDIDATES: tuple[tuple[str, re.Pattern], ...] = (
    ("padded-asterisk", _twig_pattern(r"\{# ", r"\*")),
    ("padded-hash", _twig_pattern(r"\{# ", r"#")),
    ("asterisk", _twig_pattern(r"\{#", r"\*")),
    ("hash", PROFILES["twig"].pattern),
)


def twig_candidates() -> tuple[tuple[str, re.Pattern], ...]:
    return TWIG_CANDIDATES
