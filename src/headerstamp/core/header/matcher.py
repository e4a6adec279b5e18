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
Strategies locating an existing header at the top of a file.

Every strategy answers with a MatchResult in one of three states: found and
ours (safe to overwrite), found but not ours (left untouched, a new header
goes in front of it) and not found.
"""

import re
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from headerstamp.core.file_reader.php_parser import PhpParser

from .profiles import twig_candidates


@dataclass(frozen=True)
class MatchResult:
    found: bool
    text: str = ""
    start: int = 0
    end: int = 0
    is_ours: bool = False
    style: str | None = None
    # php: a new header goes right after the opening tag
    at_open_tag: bool = False

    @classmethod
    def not_found(cls, at_open_tag: bool = False) -> "MatchResult":
        return cls(found=False, at_open_tag=at_open_tag)


def contains_marker(text: str, marker: str) -> bool:
    return marker.lower() in text.lower()


class HeaderMatcher(Protocol):
    def find_header(self, content: str) -> MatchResult: ...


class RegexHeaderMatcher:
    def __init__(self, pattern: re.Pattern, marker: str, style: str | None = None):
        self.pattern = pattern
        self.marker = marker
        self.style = style

    def find_header(self, content: str) -> MatchResult:
        return _match_pattern(self.pattern, content, self.marker, self.style)


class TwigHeaderMatcher:
    """Tries the legacy twig header formats in priority order."""

    def __init__(self, marker: str):
        self.marker = marker

    def find_header(self, content: str) -> MatchResult:
        for style, pattern in twig_candidates():
            result = _match_pattern(pattern, content, self.marker, style)
            if result.found:
                return result
        return MatchResult.not_found()


class PhpHeaderMatcher:
    """
    Uses the syntax tree to look at the comments attached to the first
    statement instead of matching text.

    Raises HeaderSyntaxError when the file cannot be parsed.
    """

    def __init__(self, marker: str, parser: PhpParser | None = None):
        self.marker = marker
        self.parser = parser or PhpParser()

    def find_header(self, content: str) -> MatchResult:
        comments = self.parser.leading_comments(content)
        if not comments:
            return MatchResult.not_found(at_open_tag=True)

        for comment in comments:
            if contains_marker(comment.text, self.marker):
                return MatchResult(
                    found=True,
                    text=comment.text,
                    start=comment.start,
                    end=comment.end,
                    is_ours=True,
                    style="php",
                )

        first = comments[0]
        logger.debug(
            "Leading PHP comment does not contain {marker!r}, keeping it",
            marker=self.marker,
        )
        return MatchResult(
            found=True,
            text=first.text,
            start=first.start,
            end=first.end,
            is_ours=False,
            style="php",
            at_open_tag=True,
        )


def _match_pattern(
    pattern: re.Pattern, content: str, marker: str, style: str | None
) -> MatchResult:
    match = pattern.match(content)
    if match is None:
        return MatchResult.not_found()

    text = match.group(1)
    return MatchResult(
        found=True,
        text=text,
        start=match.start(1),
        end=match.end(1),
        is_ours=contains_marker(text, marker),
        style=style,
    )
