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

from collections.abc import Iterable
from dataclasses import dataclass

from headerstamp.core.file_reader.php_parser import PhpParser

from .license_header import LicenseHeader
from .matcher import (
    HeaderMatcher,
    MatchResult,
    PhpHeaderMatcher,
    RegexHeaderMatcher,
    TwigHeaderMatcher,
)
from .profiles import regex_for
from .rewriter import rewrite

BOM = "\ufeff"


@dataclass(frozen=True)
class HeaderHandler:
    """Detection strategy and rendered header for one file type."""

    type_tag: str
    matcher: HeaderMatcher
    rendered: str

    def detect(self, content: str) -> MatchResult:
        return self.matcher.find_header(content)

    def render(self) -> str:
        return self.rendered

    def apply(self, content: str) -> str:
        # the byte order mark stays at offset 0, headers go after it
        bom = BOM if content.startswith(BOM) else ""
        body = content[len(bom) :]
        return bom + rewrite(body, self.detect(body), self.rendered)


def build_matcher(
    type_tag: str, marker: str, php_parser: PhpParser | None = None
) -> HeaderMatcher:
    if type_tag == "php":
        return PhpHeaderMatcher(marker, php_parser)
    if type_tag == "twig":
        return TwigHeaderMatcher(marker)
    return RegexHeaderMatcher(regex_for(type_tag), marker, style=type_tag)


def build_handlers(
    license_header: LicenseHeader,
    marker: str,
    type_tags: Iterable[str],
    php_parser: PhpParser | None = None,
) -> dict[str, HeaderHandler]:
    """
    Build one handler per type tag.

    Raises UnsupportedFileTypeError for an unknown tag, before any file is read.
    """
    handlers = {}
    for type_tag in type_tags:
        handlers[type_tag] = HeaderHandler(
            type_tag=type_tag,
            matcher=build_matcher(type_tag, marker, php_parser),
            rendered=license_header.render_for_type(type_tag),
        )
    return handlers
