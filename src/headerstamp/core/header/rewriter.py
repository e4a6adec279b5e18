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
Pure content transforms turning a file's content and a MatchResult into the
content with an up-to-date header. Nothing here touches the filesystem.
"""

import re

from .matcher import MatchResult

PHP_OPEN_TAG = "<?php"

_BLANK_LINE = re.compile(r"[ \t]*\r?\n[ \t]*\r?\n")


def line_ending(content: str) -> str:
    """Line ending of the first line, LF when the content has a single line."""
    index = content.find("\n")
    if index > 0 and content[index - 1] == "\r":
        return "\r\n"
    return "\n"


def with_line_ending(text: str, newline: str) -> str:
    return text.replace("\r\n", "\n").replace("\n", newline)


def rewrite(content: str, match: MatchResult, rendered: str) -> str:
    newline = line_ending(content)
    rendered = with_line_ending(rendered, newline)

    if match.found and match.is_ours:
        return replace_match(content, match, rendered)
    if match.at_open_tag:
        return insert_after_open_tag(content, rendered, newline)
    return prepend(content, rendered, newline)


def replace_match(content: str, match: MatchResult, rendered: str) -> str:
    """Swap the matched range for the rendered header, every other byte stays put."""
    return content[: match.start] + rendered + content[match.end :]


def prepend(content: str, rendered: str, newline: str = "\n") -> str:
    return rendered + newline + content


def insert_after_open_tag(
    content: str, rendered: str, newline: str = "\n"
) -> str:
    """
    Put the header right after a leading ``<?php``.

    Content not starting with the tag is returned unchanged: a tag further
    down the file is never used as an insertion point. No extra newline is
    added when a blank line already follows the tag, so repeated runs do not
    pile up blank lines.
    """
    if not content.startswith(PHP_OPEN_TAG):
        return content

    rest = content[len(PHP_OPEN_TAG) :]
    replacement = PHP_OPEN_TAG + newline + rendered
    if not _BLANK_LINE.match(rest):
        replacement += newline

    return replacement + rest
