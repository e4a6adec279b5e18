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

from dataclasses import dataclass

from loguru import logger
from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from headerstamp.core.exceptions import HeaderSyntaxError

PHP_LANGUAGE = "php"

COMMENT_NODE = "comment"
OPEN_TAG_NODE = "php_tag"


@dataclass(frozen=True)
class LeadingComment:
    """A comment attached before the first statement of a PHP file."""

    text: str
    start: int
    end: int


class PhpParser:
    """Parses PHP sources using Tree-sitter to find the comments leading the first statement."""

    def __init__(self, parser: Parser | None = None):
        self._parser = parser

    @property
    def parser(self) -> Parser:
        if self._parser is None:
            self._parser = get_parser(PHP_LANGUAGE)
        return self._parser

    def parse(self, content: str) -> tuple[bytes, Node]:
        """
        Parse PHP source code.

        Args:
            content: Full content of the PHP file

        Returns:
            The encoded content and the root node of the syntax tree

        Raises:
            HeaderSyntaxError: if the content has syntax errors
        """
        content_bytes = content.encode("utf8")
        tree = self.parser.parse(content_bytes)
        root_node = tree.root_node

        if root_node.has_error:
            line = _first_error_line(root_node)
            logger.debug(f"PHP syntax error near line {line}")
            raise HeaderSyntaxError(
                "Syntax error in PHP content",
                f"First error near line {line}",
            )

        return content_bytes, root_node

    def leading_comments(self, content: str) -> list[LeadingComment]:
        """
        Comments sitting between the opening tag and the first statement.

        An empty list means no comment is attached to the first statement,
        which includes files starting with inline HTML instead of ``<?php``.
        """
        content_bytes, root_node = self.parse(content)

        comments = []
        for index, child in enumerate(root_node.children):
            if child.type == OPEN_TAG_NODE and index == 0:
                continue
            if child.type != COMMENT_NODE:
                break
            start = _char_offset(content_bytes, child.start_byte)
            end = _char_offset(content_bytes, child.end_byte)
            comments.append(LeadingComment(content[start:end], start, end))

        return comments


def _char_offset(content_bytes: bytes, byte_offset: int) -> int:
    return len(content_bytes[:byte_offset].decode("utf8"))


def _first_error_line(node: Node) -> int:
    if node.type == "ERROR" or node.is_missing:
        return node.start_point[0] + 1
    for child in node.children:
        if child.has_error:
            return _first_error_line(child)
    return node.start_point[0] + 1
