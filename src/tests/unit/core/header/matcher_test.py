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

from unittest.mock import Mock

import pytest

from headerstamp.core.exceptions import HeaderSyntaxError
from headerstamp.core.file_reader.php_parser import LeadingComment
from headerstamp.core.header.matcher import (
    MatchResult,
    PhpHeaderMatcher,
    RegexHeaderMatcher,
    TwigHeaderMatcher,
    contains_marker,
)
from headerstamp.core.header.profiles import regex_for

MARKER = "NOTICE OF LICENSE"


def php_parser_returning(*comments):
    parser = Mock()
    parser.leading_comments.return_value = list(comments)
    return parser


def test_contains_marker_ignores_case():
    assert contains_marker("/* Notice of License */", MARKER)
    assert not contains_marker("/* MIT */", MARKER)


def test_regex_matcher_finds_our_header():
    content = "/**\n * NOTICE OF LICENSE\n */\nconsole.log(1);\n"
    matcher = RegexHeaderMatcher(regex_for("js"), MARKER, style="js")

    result = matcher.find_header(content)

    assert result.found
    assert result.is_ours
    assert result.style == "js"
    assert content[result.start : result.end] == "/**\n * NOTICE OF LICENSE\n */"
    assert result.text == content[result.start : result.end]


def test_regex_matcher_foreign_header():
    content = "/* @license MIT */\nexport default {};\n"
    result = RegexHeaderMatcher(regex_for("ts"), MARKER).find_header(content)

    assert result.found
    assert not result.is_ours
    assert not result.at_open_tag


def test_regex_matcher_skips_leading_whitespace():
    content = "\n\n  /* NOTICE OF LICENSE */\na {}"
    result = RegexHeaderMatcher(regex_for("css"), MARKER).find_header(content)

    assert result.found
    assert result.start == 4


def test_regex_matcher_comment_after_code():
    content = "body {}\n/* NOTICE OF LICENSE */\n"
    result = RegexHeaderMatcher(regex_for("css"), MARKER).find_header(content)

    assert result == MatchResult.not_found()


def test_twig_matcher_reports_style():
    content = "{#\n # NOTICE OF LICENSE\n #}\n<div></div>\n"

    result = TwigHeaderMatcher(MARKER).find_header(content)

    assert result.found
    assert result.is_ours
    assert result.style == "hash"
    assert result.start == 0
    assert result.end == len("{#\n # NOTICE OF LICENSE\n #}")


def test_twig_matcher_legacy_asterisk_style():
    content = "{# **\n * NOTICE OF LICENSE\n *#}\n{% block x %}{% endblock %}\n"

    result = TwigHeaderMatcher(MARKER).find_header(content)

    assert result.style == "padded-asterisk"
    assert result.is_ours


def test_twig_matcher_no_header():
    assert not TwigHeaderMatcher(MARKER).find_header("<div></div>\n").found


def test_php_matcher_without_comment_inserts_after_tag():
    matcher = PhpHeaderMatcher(MARKER, php_parser_returning())

    result = matcher.find_header("<?php\necho 1;\n")

    assert not result.found
    assert result.at_open_tag


def test_php_matcher_our_comment():
    comment = LeadingComment("/** NOTICE OF LICENSE */", 6, 30)
    matcher = PhpHeaderMatcher(MARKER, php_parser_returning(comment))

    result = matcher.find_header("irrelevant")

    assert result.found
    assert result.is_ours
    assert (result.start, result.end) == (6, 30)
    assert not result.at_open_tag


def test_php_matcher_picks_marked_comment_among_several():
    first = LeadingComment("// generated", 6, 18)
    second = LeadingComment("/** NOTICE OF LICENSE */", 19, 43)
    matcher = PhpHeaderMatcher(MARKER, php_parser_returning(first, second))

    result = matcher.find_header("irrelevant")

    assert result.is_ours
    assert result.start == 19


def test_php_matcher_foreign_comment():
    comment = LeadingComment("/** @author someone */", 6, 28)
    matcher = PhpHeaderMatcher(MARKER, php_parser_returning(comment))

    result = matcher.find_header("irrelevant")

    assert result.found
    assert not result.is_ours
    assert result.at_open_tag


def test_php_matcher_propagates_syntax_errors():
    parser = Mock()
    parser.leading_comments.side_effect = HeaderSyntaxError("Syntax error")

    with pytest.raises(HeaderSyntaxError):
        PhpHeaderMatcher(MARKER, parser).find_header("<?php\nclass {\n")
