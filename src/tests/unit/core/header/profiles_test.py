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

import pytest

from headerstamp.core.exceptions import UnsupportedFileTypeError
from headerstamp.core.header.profiles import (
    PROFILES,
    build_pattern,
    profile_for,
    regex_for,
    twig_candidates,
    type_for_extension,
)


def test_every_profile_pattern_is_anchored():
    content = "body { color: red; }\n/** late comment */\n{* x *}\n{# x #}\n<!-- x -->\n"
    for type_tag in PROFILES:
        assert regex_for(type_tag).match(content) is None, type_tag


def test_pattern_allows_leading_whitespace():
    match = regex_for("js").match("\n\n  /** header */\nfoo();")
    assert match is not None
    assert match.group(1) == "/** header */"


def test_pattern_tolerates_internal_asterisks_and_newlines():
    content = "/**\n * a * b ** c\n *\n * d*/ rest */"
    match = regex_for("css").match(content)
    assert match.group(1) == "/**\n * a * b ** c\n *\n * d*/"


def test_pattern_requires_end_delimiter():
    assert regex_for("js").match("/** never closed\nfoo();") is None


@pytest.mark.parametrize(
    "type_tag,content,expected",
    [
        ("tpl", "{**\n * header\n *}\n<div>{$x}</div>", "{**\n * header\n *}"),
        ("html", "<!--**\n * header\n *-->\n<template/>", "<!--**\n * header\n *-->"),
        ("twig", "{#\n # header\n #}\n{% block %}", "{#\n # header\n #}"),
    ],
)
def test_patterns_per_syntax(type_tag, content, expected):
    assert regex_for(type_tag).match(content).group(1) == expected


def test_build_pattern_escapes_delimiters():
    pattern = build_pattern("(*", "*)")
    assert pattern.match("(* ocaml *) let x = 1").group(1) == "(* ocaml *)"


def test_twig_candidates_order():
    assert [style for style, _ in twig_candidates()] == [
        "padded-asterisk",
        "padded-hash",
        "asterisk",
        "hash",
    ]


@pytest.mark.parametrize(
    "content,expected_style",
    [
        ("{# **\n * Copyright\n * NOTICE OF LICENSE\n *#}\n", "padded-asterisk"),
        ("{# \n # Copyright\n # NOTICE OF LICENSE\n #}\n", "padded-hash"),
        ("{#**\n * Copyright\n * NOTICE OF LICENSE\n *#}\n", "asterisk"),
        ("{#\n # Copyright\n # NOTICE OF LICENSE\n #}\n", "hash"),
        ("{# single line #}\n", "hash"),
    ],
)
def test_first_matching_twig_candidate(content, expected_style):
    styles = [style for style, pattern in twig_candidates() if pattern.match(content)]
    assert styles[0] == expected_style


def test_type_for_extension():
    assert type_for_extension("php") == "php"
    assert type_for_extension("html.twig") == "twig"
    assert type_for_extension("vue") == "html"
    assert type_for_extension(".scss") == "scss"


def test_unknown_extension_is_rejected():
    with pytest.raises(UnsupportedFileTypeError):
        type_for_extension("rb")


def test_unknown_profile_is_rejected():
    with pytest.raises(UnsupportedFileTypeError):
        profile_for("cobol")
