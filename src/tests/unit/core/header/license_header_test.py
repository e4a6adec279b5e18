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

from datetime import date
from pathlib import Path

import pytest

from headerstamp.core.exceptions import (
    ConfigurationError,
    LicenseFileNotFoundError,
    UnsupportedFileTypeError,
)
from headerstamp.core.header.license_header import LicenseHeader, render
from headerstamp.core.header.profiles import profile_for

CANONICAL = "/**\n * Copyright Foo\n *\n * NOTICE OF LICENSE\n */\n"


@pytest.fixture
def license_file(tmp_path) -> Path:
    path = tmp_path / "license.txt"
    path.write_text(CANONICAL, encoding="utf-8")
    return path


def test_load_keeps_raw_text(license_file):
    header = LicenseHeader(license_file)

    loaded = header.load()

    assert loaded.raw_text == CANONICAL
    assert loaded.source_path == license_file.resolve()


def test_load_is_cached(license_file):
    header = LicenseHeader(license_file)
    first = header.load()
    license_file.write_text("/** changed */", encoding="utf-8")

    assert header.load() is first
    assert header.content == CANONICAL


def test_relative_path_resolved_from_cwd(tmp_path, monkeypatch, license_file):
    monkeypatch.chdir(tmp_path)
    header = LicenseHeader("license.txt", assets_dir=tmp_path / "nowhere")

    assert header.content == CANONICAL


def test_relative_path_resolved_from_assets(tmp_path, monkeypatch):
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "afl.txt").write_text(CANONICAL, encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    header = LicenseHeader("afl.txt", assets_dir=assets)

    assert header.source_path == (assets / "afl.txt").resolve()


def test_bundled_assets_are_found():
    header = LicenseHeader("afl.txt")
    assert "Academic Free License" in header.content


def test_missing_file_is_a_configuration_error(tmp_path):
    header = LicenseHeader(tmp_path / "missing.txt")

    with pytest.raises(LicenseFileNotFoundError) as exc_info:
        header.load()

    assert isinstance(exc_info.value, ConfigurationError)
    assert "does not exist" in exc_info.value.message


def test_current_year_placeholder(tmp_path):
    path = tmp_path / "license.txt"
    path.write_text("/**\n * Copyright 2007-{currentYear}\n */", encoding="utf-8")

    assert str(date.today().year) in LicenseHeader(path).content


def test_render_doc_block_types_keep_canonical_text():
    for type_tag in ("php", "js", "ts", "css", "scss"):
        assert render(CANONICAL, profile_for(type_tag)) == CANONICAL.strip()


def test_render_smarty():
    assert (
        render(CANONICAL, profile_for("tpl"))
        == "{**\n * Copyright Foo\n *\n * NOTICE OF LICENSE\n *}"
    )


def test_render_html():
    assert (
        render(CANONICAL, profile_for("html"))
        == "<!--**\n * Copyright Foo\n *\n * NOTICE OF LICENSE\n *-->"
    )


def test_render_twig_uses_hash_continuation():
    assert (
        render(CANONICAL, profile_for("twig"))
        == "{#\n # Copyright Foo\n #\n # NOTICE OF LICENSE\n #}"
    )


def test_render_unwrapped_text():
    assert render("Copyright Foo", profile_for("js")) == "/**\nCopyright Foo\n*/"


def test_render_for_type_is_memoized(license_file):
    header = LicenseHeader(license_file)

    first = header.render_for_type("twig")

    assert header.render_for_type("twig") is first


def test_render_for_unknown_type(license_file):
    with pytest.raises(UnsupportedFileTypeError):
        LicenseHeader(license_file).render_for_type("cobol")
