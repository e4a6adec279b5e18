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

import contextlib
from pathlib import Path

from loguru import logger
from rich.progress import Progress

from headerstamp.context import UpdateContext
from headerstamp.core.exceptions import EncodingFailureError, HeaderSyntaxError
from headerstamp.core.file_reader.php_parser import PhpParser
from headerstamp.core.finder.file_finder import FileFinder
from headerstamp.core.header.handlers import HeaderHandler, build_handlers
from headerstamp.core.header.profiles import type_for_extension
from headerstamp.core.logging.utils import time_block
from headerstamp.core.manifest.manifest_patcher import is_manifest, patch_manifest
from headerstamp.core.reporter import Reporter

MANIFEST_TYPE = "json"


@contextlib.contextmanager
def progress_task(p: Progress | None, step_name: str, total: int):
    task = p.add_task(step_name, total=total) if p is not None else None

    def advance():
        if p is not None:
            p.advance(task, 1)

    yield advance


class UpdatePipeline:
    """
    Walks the target once per extension and brings every file header up to date.

    A file that cannot be processed is reported as failed and the run goes on.
    In dry-run mode every step runs except the final write.
    """

    def __init__(
        self,
        update_context: UpdateContext,
        php_parser: PhpParser | None = None,
        reporter: Reporter | None = None,
    ):
        self.context = update_context
        self.php_parser = php_parser or PhpParser()
        self.reporter = reporter or Reporter()
        self.finder = FileFinder(
            update_context.target,
            update_context.excludes,
            update_context.not_names,
        )
        self._processed: set[Path] = set()

    def run(self) -> Reporter:
        self._processed = set()
        # resolve every extension first, an unknown one must fail before any write
        type_tags = {ext: type_for_extension(ext) for ext in self.context.extensions}
        handlers = build_handlers(
            self.context.license_header,
            self.context.discrimination_string,
            {tag for tag in type_tags.values() if tag != MANIFEST_TYPE},
            self.php_parser,
        )

        p = Progress() if not self.context.silent else None

        with p if p is not None else contextlib.nullcontext():
            for extension, type_tag in type_tags.items():
                with time_block(f"update {extension}"):
                    self._update_extension(p, extension, type_tag, handlers)

        return self.reporter

    def _update_extension(
        self,
        p: Progress | None,
        extension: str,
        type_tag: str,
        handlers: dict[str, HeaderHandler],
    ):
        # twig and html.twig both match *.html.twig, a file is handled once
        files = [
            path
            for path in self.finder.find(extension)
            if path not in self._processed
        ]
        self._processed.update(files)
        logger.debug(f"Found {len(files)} {extension} files")

        with progress_task(
            p, f"Updating license in {extension.upper()} files", len(files)
        ) as advance:
            for path in files:
                if type_tag == MANIFEST_TYPE:
                    if is_manifest(path):
                        self._process_file(path, self._patch_manifest)
                else:
                    self._process_file(path, handlers[type_tag].apply)
                advance()

    def _patch_manifest(self, content: str) -> str:
        return patch_manifest(content, self.context.license_path)

    def _process_file(self, path: Path, transform):
        file_id = self.finder.relative_id(path)

        try:
            with open(path, encoding="utf-8", newline="") as f:
                old_content = f.read()
            new_content = transform(old_content)
        except HeaderSyntaxError:
            logger.warning(f"Syntax error on file {file_id}. Continue ...")
            self.reporter.record_failed(file_id)
            return
        except (EncodingFailureError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Could not process {file_id}: {e}. Continue ...")
            self.reporter.record_failed(file_id)
            return

        if new_content != old_content and not self.context.dry_run:
            try:
                with open(path, "w", encoding="utf-8", newline="") as f:
                    f.write(new_content)
            except OSError as e:
                logger.warning(f"Could not write {file_id}: {e}. Continue ...")
                self.reporter.record_failed(file_id)
                return

        self.reporter.record(new_content, old_content, file_id)
