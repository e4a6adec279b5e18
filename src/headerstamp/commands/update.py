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

import typer
from loguru import logger

from headerstamp.context import GlobalConfig, GlobalContext, UpdateContext
from headerstamp.core.config.config_loader import ConfigLoader
from headerstamp.core.exceptions import handle_headerstamp_exception
from headerstamp.core.logging.logging import setup_logger
from headerstamp.core.logging.utils import time_block
from headerstamp.core.reporter import Outcome, Reporter
from headerstamp.core.ui.theme import themed


def setup_config_args(**kwargs):
    config_args = {}

    for key, item in kwargs.items():
        if item is not None:
            config_args[key] = item

    return config_args


def _print_files(title: str, files: list[str], style: str):
    print(themed(style, f" {title}"))
    for file_id in files:
        print(f" * {file_id}")


def render_report(reporter: Reporter, dry_run: bool, display_report: bool) -> None:
    counts = reporter.counts()
    fixed = reporter.files(Outcome.FIXED)
    failed = reporter.files(Outcome.FAILED)

    print()
    if dry_run:
        if fixed:
            _print_files("Files with bad license headers:", fixed, "error")
        else:
            print(themed("success", " All license headers are up to date."))
    elif display_report and fixed:
        _print_files("Fixed files:", fixed, "label")

    if display_report:
        unchanged = reporter.files(Outcome.UNCHANGED)
        if unchanged:
            _print_files("Files with a valid license header:", unchanged, "muted")

    if failed:
        _print_files("Files that could not be processed:", failed, "warn")

    verb = "to fix" if dry_run else "fixed"
    print(
        themed("primary", " Summary: ")
        + themed("value", f"{counts[Outcome.FIXED.value]} {verb}")
        + ", "
        + f"{counts[Outcome.UNCHANGED.value]} unchanged, "
        + themed("warn" if failed else "value", f"{counts[Outcome.FAILED.value]} failed")
    )


@handle_headerstamp_exception()
def main(
    ctx: typer.Context,
    license_file: str | None = typer.Option(
        None,
        "--license",
        help="License file to apply (defaults to the bundled OSL 3.0 header).",
    ),
    target: str | None = typer.Option(
        None,
        "--target",
        help="Folder in which files are updated (defaults to the current directory).",
    ),
    exclude: str | None = typer.Option(
        None,
        "--exclude",
        help="Comma-separated list of folders to exclude from the update.",
    ),
    not_name: str | None = typer.Option(
        None,
        "--not-name",
        help="Comma-separated list of file name patterns to exclude, e.g. '*.min.js'.",
    ),
    extensions: str | None = typer.Option(
        None,
        "--extensions",
        help="Comma-separated list of file extensions to update.",
    ),
    header_discrimination_string: str | None = typer.Option(
        None,
        "--header-discrimination-string",
        help="Existing header comments containing this string are replaced, others are kept.",
    ),
    dry_run: bool | None = typer.Option(
        None,
        "--dry-run",
        help="Do not write anything, exit with 1 if some headers need fixing.",
    ),
    display_report: bool | None = typer.Option(
        None,
        "--display-report",
        help="List every processed file at the end of the run.",
    ),
) -> None:
    """Rewrite your file headers to add the license or to make them up-to-date

    Examples:
        # Update every supported file of the current folder with the OSL header
        header-stamp update

        # Apply the AFL header to a module, skipping minified files
        header-stamp update --license afl.txt --target modules/foo --not-name '*.min.js'

        # Check headers in CI
        header-stamp update --dry-run
    """
    global_context: GlobalContext = ctx.obj or GlobalContext()

    config_args = setup_config_args(
        license=license_file,
        target=target,
        exclude=exclude,
        not_name=not_name,
        extensions=extensions,
        header_discrimination_string=header_discrimination_string,
        dry_run=dry_run,
        display_report=display_report,
        verbose=global_context.verbose,
        silent=global_context.silent,
    )

    config, used_config_sources, _ = ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        custom_config_path=global_context.custom_config,
    )

    setup_logger("update", debug=config.verbose, silent=config.silent)
    logger.debug(f"Used {used_config_sources} to build the update context.")

    update_context = UpdateContext.from_global_config(config)
    logger.debug(
        "Update command started: target={target} license={license} dry_run={dry_run}",
        target=update_context.target,
        license=update_context.license_path,
        dry_run=update_context.dry_run,
    )

    from headerstamp.pipelines.update_pipeline import UpdatePipeline

    with time_block("Update Pipeline E2E"):
        reporter = UpdatePipeline(update_context).run()

    render_report(reporter, config.dry_run, config.display_report)

    if config.dry_run and reporter.needs_fixing:
        raise typer.Exit(1)
