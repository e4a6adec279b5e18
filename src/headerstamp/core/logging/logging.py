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
Logging configuration for the headerstamp CLI application.

Console output goes through a Rich console, every run also gets a debug level
log file in the user log directory.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from headerstamp.constants import LOG_DIR

console = Console()


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug logging on the console
        silent: Do not log anything to the console

    Returns:
        Path to the log file
    """
    # Clear existing sinks to avoid duplicates
    logger.remove()

    if not silent:

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            console.print(text, highlight=False)

        logger.add(
            console_sink,
            level="DEBUG" if debug else "INFO",
            format="{message}",
            catch=True,
        )

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = LOG_DIR / f"{command_name}_{timestamp}.log"

    logger.add(
        logfile,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
        rotation="10 MB",
        retention="14 days",
        catch=True,
    )

    logger.debug(f"Log File Created At: {logfile}")

    return logfile


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR
