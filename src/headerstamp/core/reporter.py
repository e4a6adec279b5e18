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

from enum import Enum

from loguru import logger


class Outcome(str, Enum):
    FIXED = "fixed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class Reporter:
    """Keeps track of what happened to every processed file, in processing order."""

    def __init__(self):
        self._report: dict[Outcome, list[str]] = {outcome: [] for outcome in Outcome}

    def record(self, new_content: str, old_content: str, file_id: str) -> Outcome:
        outcome = Outcome.FIXED if new_content != old_content else Outcome.UNCHANGED
        self._report[outcome].append(file_id)
        logger.debug(f"{file_id}: {outcome.value}")
        return outcome

    def record_failed(self, file_id: str) -> Outcome:
        self._report[Outcome.FAILED].append(file_id)
        logger.debug(f"{file_id}: {Outcome.FAILED.value}")
        return Outcome.FAILED

    def files(self, outcome: Outcome) -> list[str]:
        return list(self._report[outcome])

    def counts(self) -> dict[str, int]:
        return {outcome.value: len(files) for outcome, files in self._report.items()}

    @property
    def needs_fixing(self) -> bool:
        return bool(self._report[Outcome.FIXED])

    def report(self) -> dict[str, list[str]]:
        return {outcome.value: list(files) for outcome, files in self._report.items()}
