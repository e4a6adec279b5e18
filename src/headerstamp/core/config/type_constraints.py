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

"""Validation and coercion for configuration values coming from any source."""

from dataclasses import dataclass

from headerstamp.core.exceptions import ConfigurationError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class TypeConstraint:
    def coerce(self, value):
        raise NotImplementedError


@dataclass(frozen=True)
class StringConstraint(TypeConstraint):
    allow_empty: bool = True

    def coerce(self, value) -> str:
        if not isinstance(value, str):
            raise ConfigurationError(f"Expected a string, got {value!r}")
        if not self.allow_empty and not value.strip():
            raise ConfigurationError("Value cannot be empty")
        return value

    def __str__(self) -> str:
        return "any string" if self.allow_empty else "non-empty string"


@dataclass(frozen=True)
class BoolConstraint(TypeConstraint):
    def coerce(self, value) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
        raise ConfigurationError(f"Expected a boolean, got {value!r}")

    def __str__(self) -> str:
        return "true, false"


@dataclass(frozen=True)
class CommaListConstraint(TypeConstraint):
    """A comma-separated string, or a list of strings in TOML."""

    allow_empty: bool = True

    def coerce(self, value) -> list[str]:
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
        elif isinstance(value, (list, tuple)) and all(
            isinstance(item, str) for item in value
        ):
            items = [item.strip() for item in value]
        else:
            raise ConfigurationError(
                f"Expected a comma-separated list of strings, got {value!r}"
            )

        items = [item for item in items if item]
        if not self.allow_empty and not items:
            raise ConfigurationError("List cannot be empty")
        return items

    def __str__(self) -> str:
        return "comma-separated list" + ("" if self.allow_empty else " (non-empty)")
