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

"""Header detection and rewrite engine."""

from .handlers import HeaderHandler, build_handlers
from .license_header import CanonicalHeader, LicenseHeader
from .matcher import MatchResult
from .rewriter import rewrite

__all__ = [
    "CanonicalHeader",
    "HeaderHandler",
    "LicenseHeader",
    "MatchResult",
    "build_handlers",
    "rewrite",
]
