# SPDX-License-Identifier: GPL-3.0-or-later
# Icon enum generator
#
# Renders the Rust `Icon` enum and its `AsClasses` implementation from
# the icon catalog records.

from __future__ import annotations

from .generator import (
    STYLES,
    Generator,
    IconVariant,
    UnknownIconStyle,
    iter_records,
    normalize_style,
    sanitize_name,
)

__all__ = [
    "STYLES",
    "Generator",
    "IconVariant",
    "UnknownIconStyle",
    "iter_records",
    "normalize_style",
    "sanitize_name",
]
