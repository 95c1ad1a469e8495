# SPDX-License-Identifier: GPL-3.0-or-later
"""
Icon enum generator.

Turns a (possibly nested) list of icon records into two Rust fragments:
the `Icon` enum definition and its `AsClasses` implementation. Both are
printed to stdout so the calling build step can splice them into a source
file.

Each record looks like:
    {"Name": "wrench", "ReactName": "WrenchIcon", "Style": "fas",
     "ContextualUsage": "Use to indicate settings"}

Records without a Name are placeholders and are skipped. Records repeating
an already seen ReactName are skipped as well, the first one wins.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, TextIO

# Style -> (helper function name, feature gate)
STYLES: dict[str, tuple[str, Optional[str]]] = {
    "fas": ("fas", None),
    "fab": ("fab", "icons-fab"),
    "far": ("far", "icons-far"),
    "": ("plain", None),
    "pf-icon": ("pf", None),
}

# Spellings used by the upstream catalog dump
FIELD_ALIASES = {
    "ReactName": "React_name",
    "ContextualUsage": "Contextual_usage",
}

ENUM_NAME = "Icon"
ENUM_DERIVES = [
    "Copy",
    "Clone",
    "Debug",
    "PartialEq",
    "Eq",
    "strum_macros::EnumIter",
    "strum_macros::EnumMessage",
    "strum_macros::AsRefStr",
]
CLASSES_TRAIT = "crate::core::AsClasses"
CLASSES_TYPE = "yew::prelude::Classes"

INDENT = "    "


class UnknownIconStyle(ValueError):
    """Raised for a Style the generator does not know how to render.

    The generator has to be extended when this happens, so it is never
    recovered from.
    """

    def __init__(self, style: Any) -> None:
        super().__init__(f"Unknown icon type: {style}")
        self.style = style


@dataclass
class IconVariant:
    """A normalized icon record, as emitted."""

    name: str
    ident: str
    style: str
    feature: Optional[str] = None
    usage: str = ""


def normalize_style(style: Any) -> tuple[str, Optional[str]]:
    """Map an upstream Style to the helper name and optional feature gate."""
    try:
        return STYLES[style]
    except (KeyError, TypeError):
        raise UnknownIconStyle(style) from None


def sanitize_name(react_name: str) -> str:
    """Derive the variant identifier (PficonWrenchIcon -> Wrench)."""
    name = react_name
    if name.endswith("Icon"):
        name = name[: -len("Icon")]
    if name.startswith("Pficon"):
        name = name[len("Pficon"):]
    return name


def iter_records(icons: Any) -> Iterator[Any]:
    """Flatten nested lists depth-first, left to right."""
    for icon in icons:
        if isinstance(icon, (list, tuple)):
            yield from iter_records(icon)
        else:
            yield icon


def feature_gate(feature: str) -> str:
    return f'#[cfg(feature = "{feature}")]'


def escape_rust_string(text: str) -> str:
    """Escape text for use inside a Rust string literal."""
    result = []
    for ch in text:
        if ch == "\\":
            result.append("\\\\")
        elif ch == '"':
            result.append('\\"')
        elif ch == "\n":
            result.append("\\n")
        elif ch == "\r":
            result.append("\\r")
        elif ch == "\t":
            result.append("\\t")
        elif ord(ch) < 0x20:
            result.append(f"\\u{{{ord(ch):x}}}")
        else:
            result.append(ch)
    return "".join(result)


def _field(record: Mapping[str, Any], key: str) -> Any:
    value = record.get(key)
    if value is None and key in FIELD_ALIASES:
        value = record.get(FIELD_ALIASES[key])
    return value


class Generator:
    """
    Collects icon records and renders the Icon enum plus its AsClasses impl.

    A generator is single-shot: the known set and the buffers are not reset,
    so use a fresh instance for every run.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.known: set[str] = set()
        self.variants: list[IconVariant] = []
        self._define: list[str] = []
        self._impl: list[str] = []

    def process_record(self, record: Mapping[str, Any]) -> Optional[IconVariant]:
        """
        Validate, normalize and append one icon record.

        Args:
            record: A single icon record mapping

        Returns:
            The emitted variant, or None if the record was skipped

        Raises:
            UnknownIconStyle: if the record's Style is not in STYLES
        """
        name = record.get("Name")
        if name is None:
            logging.debug("Generator: Skipping placeholder record without Name")
            return None

        react_name = _field(record, "ReactName")
        if react_name in self.known:
            logging.debug(f"Generator: Skipping duplicate icon {react_name}")
            return None
        self.known.add(react_name)

        style, feature = normalize_style(record.get("Style"))
        usage = _field(record, "ContextualUsage")

        variant = IconVariant(
            name=name,
            ident=sanitize_name(react_name),
            style=style,
            feature=feature,
            usage="" if usage is None else str(usage),
        )

        # Render both sides before touching either buffer
        define = self._render_define(variant)
        impl = self._render_impl(variant)
        self._define.extend(define)
        self._impl.extend(impl)
        self.variants.append(variant)
        return variant

    def _render_define(self, variant: IconVariant) -> list[str]:
        lines = [f"{INDENT}///" + (f" {line}" if line else "")
                 for line in (variant.usage.splitlines() or [""])]
        if variant.feature is not None:
            lines.append(f"{INDENT}{feature_gate(variant.feature)}")
        lines.append(f"{INDENT}{variant.ident},")
        return lines

    def _render_impl(self, variant: IconVariant) -> list[str]:
        indent = INDENT * 3
        lines = []
        if variant.feature is not None:
            lines.append(f"{indent}{feature_gate(variant.feature)}")
        lines.append(
            f"{indent}Self::{variant.ident} => "
            f'classes.extend(super::{variant.style}("{escape_rust_string(variant.name)}")),'
        )
        return lines

    def run(self, icons: Any) -> None:
        """Process every record in the (nested) collection, then emit output."""
        for record in iter_records(icons):
            self.process_record(record)
        logging.info(f"Generator: Collected {len(self.variants)} icons")
        self.emit_output()

    def render(self) -> tuple[str, str]:
        """Return the type definition and the behavior implementation."""
        define = [
            f"#[derive({', '.join(ENUM_DERIVES)})]",
            f"pub enum {ENUM_NAME} {{",
            *self._define,
            "}",
        ]
        impl = [
            f"impl {CLASSES_TRAIT} for {ENUM_NAME} {{",
            f"{INDENT}fn extend(&self, classes: &mut {CLASSES_TYPE}) {{",
            f"{INDENT * 2}match self {{",
            *self._impl,
            f"{INDENT * 2}}}",
            f"{INDENT}}}",
            "}",
        ]
        return "\n".join(define) + "\n", "\n".join(impl) + "\n"

    def emit_output(self, stream: Optional[TextIO] = None) -> None:
        """Write both fragments, type definition first."""
        out = stream or self.stream or sys.stdout
        define, impl = self.render()
        print(define, file=out)
        print(impl, file=out)
