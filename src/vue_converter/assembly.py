"""Output assembly for converted script and component text."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from vue_converter.application.results import ConvertedFragment
from vue_converter.sfc import SfcBlocks

SCRIPT_OPEN_TAG = '<script setup lang="ts">'
SCRIPT_CLOSE_TAG = "</script>"


def import_reminder(imports: Iterable[str]) -> str:
    """Return the leading comment listing Vue APIs the script relies on."""
    names = ", ".join(dict.fromkeys(imports))
    if not names:
        return "// TODO: Add Vue imports when using in your project"
    return f"// TODO: Add Vue imports ({names}) when using in your project"


def assemble_script(fragments: Sequence[ConvertedFragment]) -> str:
    """Concatenate non-empty fragments, in the given order, into a setup script."""
    reminder = import_reminder(name for fragment in fragments for name in fragment.imports)
    codes = [fragment.code for fragment in fragments if fragment.code]
    body = reminder if not codes else f"{reminder}\n" + "\n\n".join(codes)
    return f"{SCRIPT_OPEN_TAG}\n{body}\n{SCRIPT_CLOSE_TAG}"


def assemble_component(blocks: SfcBlocks, script: str) -> str:
    """Re-wrap the converted script with the pass-through template and style.

    Absent or empty template/style blocks are left out entirely.
    """
    parts: list[str] = []
    if blocks.template:
        parts.append(f"<template>\n{blocks.template}\n</template>")
    parts.append(script)
    if blocks.style:
        parts.append(f"{blocks.style_tag}\n{blocks.style}\n</style>")
    return "\n\n".join(parts)
