"""Data section converter."""

from __future__ import annotations

import re

from vue_converter.application.results import ConvertedFragment
from vue_converter.text import split_top_level

_ENTRY_RE = re.compile(r"^\s*(\w+)\s*:\s*(.+?)\s*$", re.DOTALL)
_LINE_COMMENT_RE = re.compile(r"^\s*//.*$", re.MULTILINE)


def convert_data(data_raw: str | None) -> ConvertedFragment:
    """Turn each ``key: expression`` of the returned data object into a ``ref``.

    Initializer expressions are copied verbatim, including any ``this``
    references they contain.
    """
    if data_raw is None:
        return ConvertedFragment()

    inner = data_raw.strip()
    if inner.startswith("{") and inner.endswith("}"):
        inner = inner[1:-1]

    declarations: list[str] = []
    warnings: list[str] = []
    for part in split_top_level(inner):
        entry = _LINE_COMMENT_RE.sub("", part).strip()
        if not entry:
            continue
        match = _ENTRY_RE.match(entry)
        if match is None:
            warnings.append(
                f"⚠️ Could not convert data entry '{entry}' - declare it with ref() manually"
            )
            continue
        key, value = match.groups()
        declarations.append(f"const {key} = ref({value})")

    if not declarations:
        return ConvertedFragment(warnings=tuple(warnings))
    return ConvertedFragment(
        code="\n".join(declarations),
        warnings=tuple(warnings),
        imports=("ref",),
    )
