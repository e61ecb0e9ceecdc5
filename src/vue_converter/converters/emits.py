"""Emitted events converter."""

from __future__ import annotations

from collections.abc import Sequence

from vue_converter.application.results import ConvertedFragment

EMITS_WARNING = "ℹ️ Review emit types - adjust as needed"


def convert_emits(events: Sequence[str]) -> ConvertedFragment:
    """Declare every emitted event once with an optional payload."""
    names = tuple(dict.fromkeys(events))
    if not names:
        return ConvertedFragment()
    members = "\n".join(f"  {name}: [data?: any]" for name in names)
    return ConvertedFragment(
        code=f"const emit = defineEmits<{{\n{members}\n}}>()",
        warnings=(EMITS_WARNING,),
    )
