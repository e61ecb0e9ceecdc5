"""Props section converter."""

from __future__ import annotations

import re

from vue_converter.application.results import ConvertedFragment
from vue_converter.types import map_prop_type

PROPS_WARNING = "⚠️ Review prop defaults - adjust withDefaults() as needed"

_PROP_PAIR_RE = re.compile(r"(\w+)\s*:\s*(\w+)")


def convert_props(props_raw: str | None) -> ConvertedFragment:
    """Convert a ``props: {...}`` block into a typed ``defineProps`` call.

    Only the shorthand ``name: Type`` form is recognized. Default values are
    never carried over, so the review warning is attached whenever a props
    block exists.

    Parameters
    ----------
    props_raw : str | None
        The braced props object, or ``None`` when the component has none.

    Returns
    -------
    ConvertedFragment
        An interface listing every prop as optional followed by a
        ``withDefaults(defineProps<Props>(), {})`` statement.
    """
    if props_raw is None:
        return ConvertedFragment()

    inner = props_raw.strip()
    if inner.startswith("{") and inner.endswith("}"):
        inner = inner[1:-1]

    fields: dict[str, str] = {}
    for key, type_name in _PROP_PAIR_RE.findall(inner):
        fields.setdefault(key, map_prop_type(type_name))

    if not fields:
        return ConvertedFragment(warnings=(PROPS_WARNING,))

    members = "\n".join(f"  {key}?: {ts_type}" for key, ts_type in fields.items())
    code = (
        f"interface Props {{\n{members}\n}}\n\n"
        "const props = withDefaults(defineProps<Props>(), {})"
    )
    return ConvertedFragment(code=code, warnings=(PROPS_WARNING,))
