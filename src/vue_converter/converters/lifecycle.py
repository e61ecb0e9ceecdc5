"""Lifecycle hook converter."""

from __future__ import annotations

import re
from collections.abc import Mapping

from vue_converter.application.results import ConvertedFragment
from vue_converter.text import as_block, reindent, strip_self_prefix
from vue_converter.types import LIFECYCLE_HOOKS, HookName

# Narrow rewrite: an identifier directly followed by a single quote.
_QUOTE_ADJACENT_RE = re.compile(r"(\w+)'")


def convert_lifecycle(lifecycle_raw: Mapping[HookName, str]) -> ConvertedFragment:
    """Wrap each present hook body in its Composition API registration call.

    Hooks are emitted in ``LIFECYCLE_HOOKS`` order whatever their source
    order.
    """
    registrations: list[str] = []
    imports: list[str] = []
    for hook, registration in LIFECYCLE_HOOKS.items():
        body = lifecycle_raw.get(hook)
        if body is None:
            continue
        rewritten = _QUOTE_ADJACENT_RE.sub(r"\1.value", strip_self_prefix(body))
        registrations.append(f"{registration}(() => {as_block(reindent(rewritten))})")
        imports.append(registration)
    return ConvertedFragment(code="\n\n".join(registrations), imports=tuple(imports))
