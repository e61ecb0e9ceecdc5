"""Methods and computed section converters.

Both sections hold method-shaped definitions; they differ only in how each
definition is re-emitted.
"""

from __future__ import annotations

import re

from vue_converter.application.results import ConvertedFragment
from vue_converter.text import (
    as_block,
    iter_function_blocks,
    iter_wrapped_functions,
    reindent,
    rewrite_self_references,
)

METHODS_NOTE = "✓ Methods converted to function expressions"
COMPUTED_NOTE = "✓ Computed properties converted"

_SINGLE_RETURN_RE = re.compile(r"^return\b\s*(?P<expr>.+?)\s*;?\s*$", re.DOTALL)
_STATEMENT_START_RE = re.compile(r"^\s*(?:const|let|var|if|for|while|switch|return)\b", re.MULTILINE)


def convert_methods(methods_raw: str | None) -> ConvertedFragment:
    """Rewrite each method as ``const name = function(params) { body }``.

    Methods keep their source order. ``async`` methods stay ``async``.
    Entries wrapped in a helper call such as ``debounce(function () {})``
    are left out and reported for manual conversion.
    """
    if methods_raw is None:
        return ConvertedFragment()

    definitions: list[str] = []
    for block in iter_function_blocks(methods_raw):
        keyword = "async function" if block.is_async else "function"
        body = reindent(rewrite_self_references(block.body))
        definitions.append(f"const {block.name} = {keyword}({block.params}) {as_block(body)}")
    manual = tuple(
        f"⚠️ Method '{name}' is wrapped in {wrapper}() - convert it manually"
        for name, wrapper in iter_wrapped_functions(methods_raw)
    )

    if not definitions:
        return ConvertedFragment(warnings=manual)
    return ConvertedFragment(code="\n\n".join(definitions), warnings=(METHODS_NOTE, *manual))


def _single_return_expression(body: str) -> str | None:
    """Return the expression of a body made of one ``return`` statement."""
    match = _SINGLE_RETURN_RE.match(body)
    if match is None:
        return None
    expression = match.group("expr")
    if ";" in expression or _STATEMENT_START_RE.search(expression):
        return None
    return expression


def convert_computed(computed_raw: str | None) -> ConvertedFragment:
    """Rewrite each computed getter as ``const name = computed(() => expr)``.

    Multi-statement getters are passed through unchanged inside the arrow
    and flagged for review.
    """
    if computed_raw is None:
        return ConvertedFragment()

    definitions: list[str] = []
    warnings: list[str] = []
    for block in iter_function_blocks(computed_raw):
        body = rewrite_self_references(block.body).strip()
        expression = _single_return_expression(body)
        if expression is None:
            expression = body
            warnings.append(
                f"⚠️ Computed '{block.name}' has a multi-statement body - review the generated arrow function"
            )
        definitions.append(f"const {block.name} = computed(() => {expression})")

    if not definitions:
        return ConvertedFragment()
    return ConvertedFragment(
        code="\n".join(definitions),
        warnings=(COMPUTED_NOTE, *warnings),
        imports=("computed",),
    )
