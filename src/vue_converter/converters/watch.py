"""Watch section converter."""

from __future__ import annotations

from vue_converter.application.results import ConvertedFragment
from vue_converter.text import iter_function_blocks, iter_wrapped_functions

WATCH_WARNING = "ℹ️ Watch callbacks need manual review"
DEFAULT_WATCH_PARAMS = "newVal"


def convert_watch(watch_raw: str | None) -> ConvertedFragment:
    """Emit a ``watch`` registration stub per watched property.

    Handler bodies are not transferred; every stub carries a TODO marker and
    the section always yields a review warning. Handlers wrapped in a helper
    call such as ``debounce(...)`` get no stub and an extra warning.
    """
    if watch_raw is None:
        return ConvertedFragment()

    watchers = [
        f"watch({block.name}, ({block.params or DEFAULT_WATCH_PARAMS}) => {{\n"
        "  // TODO: Add watch logic\n"
        "})"
        for block in iter_function_blocks(watch_raw)
    ]
    manual = (
        f"⚠️ Watcher '{name}' is wrapped in {wrapper}() - convert it manually"
        for name, wrapper in iter_wrapped_functions(watch_raw)
    )
    return ConvertedFragment(
        code="\n\n".join(watchers),
        warnings=(WATCH_WARNING, *manual),
        imports=("watch",) if watchers else (),
    )
