"""Pattern-based extraction of Options API sections from a script block.

Every extractor takes the full script text and returns the raw section text
or ``None``. A section that cannot be bounded is reported as absent; no
extractor raises on malformed input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from vue_converter.text import braced_block_after, find_block_end
from vue_converter.types import LIFECYCLE_HOOKS, HookName

logger = logging.getLogger(__name__)

METHODS_BOUNDARY = (
    "computed",
    "mounted",
    "watch",
    "created",
    "beforeDestroy",
    "destroyed",
    "beforeCreate",
)
COMPUTED_BOUNDARY = (
    "methods",
    "mounted",
    "watch",
    "created",
    "beforeDestroy",
    "destroyed",
    "beforeCreate",
)
WATCH_BOUNDARY = ("computed", "methods", "mounted", "created")

_NAME_RE = re.compile(r"\bname\s*:\s*['\"`]([^'\"`]+)['\"`]")
_PROPS_RE = re.compile(r"\bprops\s*:\s*\{")
_DATA_FUNCTION_RE = re.compile(r"\bdata\s*(?::\s*function\s*)?\(\s*\)\s*\{")
_DATA_ARROW_RE = re.compile(r"\bdata\s*:\s*\(\s*\)\s*=>\s*\(\s*\{")
_RETURN_OBJECT_RE = re.compile(r"\breturn\s*\{")
_EMIT_RE = re.compile(r"\$emit\(\s*['\"`](\w+)['\"`]")


@dataclass(frozen=True)
class ScriptSections:
    """Raw Options API sections found in one script block.

    Every field is independently optional; ``None`` means the section is
    not present in the source.
    """

    name: str | None = None
    props_raw: str | None = None
    data_raw: str | None = None
    methods_raw: str | None = None
    computed_raw: str | None = None
    watch_raw: str | None = None
    lifecycle_raw: Mapping[HookName, str] = field(default_factory=lambda: MappingProxyType({}))
    emitted_events: tuple[str, ...] = ()


def _section_patterns(
    keyword: str, boundary: Sequence[str]
) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Build the bounded pattern and its end-of-script fallback for a section."""
    lookahead = "|".join(boundary)
    bounded = re.compile(
        rf"\b{keyword}\s*:\s*\{{(.*?)\}}\s*,?\s*(?:{lookahead})", re.DOTALL
    )
    fallback = re.compile(rf"\b{keyword}\s*:\s*\{{(.*)\}}", re.DOTALL)
    return bounded, fallback


_METHODS_PATTERNS = _section_patterns("methods", METHODS_BOUNDARY)
_COMPUTED_PATTERNS = _section_patterns("computed", COMPUTED_BOUNDARY)
_WATCH_PATTERNS = _section_patterns("watch", WATCH_BOUNDARY)
_HOOK_PATTERNS = {
    hook: re.compile(rf"(?<![\w.$])(?:async\s+)?{hook}\s*\(\s*\)\s*\{{")
    for hook in LIFECYCLE_HOOKS
}


def _bounded_section(
    script: str, patterns: tuple[re.Pattern[str], re.Pattern[str]]
) -> str | None:
    bounded, fallback = patterns
    match = bounded.search(script) or fallback.search(script)
    return match.group(1) if match else None


def extract_name(script: str) -> str | None:
    """Return the first quoted string following ``name:``."""
    match = _NAME_RE.search(script)
    return match.group(1) if match else None


def extract_props(script: str) -> str | None:
    """Return the whole ``{...}`` block following ``props:``."""
    return braced_block_after(script, _PROPS_RE)


def extract_data(script: str) -> str | None:
    """Return the object literal returned by the ``data`` function."""
    data_body = braced_block_after(script, _DATA_FUNCTION_RE)
    if data_body is not None:
        return braced_block_after(data_body, _RETURN_OBJECT_RE)
    return braced_block_after(script, _DATA_ARROW_RE)


def extract_methods(script: str) -> str | None:
    """Return the inner text of the ``methods`` block.

    Without a following known section the capture runs to the last ``}``
    of the script and may include unrelated trailing sections.
    """
    return _bounded_section(script, _METHODS_PATTERNS)


def extract_computed(script: str) -> str | None:
    """Return the inner text of the ``computed`` block."""
    return _bounded_section(script, _COMPUTED_PATTERNS)


def extract_watch(script: str) -> str | None:
    """Return the inner text of the ``watch`` block."""
    return _bounded_section(script, _WATCH_PATTERNS)


def extract_lifecycle(script: str) -> Mapping[HookName, str]:
    """Return hook bodies keyed by hook name, in fixed hook order."""
    hooks: dict[HookName, str] = {}
    for hook, pattern in _HOOK_PATTERNS.items():
        match = pattern.search(script)
        if match is None:
            continue
        open_index = match.end() - 1
        close_index = find_block_end(script, open_index)
        if close_index is None:
            logger.debug("lifecycle hook %s has no closing brace; skipped", hook)
            continue
        hooks[hook] = script[open_index + 1 : close_index]
    return MappingProxyType(hooks)


def extract_emitted_events(script: str) -> tuple[str, ...]:
    """Return distinct ``$emit`` event names in first-seen order."""
    return tuple(dict.fromkeys(_EMIT_RE.findall(script)))


def extract_sections(script: str) -> ScriptSections:
    """Run every extractor over a script block."""
    sections = ScriptSections(
        name=extract_name(script),
        props_raw=extract_props(script),
        data_raw=extract_data(script),
        methods_raw=extract_methods(script),
        computed_raw=extract_computed(script),
        watch_raw=extract_watch(script),
        lifecycle_raw=extract_lifecycle(script),
        emitted_events=extract_emitted_events(script),
    )
    logger.debug(
        "extracted sections: props=%s data=%s computed=%s methods=%s watch=%s hooks=%s emits=%d",
        sections.props_raw is not None,
        sections.data_raw is not None,
        sections.computed_raw is not None,
        sections.methods_raw is not None,
        sections.watch_raw is not None,
        ",".join(sections.lifecycle_raw) or "-",
        len(sections.emitted_events),
    )
    return sections
