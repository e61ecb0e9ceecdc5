"""Brace matching and text rewriting helpers shared by extractors and converters."""

from __future__ import annotations

import re
import textwrap
from collections.abc import Iterator
from dataclasses import dataclass

_QUOTES = frozenset("'\"`")
_CONTROL_KEYWORDS = frozenset({"if", "for", "while", "switch", "catch", "with", "function"})

_FUNCTION_RE = re.compile(
    r"(?:\b(?P<async>async)\s+)?\b(?P<name>\w+)\s*"
    r"(?::\s*(?P<async_value>async\s+)?function\s*\w*\s*)?"
    r"\((?P<params>[^()]*)\)\s*\{"
)
_WRAPPED_ENTRY_RE = re.compile(
    r"^\s*(?://[^\n]*\n\s*)*(?P<name>\w+)\s*:\s*(?P<wrapper>[\w.$]+)\s*\(\s*"
    r"(?:async\s+)?(?:function\b|\([^()]*\)\s*=>|\w+\s*=>)"
)
_THIS_MEMBER_RE = re.compile(r"\bthis\.(\w+)")
_THIS_EMIT_RE = re.compile(r"\bthis\.\$emit\b")
_THIS_PREFIX_RE = re.compile(r"\bthis\.")


@dataclass(frozen=True)
class FunctionBlock:
    """One ``name(params) { body }`` definition found inside an object literal."""

    name: str
    params: str
    body: str
    is_async: bool = False


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opened at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return len(text)


def find_block_end(text: str, open_index: int) -> int | None:
    """Return the index of the ``}`` closing the brace at ``open_index``.

    String literals and comments are skipped. Returns ``None`` when the
    block is never closed.
    """
    if open_index >= len(text) or text[open_index] != "{":
        return None
    depth = 0
    i = open_index
    length = len(text)
    while i < length:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
            continue
        if text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = length if close == -1 else close + 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def braced_block_after(text: str, pattern: re.Pattern[str]) -> str | None:
    """Return the balanced ``{...}`` block whose opening brace ends ``pattern``."""
    match = pattern.search(text)
    if match is None:
        return None
    open_index = match.end() - 1
    close_index = find_block_end(text, open_index)
    if close_index is None:
        return None
    return text[open_index : close_index + 1]


def iter_function_blocks(text: str) -> Iterator[FunctionBlock]:
    """Yield method-shaped definitions in source order.

    Matching resumes after each body, so calls nested inside a body are
    never reported as definitions. Scanning stops at the first unterminated
    body.
    """
    pos = 0
    while True:
        match = _FUNCTION_RE.search(text, pos)
        if match is None:
            return
        open_index = match.end() - 1
        close_index = find_block_end(text, open_index)
        if close_index is None:
            return
        pos = close_index + 1
        name = match.group("name")
        if name in _CONTROL_KEYWORDS:
            continue
        yield FunctionBlock(
            name=name,
            params=match.group("params").strip(),
            body=text[open_index + 1 : close_index],
            is_async=bool(match.group("async") or match.group("async_value")),
        )


def iter_wrapped_functions(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(name, wrapper)`` for entries like ``name: debounce(function () {})``.

    Such entries are not method-shaped, so ``iter_function_blocks`` never
    reports them.
    """
    for part in split_top_level(text):
        match = _WRAPPED_ENTRY_RE.match(part)
        if match is not None:
            yield match.group("name"), match.group("wrapper")


def rewrite_self_references(code: str) -> str:
    """Rewrite ``this``-bound access for a setup scope.

    ``this.x`` becomes ``x.value``, ``this.$emit`` becomes ``emit`` and any
    other ``this.`` prefix is dropped.
    """
    code = _THIS_MEMBER_RE.sub(r"\1.value", code)
    code = _THIS_EMIT_RE.sub("emit", code)
    return _THIS_PREFIX_RE.sub("", code)


def strip_self_prefix(code: str) -> str:
    """Drop every ``this.`` qualifier."""
    return _THIS_PREFIX_RE.sub("", code)


def split_top_level(text: str, separator: str = ",") -> list[str]:
    """Split on ``separator`` outside brackets, string literals and comments."""
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
            continue
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
        elif ch == separator and depth == 0:
            parts.append(text[start:i])
            start = i + 1
        i += 1
    parts.append(text[start:])
    return parts


def as_block(body: str) -> str:
    """Wrap an already indented body in braces, ``{}`` when empty."""
    return f"{{\n{body}\n}}" if body else "{}"


def reindent(body: str, indent: str = "  ") -> str:
    """Dedent a block body and indent it one level under its new wrapper."""
    lines = [line.rstrip() for line in body.splitlines()]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ""
    return textwrap.indent(textwrap.dedent("\n".join(lines)), indent)
