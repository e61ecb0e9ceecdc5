"""Single-file component block splitting."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_STYLE_TAG = "<style scoped>"


def _block_pattern(tag: str) -> re.Pattern[str]:
    return re.compile(rf"(<{tag}\b[^>]*>)(.*?)</{tag}>", re.DOTALL)


_TEMPLATE_RE = _block_pattern("template")
_SCRIPT_RE = _block_pattern("script")
_STYLE_RE = _block_pattern("style")


@dataclass(frozen=True)
class SfcBlocks:
    """Top-level blocks of a component source.

    Parameters
    ----------
    template : str | None
        Trimmed inner markup of the first ``<template>`` block.
    script : str | None
        Trimmed inner text of the first ``<script>`` block.
    style : str | None
        Trimmed inner text of the first ``<style>`` block.
    style_tag : str
        Opening style tag as written in the source, attributes included.
    """

    template: str | None = None
    script: str | None = None
    style: str | None = None
    style_tag: str = DEFAULT_STYLE_TAG


def split_sfc(source: str) -> SfcBlocks:
    """Split component source into template, script and style blocks.

    The first match wins for each block. A missing block is ``None``; it is
    never an error at this stage.
    """
    template = _TEMPLATE_RE.search(source)
    script = _SCRIPT_RE.search(source)
    style = _STYLE_RE.search(source)
    return SfcBlocks(
        template=template.group(2).strip() if template else None,
        script=script.group(2).strip() if script else None,
        style=style.group(2).strip() if style else None,
        style_tag=style.group(1) if style else DEFAULT_STYLE_TAG,
    )
