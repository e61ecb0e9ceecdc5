"""Application use-cases orchestrating component conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from vue_converter.application.results import (
    ConversionMessage,
    ConversionResult,
    ConvertedFragment,
)
from vue_converter.assembly import assemble_component, assemble_script
from vue_converter.converters import SECTION_CONVERTERS
from vue_converter.errors import ConversionError, MissingScriptError, SourceReadError
from vue_converter.extractors import ScriptSections, extract_sections
from vue_converter.schemas import FileConversionConfig
from vue_converter.sfc import split_sfc

logger = logging.getLogger(__name__)

SUCCESS_TEXT = "✅ Conversion completed!"
MISSING_SCRIPT_TEXT = "❌ No script tag found in Vue 2 component"
FAULT_PREFIX = "❌ Error: "
DEFAULT_COMPONENT_NAME = "MyComponent"


def convert_script(script: str) -> tuple[str, tuple[str, ...], ScriptSections]:
    """Convert an Options API script body into a ``<script setup>`` block.

    Returns
    -------
    tuple[str, tuple[str, ...], ScriptSections]
        The assembled script block, the warnings of every converter in
        assembly order, and the extracted sections.
    """
    sections = extract_sections(script)
    fragments: list[ConvertedFragment] = []
    for section, converter in SECTION_CONVERTERS:
        fragment = converter(sections)
        logger.debug(
            "converted %s: %d chars, %d warnings",
            section,
            len(fragment.code),
            len(fragment.warnings),
        )
        fragments.append(fragment)
    warnings = tuple(warning for fragment in fragments for warning in fragment.warnings)
    return assemble_script(fragments), warnings, sections


def _convert(source: str) -> ConversionResult:
    blocks = split_sfc(source)
    if not blocks.script:
        raise MissingScriptError()
    script, warnings, sections = convert_script(blocks.script)
    messages = (
        ConversionMessage(kind="success", text=SUCCESS_TEXT),
        *(ConversionMessage(kind="warning", text=warning) for warning in warnings),
    )
    return ConversionResult(
        output_text=assemble_component(blocks, script),
        messages=messages,
        component_name=sections.name or DEFAULT_COMPONENT_NAME,
    )


def convert_component(source: str) -> ConversionResult:
    """Use-case: convert an Options API component into Composition API form.

    Never raises. A missing script block or any unexpected fault is reported
    as a single ``error`` message with empty output text.
    """
    try:
        return _convert(source)
    except MissingScriptError:
        return ConversionResult(
            output_text="",
            messages=(ConversionMessage(kind="error", text=MISSING_SCRIPT_TEXT),),
        )
    except Exception as exc:
        logger.exception("unexpected error during component conversion")
        return ConversionResult(
            output_text="",
            messages=(ConversionMessage(kind="error", text=f"{FAULT_PREFIX}{exc}"),),
        )


def raise_for_errors(result: ConversionResult) -> ConversionResult:
    """Return ``result`` unchanged, or raise when it carries an error message.

    Raises
    ------
    MissingScriptError
        If the source had no script block.
    ConversionError
        For any other failed conversion.
    """
    if result.ok:
        return result
    text = result.errors[0] if result.errors else "conversion produced no status"
    if text == MISSING_SCRIPT_TEXT:
        raise MissingScriptError()
    raise ConversionError(text.removeprefix(FAULT_PREFIX))


def convert_file(
    *,
    source_path: Path,
    output_path: Path | None = None,
    encoding: str = "utf-8",
) -> ConversionResult:
    """Use-case: convert a component file, optionally writing the result.

    The output file is only written when the conversion succeeds.

    Raises
    ------
    SourceReadError
        If the parameters are invalid or the source cannot be read/decoded.
    """
    try:
        config = FileConversionConfig(
            source_path=source_path,
            output_path=output_path,
            encoding=encoding,
        )
    except ValidationError as exc:
        raise SourceReadError(f"Invalid file conversion parameters: {exc}") from exc

    try:
        source = config.source_path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {config.source_path}: {exc}") from exc

    result = convert_component(source)
    if result.ok and config.output_path is not None:
        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        config.output_path.write_text(result.output_text + "\n", encoding=config.encoding)
        logger.debug("wrote %s", config.output_path)
    return result
