"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from vue_converter.application.results import ConversionResult
from vue_converter.application.use_cases import convert_component
from vue_converter.application.use_cases import convert_file
from vue_converter.application.use_cases import raise_for_errors


def convert_source_to_composition(source: str) -> str:
    """Convert component source text and return the converted component.

    Raises ``ConversionError`` instead of returning an error result.
    """
    return raise_for_errors(convert_component(source)).output_text


def convert_file_to_composition(
    source_path: Path,
    output_path: Optional[Path] = None,
    encoding: str = "utf-8",
) -> ConversionResult:
    """Convert a component file, writing ``output_path`` when given."""
    result = convert_file(
        source_path=source_path,
        output_path=output_path,
        encoding=encoding,
    )
    return raise_for_errors(result)
