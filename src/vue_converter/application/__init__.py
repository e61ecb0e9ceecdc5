"""Application-layer use-cases and result objects."""

from __future__ import annotations

from pathlib import Path

from vue_converter.application.results import (
    ConversionMessage,
    ConversionResult,
    ConvertedFragment,
)


def convert_component(source: str) -> ConversionResult:
    """Convert component source via lazy use-case import."""
    from vue_converter.application.use_cases import convert_component as _impl

    return _impl(source)


def convert_file(
    *,
    source_path: Path,
    output_path: Path | None = None,
    encoding: str = "utf-8",
) -> ConversionResult:
    """Convert a component file via lazy use-case import."""
    from vue_converter.application.use_cases import convert_file as _impl

    return _impl(source_path=source_path, output_path=output_path, encoding=encoding)


__all__ = [
    "ConversionMessage",
    "ConversionResult",
    "ConvertedFragment",
    "convert_component",
    "convert_file",
]
