"""Top-level API for Options API to Composition API component conversion."""

from __future__ import annotations

from pathlib import Path

from vue_converter.application.results import ConversionMessage, ConversionResult

__version__ = "0.1.0"


def convert_component(source: str) -> ConversionResult:
    """Convert a Vue 2 Options API single-file component.

    Parameters
    ----------
    source : str
        Full text of a ``.vue`` file using the ``<template>``/``<script>``/
        ``<style>`` block convention.

    Returns
    -------
    ConversionResult
        Converted component text plus ordered ``success``/``warning``/
        ``error`` messages. This function never raises; failures are
        reported as a single ``error`` message with empty output.
    """
    from .application.use_cases import convert_component as _impl

    return _impl(source)


def convert_file_to_composition(
    source_path: Path,
    output_path: Path | None = None,
    encoding: str = "utf-8",
) -> ConversionResult:
    """Convert a component file on disk.

    Parameters
    ----------
    source_path : Path
        Options API ``.vue`` file to read.
    output_path : Path | None, default=None
        Where to write the converted component. Nothing is written when
        omitted.
    encoding : str, default="utf-8"
        Text encoding used for reading and writing.

    Returns
    -------
    ConversionResult
        The successful conversion result.

    Raises
    ------
    ConversionError
        If the file cannot be read or the conversion fails.
    """
    from .api import convert_file_to_composition as _impl

    return _impl(source_path=source_path, output_path=output_path, encoding=encoding)


__all__ = [
    "ConversionMessage",
    "ConversionResult",
    "convert_component",
    "convert_file_to_composition",
]
