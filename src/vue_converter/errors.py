"""Exception types raised by conversion entry points."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error for a component conversion that cannot complete."""

    exit_code = 1


class MissingScriptError(ConversionError):
    """Raised when the component source has no usable ``<script>`` block."""

    exit_code = 2

    def __init__(self, message: str = "No script tag found in Vue 2 component") -> None:
        super().__init__(message)


class SourceReadError(ConversionError):
    """Raised when a component file cannot be read, decoded or validated."""

    exit_code = 3
