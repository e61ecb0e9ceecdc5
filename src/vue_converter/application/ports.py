"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from vue_converter.application.results import ConvertedFragment
from vue_converter.extractors import ScriptSections


class SectionConverter(Protocol):
    """Convert one Options API section into a Composition API fragment."""

    def __call__(self, sections: ScriptSections) -> ConvertedFragment:
        """Return the fragment for the section, empty when it is absent."""
