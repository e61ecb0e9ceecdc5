"""Section converters in script assembly order."""

from __future__ import annotations

from vue_converter.application.ports import SectionConverter
from vue_converter.converters.data import convert_data
from vue_converter.converters.emits import convert_emits
from vue_converter.converters.functions import convert_computed, convert_methods
from vue_converter.converters.lifecycle import convert_lifecycle
from vue_converter.converters.props import convert_props
from vue_converter.converters.watch import convert_watch

# Fixed reading order: interface first, behavior next, lifecycle last.
SECTION_CONVERTERS: tuple[tuple[str, SectionConverter], ...] = (
    ("props", lambda sections: convert_props(sections.props_raw)),
    ("emits", lambda sections: convert_emits(sections.emitted_events)),
    ("data", lambda sections: convert_data(sections.data_raw)),
    ("computed", lambda sections: convert_computed(sections.computed_raw)),
    ("methods", lambda sections: convert_methods(sections.methods_raw)),
    ("watch", lambda sections: convert_watch(sections.watch_raw)),
    ("lifecycle", lambda sections: convert_lifecycle(sections.lifecycle_raw)),
)

__all__ = [
    "SECTION_CONVERTERS",
    "convert_computed",
    "convert_data",
    "convert_emits",
    "convert_lifecycle",
    "convert_methods",
    "convert_props",
    "convert_watch",
]
