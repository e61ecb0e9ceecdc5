"""Unit tests for the props and data converters."""

from __future__ import annotations

import pytest

from vue_converter.application.results import ConvertedFragment
from vue_converter.converters.data import convert_data
from vue_converter.converters.props import PROPS_WARNING, convert_props
from vue_converter.types import FALLBACK_TS_TYPE, PROP_TYPE_MAP, map_prop_type


@pytest.mark.parametrize(
    ("vue_type", "ts_type"),
    [
        ("String", "string"),
        ("Number", "number"),
        ("Boolean", "boolean"),
        ("Array", "Array<any>"),
        ("Object", "Record<string, any>"),
        ("Function", "(...args: any[]) => any"),
        ("Date", "any"),
        ("Symbol", "any"),
    ],
)
def test_map_prop_type(vue_type: str, ts_type: str) -> None:
    """Map documented prop constructors and fall back to any."""
    assert map_prop_type(vue_type) == ts_type


def test_prop_type_map_is_read_only() -> None:
    """Reject mutation of the shared type table."""
    with pytest.raises(TypeError):
        PROP_TYPE_MAP["Date"] = "Date"  # type: ignore[index]
    assert FALLBACK_TS_TYPE == "any"


def test_convert_props_emits_interface_and_declaration() -> None:
    """Declare every prop as optional and warn about defaults."""
    fragment = convert_props("{\n  initialValue: Number,\n  label: String\n}")

    assert fragment.code == (
        "interface Props {\n"
        "  initialValue?: number\n"
        "  label?: string\n"
        "}\n\n"
        "const props = withDefaults(defineProps<Props>(), {})"
    )
    assert fragment.warnings == (PROPS_WARNING,)
    assert fragment.imports == ()


def test_convert_props_absent_section() -> None:
    """Produce an empty fragment without warnings when props are absent."""
    assert convert_props(None) == ConvertedFragment()


def test_convert_props_without_shorthand_pairs_still_warns() -> None:
    """Warn even when no prop could be typed."""
    fragment = convert_props("{}")

    assert fragment.code == ""
    assert fragment.warnings == (PROPS_WARNING,)


def test_convert_props_keeps_first_declaration_of_repeated_key() -> None:
    """Emit one interface member per key."""
    fragment = convert_props("{ size: { type: Number, default: 1 }, type: String }")

    assert fragment.code.count("type?:") == 1
    assert "  type?: number" in fragment.code


def test_convert_data_preserves_initializers_verbatim() -> None:
    """Create one ref per entry with the source expression unchanged."""
    fragment = convert_data(
        "{\n  count: this.initialValue || 0,\n  items: [1, 2],\n"
        "  // comment\n  user: { name: 'x', age: 3 },\n}"
    )

    assert fragment.code.splitlines() == [
        "const count = ref(this.initialValue || 0)",
        "const items = ref([1, 2])",
        "const user = ref({ name: 'x', age: 3 })",
    ]
    assert fragment.warnings == ()
    assert fragment.imports == ("ref",)


def test_convert_data_warns_on_unconvertible_entries() -> None:
    """Skip shorthand entries and report them."""
    fragment = convert_data("{ count: 0, shorthand }")

    assert fragment.code == "const count = ref(0)"
    assert len(fragment.warnings) == 1
    assert "shorthand" in fragment.warnings[0]


def test_convert_data_absent_or_empty() -> None:
    """Produce empty fragments for absent or empty data objects."""
    assert convert_data(None) == ConvertedFragment()
    assert convert_data("{}") == ConvertedFragment()
