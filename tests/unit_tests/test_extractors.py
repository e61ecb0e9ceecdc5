"""Unit tests for Options API section extractors."""

from __future__ import annotations

from vue_converter import extractors
from vue_converter.sfc import split_sfc


def _counter_script(counter_source: str) -> str:
    script = split_sfc(counter_source).script
    assert script is not None
    return script


def test_extract_sections_from_counter(counter_source: str) -> None:
    """Locate every section of the reference component."""
    sections = extractors.extract_sections(_counter_script(counter_source))

    assert sections.name == "Counter"
    assert sections.props_raw is not None
    assert "initialValue: Number" in sections.props_raw
    assert sections.data_raw is not None
    assert sections.data_raw.strip().startswith("{")
    assert "count: this.initialValue || 0" in sections.data_raw
    assert sections.computed_raw is not None
    assert "doubleCount()" in sections.computed_raw
    assert "increment" not in sections.computed_raw
    assert sections.methods_raw is not None
    assert "increment()" in sections.methods_raw
    assert "mounted" not in sections.methods_raw
    assert sections.watch_raw is None
    assert list(sections.lifecycle_raw) == ["mounted"]
    assert "console.log('Component mounted')" in sections.lifecycle_raw["mounted"]
    assert sections.emitted_events == ()


def test_absent_sections_are_none() -> None:
    """Report missing sections as absent rather than raising."""
    sections = extractors.extract_sections("export default {}")

    assert sections.name is None
    assert sections.props_raw is None
    assert sections.data_raw is None
    assert sections.methods_raw is None
    assert sections.computed_raw is None
    assert sections.watch_raw is None
    assert dict(sections.lifecycle_raw) == {}
    assert sections.emitted_events == ()


def test_extract_name_accepts_any_quote() -> None:
    """Read the component name from single, double or backtick quotes."""
    assert extractors.extract_name('name: "Widget",') == "Widget"
    assert extractors.extract_name("name:`Panel`") == "Panel"


def test_extract_props_keeps_nested_objects_whole() -> None:
    """Bound the props block by brace matching, not the first closing brace."""
    script = "props: {\n  size: { type: Number, default: 1 },\n  label: String\n},\ndata() {}"

    props = extractors.extract_props(script)

    assert props is not None
    assert props.startswith("{") and props.endswith("}")
    assert "label: String" in props


def test_extract_data_function_and_arrow_forms() -> None:
    """Find the returned object for function and arrow data declarations."""
    function_form = "data: function () {\n  const x = 1\n  return { a: x }\n}"
    arrow_form = "data: () => ({ b: 2 }),"

    assert extractors.extract_data(function_form) == "{ a: x }"
    assert extractors.extract_data(arrow_form) == "{ b: 2 }"


def test_extract_methods_falls_back_to_end_of_script() -> None:
    """Capture to the last brace when no known section follows methods."""
    script = "export default {\n  methods: {\n    a() { return 1 }\n  },\n  beforeMount() { b() }\n}"

    methods = extractors.extract_methods(script)

    assert methods is not None
    assert "a() { return 1 }" in methods
    assert "beforeMount() { b() }" in methods


def test_extract_computed_falls_back_to_end_of_script() -> None:
    """Capture to the last brace when no known section follows computed."""
    script = "export default {\n  computed: {\n    total() { return 1 }\n  },\n  beforeMount() { b() }\n}"

    computed = extractors.extract_computed(script)

    assert computed is not None
    assert "total() { return 1 }" in computed
    assert "beforeMount() { b() }" in computed


def test_extract_watch_falls_back_to_end_of_script() -> None:
    """Capture to the last brace when no known section follows watch."""
    script = "export default {\n  watch: {\n    count(value) {}\n  },\n  beforeDestroy() { stop() }\n}"

    watch = extractors.extract_watch(script)

    assert watch is not None
    assert "count(value) {}" in watch
    assert "beforeDestroy() { stop() }" in watch


def test_extract_watch_bounded_by_following_section() -> None:
    """Stop the watch block at the next known section."""
    script = (
        "watch: {\n  count(value) { console.log(value) }\n},\n"
        "methods: {\n  reset() { this.count = 0 }\n}"
    )

    watch = extractors.extract_watch(script)

    assert watch is not None
    assert "count(value)" in watch
    assert "reset" not in watch


def test_extract_lifecycle_uses_fixed_order() -> None:
    """Key hooks in fixed order regardless of source order."""
    script = (
        "destroyed() { this.stop() },\n"
        "updated() { a() },\n"
        "created() { if (x) { y() } },\n"
    )

    hooks = extractors.extract_lifecycle(script)

    assert list(hooks) == ["created", "updated", "destroyed"]
    assert hooks["created"].strip() == "if (x) { y() }"


def test_extract_lifecycle_ignores_method_calls() -> None:
    """Do not mistake member calls such as this.mounted() for hooks."""
    assert dict(extractors.extract_lifecycle("run() { this.mounted() {} }")) == {}


def test_extract_emitted_events_deduplicates_in_order() -> None:
    """List each emitted event once, in first-seen order."""
    script = (
        "this.$emit('update', 1)\n"
        'this.$emit("reset")\n'
        "this.$emit(`update`, 2)\n"
    )

    assert extractors.extract_emitted_events(script) == ("update", "reset")
