"""Shared pytest configuration, marker assignment and sample components."""

from __future__ import annotations

from pathlib import Path

import pytest

COUNTER_TEMPLATE = """<div class="counter">
    <p>Count: {{ count }}</p>
    <p>Double: {{ doubleCount }}</p>
    <button @click="increment">+</button>
    <button @click="$emit('update', count)">Emit</button>
  </div>"""

COUNTER_STYLE = """.counter {
  padding: 1rem;
}"""

COUNTER_SFC = f"""<template>
  {COUNTER_TEMPLATE}
</template>

<script>
export default {{
  name: 'Counter',
  props: {{
    initialValue: Number
  }},
  data() {{
    return {{
      count: this.initialValue || 0
    }}
  }},
  computed: {{
    doubleCount() {{
      return this.count * 2
    }}
  }},
  methods: {{
    increment() {{
      this.count++
    }}
  }},
  mounted() {{
    console.log('Component mounted')
  }}
}}
</script>

<style scoped>
{COUNTER_STYLE}
</style>
"""


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def counter_source() -> str:
    """Return the reference Options API counter component."""
    return COUNTER_SFC


@pytest.fixture
def counter_template() -> str:
    """Return the trimmed template markup of the counter component."""
    return COUNTER_TEMPLATE


@pytest.fixture
def counter_style() -> str:
    """Return the trimmed style text of the counter component."""
    return COUNTER_STYLE


@pytest.fixture
def counter_file(tmp_path: Path) -> Path:
    """Write the counter component to a temporary ``.vue`` file."""
    path = tmp_path / "Counter.vue"
    path.write_text(COUNTER_SFC, encoding="utf-8")
    return path
