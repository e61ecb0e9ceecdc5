#!/usr/bin/env python3
"""Example script for converting an Options API component and reviewing the result."""

from __future__ import annotations

from pathlib import Path

from vue_converter import convert_file_to_composition

HERE = Path(__file__).resolve().parent


def main() -> None:
    """Convert the bundled TodoList component and print review notes."""
    print("=" * 60)
    print("Options API to Composition API Conversion Example")
    print("=" * 60)

    source_path = HERE / "TodoList.vue"
    output_path = Path("outputs/TodoList.vue")

    result = convert_file_to_composition(source_path, output_path)

    if not output_path.exists():
        raise SystemExit("FAIL: converted component was not written.")

    converted = output_path.read_text(encoding="utf-8")
    for expected in ('<script setup lang="ts">', "defineEmits", "const remaining = computed("):
        if expected not in converted:
            raise SystemExit(f"FAIL: '{expected}' missing from converted component.")

    print(f"Component: {result.component_name}")
    print(f"Saved to: {output_path}")
    print("Review notes:")
    for warning in result.warnings:
        print(f"  {warning}")
    print("PASS: component converted.")


if __name__ == "__main__":
    main()
