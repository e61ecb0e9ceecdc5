"""Unit tests for converter daemon core helpers."""

from __future__ import annotations

import pytest

from vue_converter.converter import core
from vue_converter.converter.core import ConversionRequest, digest_bytes
from vue_converter.errors import ConversionError, MissingScriptError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("", None),
        ("   ", None),
        ("A" * 64, "a" * 64),
    ],
)
def test_normalize_sha256(value: str | None, expected: str | None) -> None:
    """Normalize expected SHA values and treat blanks as absent."""
    assert core.normalize_sha256(value) == expected


def test_normalize_sha256_rejects_invalid_value() -> None:
    """Reject non-hex and wrong-length SHA values."""
    with pytest.raises(ValueError, match="64-character hex digest"):
        core.normalize_sha256("xyz")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Counter.vue", "Counter.vue"),
        ("../../etc/passwd", "passwd"),
        ("/tmp/Widget.vue", "Widget.vue"),
        ("..\\..\\Secret.vue", "Secret.vue"),
        ("", "component.vue"),
        ("   ", "component.vue"),
        ("/", "component.vue"),
    ],
)
def test_safe_input_filename(value: str, expected: str) -> None:
    """Sanitize potentially unsafe upload filenames."""
    assert core.safe_input_filename(value) == expected


def test_convert_component_bytes_returns_digests(counter_source: str) -> None:
    """Convert uploaded bytes and report digests of both sides."""
    data = counter_source.encode("utf-8")

    input_sha, outcome = core.convert_component_bytes(
        data,
        ConversionRequest(filename="Counter.vue", expected_sha256=digest_bytes(data)),
    )

    assert input_sha == digest_bytes(data)
    assert outcome.output_filename == "Counter.vue"
    assert outcome.output_bytes == (outcome.result.output_text + "\n").encode("utf-8")
    assert outcome.output_sha256 == digest_bytes(outcome.output_bytes)
    assert outcome.output_size_bytes == len(outcome.output_bytes)
    assert outcome.warning_count == 3
    assert outcome.result.component_name == "Counter"


def test_convert_component_bytes_rejects_digest_mismatch() -> None:
    """Refuse payloads that do not match the expected digest."""
    with pytest.raises(ValueError, match="SHA-256 mismatch"):
        core.convert_component_bytes(
            b"<script>export default {}</script>",
            ConversionRequest(filename="a.vue", expected_sha256="0" * 64),
        )


def test_convert_component_bytes_rejects_undecodable_payload() -> None:
    """Report payloads that are not text in the requested encoding."""
    with pytest.raises(ValueError, match="not valid utf-8 text"):
        core.convert_component_bytes(b"\xff\xfe", ConversionRequest(filename="a.vue"))


def test_convert_component_bytes_raises_conversion_errors(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Raise typed errors for failed conversions."""
    with pytest.raises(MissingScriptError):
        core.convert_component_bytes(b"<template />", ConversionRequest(filename="a.vue"))

    def broken(script: str) -> None:
        raise RuntimeError("bad scan")

    import vue_converter.application.use_cases as use_cases

    monkeypatch.setattr(use_cases, "extract_sections", broken)
    with pytest.raises(ConversionError, match="bad scan"):
        core.convert_component_bytes(
            b"<script>export default {}</script>", ConversionRequest(filename="a.vue")
        )
