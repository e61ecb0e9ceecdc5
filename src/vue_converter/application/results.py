"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from vue_converter.types import MessageKind


@dataclass(frozen=True)
class ConvertedFragment:
    """Composition API code produced for one Options API section.

    ``code`` is empty when the section was absent or nothing converted.
    ``imports`` names the Vue APIs the code relies on.
    """

    code: str = ""
    warnings: tuple[str, ...] = ()
    imports: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConversionMessage:
    """User-facing status line attached to a conversion."""

    kind: MessageKind
    text: str


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    output_text: str
    messages: tuple[ConversionMessage, ...]
    component_name: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the conversion completed."""
        return bool(self.messages) and self.messages[0].kind == "success"

    @property
    def warnings(self) -> tuple[str, ...]:
        return tuple(m.text for m in self.messages if m.kind == "warning")

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(m.text for m in self.messages if m.kind == "error")
