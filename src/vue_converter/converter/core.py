"""Upload-side helpers shared by the HTTP conversion daemon."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from pathlib import PurePosixPath

from vue_converter.application.results import ConversionResult
from vue_converter.application.use_cases import convert_component, raise_for_errors

DEFAULT_FILENAME = "component.vue"

_HEX_DIGEST_RE = re.compile(r"[0-9a-f]{64}")


@dataclass(frozen=True)
class ConversionRequest:
    """Metadata sent alongside an uploaded component.

    Parameters
    ----------
    filename : str
        Client-side name of the uploaded file, used for the download name.
    expected_sha256 : str | None, default=None
        Digest the client expects the uploaded bytes to have.
    encoding : str, default="utf-8"
        Text encoding of the upload and of the converted file.
    """

    filename: str
    expected_sha256: str | None = None
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ConversionOutcome:
    """Encoded converted component plus the result it came from."""

    output_bytes: bytes
    output_filename: str
    output_sha256: str
    output_size_bytes: int
    result: ConversionResult

    @property
    def warning_count(self) -> int:
        return len(self.result.warnings)


def digest_bytes(data: bytes) -> str:
    """Return the hex SHA-256 digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def normalize_sha256(value: str | None) -> str | None:
    """Lower-case a client digest; blank values mean no digest was sent."""
    candidate = (value or "").strip().lower()
    if not candidate:
        return None
    if _HEX_DIGEST_RE.fullmatch(candidate) is None:
        raise ValueError("expected_sha256 must be a 64-character hex digest")
    return candidate


def safe_input_filename(filename: str) -> str:
    """Reduce a client filename to a bare basename usable in headers."""
    # Backslashes count as separators so Windows paths lose their folders too.
    name = PurePosixPath(filename.strip().replace("\\", "/")).name
    if name in ("", ".", ".."):
        return DEFAULT_FILENAME
    return name


def convert_component_bytes(
    data: bytes,
    request: ConversionRequest,
) -> tuple[str, ConversionOutcome]:
    """Check, decode and convert an uploaded component.

    Returns
    -------
    tuple[str, ConversionOutcome]
        Digest of the uploaded bytes and the encoded conversion outcome.

    Raises
    ------
    ValueError
        On a digest mismatch or when the bytes are not text in
        ``request.encoding``.
    ConversionError
        When the component itself cannot be converted.
    """
    input_sha = digest_bytes(data)
    wanted = normalize_sha256(request.expected_sha256)
    if wanted not in (None, input_sha):
        raise ValueError("input SHA-256 mismatch")
    try:
        source = data.decode(request.encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise ValueError(f"component is not valid {request.encoding} text") from exc

    result = raise_for_errors(convert_component(source))
    encoded = f"{result.output_text}\n".encode(request.encoding)
    return input_sha, ConversionOutcome(
        output_bytes=encoded,
        output_filename=safe_input_filename(request.filename),
        output_sha256=digest_bytes(encoded),
        output_size_bytes=len(encoded),
        result=result,
    )
