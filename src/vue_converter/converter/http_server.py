"""FastAPI daemon exposing component conversion over HTTP."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence
from types import ModuleType

from pydantic import BaseModel, ConfigDict

from vue_converter import __version__
from vue_converter.application.use_cases import convert_component
from vue_converter.converter.core import (
    ConversionOutcome,
    ConversionRequest,
    convert_component_bytes,
)
from vue_converter.errors import ConversionError
from vue_converter.schemas import ConvertPayload, ConvertResponse

logger = logging.getLogger(__name__)

APP_REF = "vue_converter.converter.http_server:app"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8091

try:
    from fastapi import FastAPI, File, Form, HTTPException, UploadFile, status
    from fastapi.responses import Response
except ModuleNotFoundError:  # pragma: no cover
    FASTAPI_AVAILABLE = False
else:
    FASTAPI_AVAILABLE = True

uvicorn: ModuleType | None
try:
    import uvicorn
except ModuleNotFoundError:  # pragma: no cover
    uvicorn = None


class ProbeResponse(BaseModel):
    """Body of the liveness and readiness probes."""

    model_config = ConfigDict(extra="forbid")

    status: str


def _ensure_fastapi() -> None:
    if not FASTAPI_AVAILABLE:
        raise RuntimeError(
            "fastapi is required to run vue-converter-http. Install with extra: .[server]"
        )


def _download_headers(input_sha: str, outcome: ConversionOutcome) -> dict[str, str]:
    """Integrity and review metadata attached to a converted download."""
    return {
        "X-Input-SHA256": input_sha,
        "X-Output-SHA256": outcome.output_sha256,
        "X-Output-Filename": outcome.output_filename,
        "X-Conversion-Warnings": str(outcome.warning_count),
        "Content-Disposition": f'attachment; filename="{outcome.output_filename}"',
    }


def create_app() -> FastAPI:
    """Build the HTTP application with probe and conversion routes."""
    _ensure_fastapi()
    app = FastAPI(
        title="Vue Options to Composition Converter",
        version=__version__,
        description=(
            "Convert Options API single-file components to Composition API "
            "<script setup> components."
        ),
    )

    @app.get("/healthz", response_model=ProbeResponse)
    async def healthz() -> ProbeResponse:
        return ProbeResponse(status="ok")

    @app.get("/readyz", response_model=ProbeResponse)
    async def readyz() -> ProbeResponse:
        return ProbeResponse(status="ready")

    @app.post("/v1/convert", response_model=ConvertResponse)
    async def convert(payload: ConvertPayload) -> ConvertResponse:
        """Convert component source text and return output plus messages."""
        return ConvertResponse.from_result(convert_component(payload.source))

    @app.post("/v1/convert/upload")
    async def convert_upload(
        component: UploadFile = File(...),
        expected_sha256: str | None = Form(default=None),
    ) -> Response:
        """Convert an uploaded ``.vue`` file and send the converted file back."""
        data = await component.read()
        if not data:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="uploaded component is empty",
            )
        request = ConversionRequest(
            filename=component.filename or "",
            expected_sha256=expected_sha256,
        )
        try:
            input_sha, outcome = convert_component_bytes(data, request)
        except (ValueError, ConversionError) as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        except Exception as exc:  # pragma: no cover
            logger.exception("upload conversion of %s failed", request.filename)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="internal server error",
            ) from exc

        logger.debug(
            "converted %s: %d bytes, %d warnings",
            outcome.output_filename,
            outcome.output_size_bytes,
            outcome.warning_count,
        )
        return Response(
            content=outcome.output_bytes,
            media_type="text/plain; charset=utf-8",
            headers=_download_headers(input_sha, outcome),
        )

    return app


app = create_app() if FASTAPI_AVAILABLE else None


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Vue component converter HTTP server.")
    parser.add_argument("--host", default=os.getenv("VUE_CONVERTER_HTTP_HOST", DEFAULT_HOST))
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("VUE_CONVERTER_HTTP_PORT", str(DEFAULT_PORT))),
    )
    return parser.parse_args(argv)


def main() -> None:
    """Serve the converter application with uvicorn."""
    _ensure_fastapi()
    if uvicorn is None:
        raise RuntimeError("uvicorn is required to run vue-converter-http")
    args = _parse_args()
    logger.info("serving %s on %s:%d", APP_REF, args.host, args.port)
    uvicorn.run(APP_REF, host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
