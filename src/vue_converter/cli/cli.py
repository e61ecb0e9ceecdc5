#!/usr/bin/env python3
"""
vue_converter.cli.cli

Command line front-end for turning Vue 2 Options API components into Vue 3
Composition API ``<script setup>`` components.

Examples
--------
Print the converted component:

    vue-options-to-composition convert Counter.vue

Write it to a new file and fail when anything needs manual review:

    vue-options-to-composition convert Counter.vue Counter.setup.vue --strict
"""

from __future__ import annotations

import importlib.metadata
import logging
import sys
import traceback
from pathlib import Path

import typer

from vue_converter.errors import ConversionError

app = typer.Typer(
    name="vue-options-to-composition",
    help="Convert Vue 2 Options API components to Vue 3 Composition API.",
    no_args_is_help=True,
)

STRICT_EXIT_CODE = 4
DOCTOR_DISTRIBUTIONS = ("typer", "pydantic", "fastapi", "uvicorn", "python-multipart")


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Report a failed conversion on stderr.

    Parameters
    ----------
    exc : Exception
        The failure to report.
    debug : bool
        Append the full traceback when set.

    Returns
    -------
    int
        The exception's ``exit_code`` when it defines a positive one, else 1.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        details = traceback.format_exception(type(exc), exc, exc.__traceback__)
        typer.echo("\nTraceback:\n" + "".join(details), err=True)
    exit_code = getattr(exc, "exit_code", 1)
    return exit_code if isinstance(exit_code, int) and exit_code > 0 else 1


def _distribution_version(name: str) -> str:
    try:
        return importlib.metadata.version(name)
    except importlib.metadata.PackageNotFoundError:
        return "<not installed>"


@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show debug logs and full tracebacks on error."
    ),
) -> None:
    """Configure logging and keep global flags on the context.

    Parameters
    ----------
    ctx : typer.Context
        Carries ``{"debug": bool}`` to subcommands.
    debug : bool, default=False
        Log at DEBUG level to stderr and print tracebacks.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
    ctx.obj = {"debug": debug}


@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Path to an Options API .vue component.",
    ),
    output_path: Path | None = typer.Argument(
        None, help="Where to write the converted .vue file (stdout when omitted)."
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Source/output text encoding."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print review warnings."),
    strict: bool = typer.Option(
        False,
        "--strict",
        help=f"Exit with code {STRICT_EXIT_CODE} when the conversion produced warnings.",
    ),
) -> None:
    """Convert a single component file.

    The converted component goes to ``output_path`` or stdout; review
    warnings always go to stderr.
    """
    debug = bool((ctx.obj or {}).get("debug", False))

    from vue_converter.api import convert_file_to_composition

    try:
        result = convert_file_to_composition(
            source_path=source_path,
            output_path=output_path,
            encoding=encoding,
        )
    except Exception as exc:
        # ConversionError carries its own exit code; anything else exits 1.
        if not isinstance(exc, ConversionError):
            logging.getLogger(__name__).debug("unexpected failure", exc_info=True)
        raise typer.Exit(code=_print_conversion_error(exc, debug)) from exc

    if output_path is None:
        typer.echo(result.output_text)
    else:
        typer.echo(f"✓ Saved: {output_path}", err=True)
    if not quiet:
        for warning in result.warnings:
            typer.echo(warning, err=True)
    if strict and result.warnings:
        raise typer.Exit(code=STRICT_EXIT_CODE)


@app.command("tables")
def tables_cmd() -> None:
    """Print the prop type and lifecycle hook mapping tables."""
    from vue_converter.types import FALLBACK_TS_TYPE, LIFECYCLE_HOOKS, PROP_TYPE_MAP

    rows = [f"  {vue:<10} -> {ts}" for vue, ts in PROP_TYPE_MAP.items()]
    rows.append(f"  {'<other>':<10} -> {FALLBACK_TS_TYPE}")
    typer.echo("Prop types:\n" + "\n".join(rows))
    hooks = [f"  {hook:<14} -> {registration}" for hook, registration in LIFECYCLE_HOOKS.items()]
    typer.echo("Lifecycle hooks:\n" + "\n".join(hooks))


@app.command("doctor")
def doctor_cmd() -> None:
    """Print interpreter, package and dependency versions."""
    from vue_converter import __version__

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"vue-options-to-composition: {__version__}")
    for name in DOCTOR_DISTRIBUTIONS:
        typer.echo(f"{name}: {_distribution_version(name)}")


if __name__ == "__main__":
    app()
