"""``runtime-overrides --runtime CHAIN [--target REF]``: build a tracing runtime.

Acquires the runtime's source, builds it with EVM tracing enabled, moves
the wasm into ``overridden-runtimes/<chain>/wasms`` and writes its digest
to ``overridden-runtimes/<chain>/digests``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from runtime_overrides.config import settings
from runtime_overrides.core.builder import OverrideBuilder
from runtime_overrides.core.errors import RuntimeOverridesError
from runtime_overrides.models.build import BuildReport, BuildRequest
from runtime_overrides.models.runtimes import Runtime

console = Console()
err_console = Console(stderr=True)

_RUNTIME_CHOICES = ", ".join(r.canonical_name for r in Runtime)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _print_error(exc: BaseException) -> None:
    err_console.print(f"[bold red]Build failed:[/bold red] {escape(str(exc))}")
    cause = exc.__cause__
    while cause is not None:
        err_console.print(f"  [red]caused by:[/red] {escape(str(cause))}")
        cause = cause.__cause__


def _parse_runtime(value: str) -> Runtime:
    try:
        return Runtime.parse(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _print_report(report: BuildReport) -> None:
    request = report.request
    console.print()
    console.print(
        Panel(
            "\n".join([
                f"[bold green]Tracing runtime built![/bold green]",
                "",
                f"[bold]Runtime:[/bold] {request.runtime.canonical_name}",
                f"[bold]Target:[/bold]  {escape(request.target)}",
                f"[bold]SHA-256:[/bold] {report.content_address}",
                f"[bold]Size:[/bold]    {report.size_bytes:,} bytes",
            ]),
            title="[bold]runtime-overrides[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
    console.print()


def build_cmd(
    runtime: str = typer.Option(
        ...,
        "--runtime",
        "-r",
        metavar="CHAIN",
        callback=_parse_runtime,
        help=f"Runtime to build, case-insensitive: {_RUNTIME_CHOICES}.",
    ),
    target: str = typer.Option(
        None,
        "--target",
        "-t",
        metavar="VALUE",
        help="Branch, commit or tag to check out. Defaults to main.",
    ),
    build_dir: Path = typer.Option(
        None,
        "--build-dir",
        help="Directory for cloned sources. Defaults to build.",
    ),
    output_dir: Path = typer.Option(
        None,
        "--output-dir",
        help="Root of the overrides tree. Defaults to overridden-runtimes.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Build an EVM-tracing runtime and write its wasm and digest."""
    _configure_logging(verbose)

    request = BuildRequest(runtime=runtime, target=target or settings.default_target)
    builder = OverrideBuilder.from_settings(
        settings, build_root=build_dir, output_root=output_dir
    )

    try:
        report = builder.build(request)
    except (RuntimeOverridesError, OSError) as exc:
        _print_error(exc)
        raise typer.Exit(code=1)

    _print_report(report)

    # Plain lines for scripting
    typer.echo(f"Generated WASM:   {report.wasm_path}")
    typer.echo(f"Generated digest: {report.digest_path}")
