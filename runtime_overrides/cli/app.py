"""Main Typer application.

Entry point: ``runtime-overrides`` (configured via pyproject.toml scripts).
The app registers a single command, so it runs without a subcommand name.
"""

from __future__ import annotations

import typer

from runtime_overrides.cli.commands.build import build_cmd

app = typer.Typer(
    name="runtime-overrides",
    help="Build EVM-tracing runtime overrides for Darwinia chains.",
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="build", help="Build a tracing runtime and its digest.")(build_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
