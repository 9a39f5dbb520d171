"""CLI entry point: checklib.

Usage:
    checklib -p index.html                    # report every CDN reference
    checklib -p index.html --warnings-only    # only outdated / failed entries
    checklib -v                               # print version
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from checklib import __version__
from checklib.core.config import Settings
from checklib.core.logging import setup_logging
from checklib.exceptions import ConfigError
from checklib.runner import run


class _HelpOnUsageError(click.Command):
    """Print the help text instead of a usage error, and exit 0."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(0)


@click.command(cls=_HelpOnUsageError, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option("-p", "--path", "path", default=None, help="Path to the html file")
@click.option("--warnings-only", is_flag=True, help="Show only update warnings")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Per-request timeout in seconds (default: $CHECKLIB_TIMEOUT or 10)",
)
@click.option("--debug", is_flag=True, help="Diagnostic logging on stderr")
@click.pass_context
def main(
    ctx: click.Context,
    path: str | None,
    warnings_only: bool,
    timeout: float | None,
    debug: bool,
) -> None:
    """Check CDN-hosted scripts and stylesheets in an HTML file for newer versions."""
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        click.echo(click.style(str(exc), fg="red"))
        return
    setup_logging("DEBUG" if debug else settings.log_level, settings.log_format)

    if path is None:
        click.echo(ctx.get_help())
        return

    # Relative paths resolve against the current working directory
    file = Path(path)
    if not file.is_file() or file.suffix != ".html":
        click.echo(
            click.style(
                f"File {file.resolve()} does not exist or the file extension is wrong.",
                fg="red",
            )
        )
        return

    content = file.read_text(encoding="utf-8", errors="replace")
    asyncio.run(run(content, warnings_only, timeout=timeout or settings.timeout))


if __name__ == "__main__":
    main()
