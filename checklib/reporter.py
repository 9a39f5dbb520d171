"""Terminal reporter — render extraction notes and update outcomes as colored lines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

import click

from checklib.engines.update_checker.models import UpdateOutcome


class TerminalReporter:
    """Writes one line per event to stdout.

    With ``warnings_only`` set, up-to-date outcomes are not rendered;
    everything else is.
    """

    def __init__(self, warnings_only: bool = False, *, color: bool | None = None) -> None:
        self.warnings_only = warnings_only
        self._color = color

    def _echo(self, message: str) -> None:
        click.echo(message, color=self._color)

    def info(self, message: str) -> None:
        self._echo(click.style(f"[i] {message}", fg="blue"))

    def warning(self, message: str) -> None:
        self._echo(click.style(f"[!] {message}", fg="yellow"))

    def error(self, message: str) -> None:
        self._echo(click.style(message, fg="red"))

    def outcome(self, outcome: UpdateOutcome) -> None:
        ref = outcome.reference
        if outcome.status == "outdated":
            self._echo(
                click.style("! Update available for ", fg="yellow")
                + click.style(ref.name, fg="cyan", bold=True)
                + " "
                + click.style(ref.declared_version, reverse=True)
                + click.style(" -> ", fg="yellow")
                + click.style(outcome.latest_version or "", reverse=True)
                + click.style(f" on {ref.provider}", fg="yellow")
            )
        elif outcome.status == "current":
            if not self.warnings_only:
                self._echo(click.style(f"✔ {ref.name} is up to date! ({ref.provider})", fg="green"))
        else:
            self._echo(click.style(f"✖ Couldn't fetch {ref.name}", fg="red"))

    def summary(self, outcomes: Iterable[UpdateOutcome]) -> None:
        counts = Counter(o.status for o in outcomes)
        total = sum(counts.values())
        self._echo(
            f"\n{total} checked: {counts['outdated']} outdated, "
            f"{counts['current']} up to date, {counts['lookup_failed']} failed"
        )
