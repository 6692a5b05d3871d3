"""
reporters/terminal_reporter.py
Rich-powered terminal output: resolved ranks, match traces, bulk check
summaries, override and source listings, JSON export.
"""

import json
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.rule import Rule
from rich import box
from rich.padding import Padding
from rich.markup import escape


RANK_COLORS = {
    "A*": "bold magenta", "A": "bold cyan", "B": "bold yellow", "C": "dim yellow",
    "Q1": "bold magenta", "Q2": "bold cyan", "Q3": "bold yellow", "Q4": "dim yellow",
}


def rank_style(rank: Optional[str]) -> str:
    if not rank:
        return "dim white"
    # "Q1 1.234" → "Q1"
    return RANK_COLORS.get(rank.split(" ")[0], "bold white")


def rank_text(rank: Optional[str]) -> Text:
    return Text(rank or "—", style=rank_style(rank))


class TerminalReporter:
    def __init__(self, console: Console):
        self.console = console

    # ── Single lookups ────────────────────────────────────────────────────────

    def render_resolution(self, title: str, rank: Optional[str], overridden: bool = False):
        line = Text()
        line.append("✓ " if rank else "✗ ", style="green" if rank else "red")
        line.append(title, style="bold white")
        line.append("  →  ")
        line.append_text(rank_text(rank))
        if overridden:
            line.append("  (manual)", style="dim")
        self.console.print(line)

    def render_trace(self, title: str, messages: list[str]):
        body = Text()
        for i, msg in enumerate(messages):
            style = "green" if "✓" in msg else "red" if "✗" in msg else "dim"
            body.append(msg, style=style)
            if i < len(messages) - 1:
                body.append("\n")
        self.console.print(Panel(
            body,
            title=f"[bold]Match trace[/bold] · [cyan]{escape(title[:60])}[/cyan]",
            border_style="dim",
            padding=(0, 1),
        ))

    # ── Bulk check ────────────────────────────────────────────────────────────

    def render_check_summary(self, summary, not_found_limit: int = 10):
        self.console.print(Rule("[bold]Rankings Check Complete[/bold]", style="dim"))

        table = Table(box=box.SIMPLE, show_header=False, padding=(0, 3))
        table.add_column("Metric", style="dim")
        table.add_column("Value", style="bold white")

        table.add_row("Total titles", str(summary.total))
        table.add_row("Rankings found", f"[green]{summary.found}[/green]")
        table.add_row("Not found", f"[red]{summary.not_found}[/red]")
        table.add_row("Skipped", f"[dim]{summary.skipped}[/dim]  [dim](blank lines)[/dim]")
        coverage = summary.found / max(summary.total - summary.skipped, 1) * 100
        table.add_row("Coverage", f"[cyan]{coverage:.0f}%[/cyan]")

        self.console.print(Padding(table, (1, 4)))

        missing = summary.first_not_found(not_found_limit)
        if missing:
            lines = "\n".join(f"{i}. {escape(t)}" for i, t in enumerate(missing, 1))
            self.console.print(Panel(
                f"[dim]{lines}[/dim]",
                title=f"[bold]First {len(missing)} not found title{'s' if len(missing) != 1 else ''}[/bold]",
                border_style="red",
            ))

    # ── Listings ──────────────────────────────────────────────────────────────

    def render_overrides(self, items: list[tuple[str, str]]):
        if not items:
            self.console.print("[dim]No manual overrides set[/dim]")
            return
        table = Table(
            title=f"Manual overrides ({len(items)})",
            box=box.SIMPLE_HEAD,
            header_style="bold white",
        )
        table.add_column("Publication (normalized)", min_width=30)
        table.add_column("Rank", justify="center")
        for key, rank in items:
            table.add_row(Text(key), rank_text(rank))
        self.console.print(table)

    def render_sources(self, sources: list):
        table = Table(title="Ranking sources", box=box.SIMPLE_HEAD, header_style="bold white")
        table.add_column("Id", style="cyan")
        table.add_column("Name")
        table.add_column("Priority", justify="right")
        table.add_column("Enabled", justify="center")
        for s in sorted(sources, key=lambda s: s.priority):
            enabled = "[green]yes[/green]" if s.is_enabled() else "[red]no[/red]"
            table.add_row(Text(s.source_id), Text(s.name), str(s.priority), enabled)
        self.console.print(table)

    # ── JSON Export ───────────────────────────────────────────────────────────

    def export_json(self, summary, path: str):
        output = {
            "total": summary.total,
            "found": summary.found,
            "not_found": summary.not_found,
            "skipped": summary.skipped,
            "rankings": summary.results,
            "not_found_titles": summary.not_found_titles,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
