#!/usr/bin/env python3
"""
VenueRank - Resolve journal / conference names to SCImago quartiles and CORE ranks.
Usage: python rank.py resolve "ACM Conference on Computer and Communications Security (CCS)"
"""

import argparse
import sys
from pathlib import Path
from rich.console import Console
from rich.markup import escape

from venuerank.config import Config
from venuerank.errors import ReferenceDataError
from venuerank.matchers.trace import MatchTrace
from venuerank.reporters.terminal_reporter import TerminalReporter
from venuerank.resolver import build_resolver

console = Console()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="venuerank",
        description="VenueRank — journal & conference ranking lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python rank.py resolve "IEEE Transactions on Software Engineering"
  python rank.py resolve "Proceedings of the 25th Annual ACM SIGCOMM 2023 Conference" --debug
  python rank.py check venues.txt --export results.json
  python rank.py override set "My Workshop" "B"
  python rank.py override list
        """
    )
    parser.add_argument("--data-dir", default=None,
                        help="Directory with journal_rankings.json and conference_rankings.json")
    parser.add_argument("--prefs", default=None,
                        help="Preferences file holding manual overrides")
    parser.add_argument("--no-core", action="store_true",
                        help="Disable the CORE conference source")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show detailed processing logs")

    sub = parser.add_subparsers(dest="command", required=True)

    p_resolve = sub.add_parser("resolve", help="Resolve one or more venue titles")
    p_resolve.add_argument("titles", nargs="+", help="Venue title(s)")
    p_resolve.add_argument("--debug", "-d", action="store_true",
                           help="Print the strategy-by-strategy match trace")

    p_check = sub.add_parser("check", help="Check a file of venue titles (one per line)")
    p_check.add_argument("file", help="Text file, one venue title per line")
    p_check.add_argument("--export", "-e", default=None,
                         help="Export results to a JSON file")

    p_override = sub.add_parser("override", help="Manage manual ranking overrides")
    osub = p_override.add_subparsers(dest="action", required=True)
    p_set = osub.add_parser("set", help="Set a manual rank for a venue")
    p_set.add_argument("title")
    p_set.add_argument("rank", help="e.g. A*, A, B, C, Q1..Q4, Au A, Nat A")
    p_remove = osub.add_parser("remove", help="Remove the manual rank for a venue")
    p_remove.add_argument("title")
    p_get = osub.add_parser("get", help="Show the manual rank for a venue")
    p_get.add_argument("title")
    osub.add_parser("list", help="List all manual overrides")
    osub.add_parser("clear", help="Remove every manual override")

    sub.add_parser("sources", help="List ranking sources")

    return parser.parse_args(argv)


def build_config(args) -> Config:
    config = Config()
    if args.data_dir:
        config.data_dir = Path(args.data_dir)
    if args.prefs:
        config.prefs_file = Path(args.prefs)
    if args.no_core:
        config.enable_core = False
    if args.verbose:
        config.verbose = True
    return config


def read_titles(path_str: str) -> list[str]:
    path = Path(path_str)
    if not path.is_file():
        console.print(f"[red]✗ File not found: {escape(path_str)}[/red]")
        sys.exit(1)
    return path.read_text(encoding="utf-8", errors="replace").splitlines()


def cmd_resolve(args, resolver, reporter):
    for title in args.titles:
        trace = MatchTrace() if args.debug else None
        rank = resolver.resolve(title, trace)
        reporter.render_resolution(title, rank, overridden=resolver.has_override(title))
        if trace is not None:
            reporter.render_trace(title, trace.messages)


def cmd_check(args, resolver, reporter, config):
    titles = read_titles(args.file)
    if not titles:
        console.print("[yellow]⚠ No titles to check[/yellow]")
        return
    console.print(f"\n[bold green]✓[/bold green] Checking [bold]{len(titles)}[/bold] title(s)\n")
    summary = resolver.check(titles)
    reporter.render_check_summary(summary, not_found_limit=config.not_found_display_limit)
    if args.export:
        reporter.export_json(summary, args.export)
        console.print(f"\n[bold green]✓[/bold green] Results exported to [cyan]{args.export}[/cyan]")


def cmd_override(args, resolver, reporter):
    if args.action == "set":
        rank = args.rank.strip()
        if not rank:
            console.print("[red]✗ Rank must not be empty[/red]")
            sys.exit(1)
        resolver.set_override(args.title, rank)
        console.print(f'[bold green]✓[/bold green] Set ranking for "{escape(args.title)}": [bold]{escape(rank)}[/bold]')
    elif args.action == "remove":
        if not resolver.has_override(args.title):
            console.print(f'[yellow]⚠ No manual ranking for "{escape(args.title)}"[/yellow]')
            return
        resolver.remove_override(args.title)
        console.print(f'[bold green]✓[/bold green] Removed manual ranking for "{escape(args.title)}"')
    elif args.action == "get":
        rank = resolver.get_override(args.title)
        reporter.render_resolution(args.title, rank, overridden=rank is not None)
    elif args.action == "list":
        reporter.render_overrides(resolver.overrides.items())
    elif args.action == "clear":
        count = resolver.override_count()
        resolver.clear_overrides()
        console.print(f"[bold green]✓[/bold green] Cleared {count} manual ranking{'s' if count != 1 else ''}")


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)
    try:
        config.validate()
    except ValueError as e:
        console.print(f"[red]✗ Invalid configuration: {e}[/red]")
        sys.exit(1)

    try:
        resolver = build_resolver(config)
    except ReferenceDataError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    reporter = TerminalReporter(console)

    if args.command == "resolve":
        cmd_resolve(args, resolver, reporter)
    elif args.command == "check":
        cmd_check(args, resolver, reporter, config)
    elif args.command == "override":
        cmd_override(args, resolver, reporter)
    elif args.command == "sources":
        reporter.render_sources(list(resolver.registry))


if __name__ == "__main__":
    main()
