"""Command-line interface for linkaudit."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .core.auditor import LinkAuditor
from .export import report_to_json, write_article_csv, write_page_csv
from .logging_config import setup_logging
from .models.config import AuditConfig, AuditMode
from .models.events import EventType
from .models.links import ArticleAnalysis, BatchReport, Document, PageScanResult


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="linkaudit",
        description="Classify the links of saved HTML pages and check where target links appear",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scan one saved page for a target link
  linkaudit page.html --base-url https://example.com --target /pricing

  # Check whether targets sit inside article text
  linkaudit --mode article https://blog.example.com/post=post.html --target /related

  # Export results
  linkaudit a.html b.html --base-url https://example.com --csv results.csv
        """,
    )

    parser.add_argument(
        "documents",
        nargs="*",
        metavar="[URL=]PATH",
        help="Saved HTML files, optionally prefixed with their page URL",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--base-url",
        "-u",
        type=str,
        default=None,
        help="Page URL used for files given without a URL prefix",
    )
    parser.add_argument(
        "--target",
        "-t",
        action="append",
        default=None,
        dest="targets",
        metavar="LINK",
        help="Target link to look for (repeatable)",
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in AuditMode],
        default=None,
        help="page: menu/footer/social scan, article: content vs. boilerplate (default: page)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML configuration file",
    )

    # Output
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--csv",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write a CSV export",
    )
    output_group.add_argument(
        "--json",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the full report as JSON",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress output",
    )

    return parser


def load_documents(specs: list[str], base_url: Optional[str], targets: list[str]) -> list[Document]:
    """
    Read HTML files into Documents.

    Each spec is ``PATH`` (page URL taken from ``base_url``) or
    ``URL=PATH``. The prefix is only split off when it is an http(s) URL,
    so paths containing ``=`` are read as they are.

    Raises:
        ValueError: If a file has no page URL
        OSError: If a file cannot be read
    """
    documents = []
    for spec in specs:
        url, sep, path = spec.rpartition("=")
        if not sep or urlparse(url).scheme not in ("http", "https"):
            url, path = base_url or "", spec
        if not url:
            raise ValueError(f"No page URL for {path}; use --base-url or URL=PATH")

        html = Path(path).read_text(encoding="utf-8", errors="replace")
        documents.append(Document(url=url, html=html, targets=tuple(targets)))
    return documents


def print_report(console: Console, report: BatchReport, mode: AuditMode) -> None:
    """Print a per-document table and the batch summary."""
    table = Table(title="Link audit")
    table.add_column("URL", overflow="fold")

    if mode == AuditMode.PAGE:
        for column in ("Menu", "Footer", "Social", "Emails", "Other", "Targets found"):
            table.add_column(column, justify="right")
    else:
        for column in ("Content", "Other", "In content", "Other only", "Link density"):
            table.add_column(column, justify="right")

    for result in report.results:
        if result.error:
            table.add_row(result.url, f"[red]{result.error}[/red]")
            continue

        counts = result.links.to_dict()["categories"]
        if isinstance(result, PageScanResult):
            found = sum(1 for lookup in result.lookups if lookup.found)
            table.add_row(
                result.url,
                str(len(counts["menu"])),
                str(len(counts["footer"])),
                str(len(counts["social"])),
                str(len(result.links.email_addresses)),
                str(len(counts["other-internal"]) + len(counts["other-external"])),
                f"{found}/{len(result.lookups)}",
            )
        elif isinstance(result, ArticleAnalysis):
            in_content = sum(1 for check in result.target_results if check.found_in_content)
            other_only = sum(
                1 for check in result.target_results if check.found_in_other and not check.found_in_content
            )
            table.add_row(
                result.url,
                str(len(result.links.content_links)),
                str(len(result.links.other_links)),
                str(in_content),
                str(other_only),
                f"{result.seo.link_density:.3f}",
            )

    console.print(table)
    console.print()
    console.print("[bold]Summary:[/bold]")
    for key, value in report.summary.to_dict().items():
        console.print(f"  {key.replace('_', ' ').capitalize()}: {value}")


def run_audit(args: argparse.Namespace) -> int:
    """Run the auditor with given arguments."""
    console = Console()

    if not args.documents:
        console.print("[red]Error:[/red] Please provide at least one HTML file")
        return 1

    try:
        config = AuditConfig.from_yaml_file(args.config) if args.config else AuditConfig()
        updates: dict = {}
        if args.mode:
            updates["mode"] = AuditMode(args.mode)
        if args.verbose:
            updates["log_level"] = "DEBUG"
        elif args.quiet:
            updates["log_level"] = "ERROR"
        if updates:
            config = config.model_copy(update=updates)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        return 1

    setup_logging(config.log_level, str(config.log_file) if config.log_file else None)

    try:
        documents = load_documents(args.documents, args.base_url, args.targets or [])
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    auditor = LinkAuditor(config)

    async def run() -> int:
        if args.quiet:
            async for _ in auditor.run(documents):
                pass
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                task = progress.add_task("Starting...", total=None)

                async for event in auditor.run(documents):
                    if event.type == EventType.DOCUMENT_STARTED:
                        progress.update(
                            task,
                            description=f"[cyan]Auditing {event.current}/{event.total}: {event.url}",
                        )
                    elif event.type == EventType.DOCUMENT_FAILED:
                        console.print(f"[red]Failed:[/red] {event.url} - {event.error}")
                    elif event.type == EventType.COMPLETED:
                        progress.update(task, description=f"[green]{event.message}")

        report = auditor.report
        if report is None:
            return 1

        if not args.quiet:
            print_report(console, report, config.mode)

        if args.csv:
            with args.csv.open("w", encoding="utf-8", newline="") as stream:
                if config.mode == AuditMode.ARTICLE:
                    write_article_csv(report, stream, config.export)
                else:
                    write_page_csv(report, stream, config.export)
        if args.json:
            args.json.write_text(report_to_json(report), encoding="utf-8")

        return 0 if auditor.stats.documents_failed == 0 else 1

    try:
        return asyncio.run(run())
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_audit(args)


if __name__ == "__main__":
    sys.exit(main())
