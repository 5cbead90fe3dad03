"""
CLI entrypoint.

doctor / cases / browsers for environment checks and listing.
run executes the home page cases once per browser kind and prints a table.
Skipped browsers never fail the run; any failed case exits 1.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core.cases import HOME_PAGE_CASES
from ..core.controller.runner import run_suite
from ..core.errors import UnknownBrowserError
from ..core.logs import configure_logging
from ..core.result import CaseOutcome
from ..core.settings import settings
from ..io.browsers import BrowserKind

app = typer.Typer(help="site-uitests CLI")
console = Console()

_STATUS_STYLE = {
    "passed": "[green]PASS[/]",
    "failed": "[red]FAIL[/]",
    "skipped": "[yellow]SKIP[/]",
}


@app.command("doctor")
def doctor() -> None:
    """Environment check: print the effective settings."""
    console.print("[bold green]site-uitests[/] environment")
    console.print(f"- site url: {settings.site_url or '(SITE_URL not set)'}")
    console.print(f"- browsers: {', '.join(settings.browsers) or '[]'}")
    console.print(f"- headless: {settings.headless}")
    console.print(f"- timeout:  {settings.default_timeout_seconds:g}s")
    console.print(f"- driver dir: {settings.driver_dir or Path.cwd()}")


@app.command("cases")
def cases() -> None:
    """List the compiled-in link/modal cases."""
    table = Table(title="Home Page Cases", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("link id")
    table.add_column("modal id")
    for i, case in enumerate(HOME_PAGE_CASES, start=1):
        table.add_row(str(i), case.link_id, case.modal_id)
    console.print(table)


@app.command("browsers")
def browsers() -> None:
    """List supported browser kinds and the Playwright engine behind each."""
    table = Table(title="Browser Kinds", show_header=True, header_style="bold")
    table.add_column("kind")
    table.add_column("engine")
    table.add_column("channel")
    for kind in BrowserKind:
        table.add_row(kind.value, kind.spec.engine, kind.spec.channel or "-")
    console.print(table)


@app.command("run")
def run(
    browser: Optional[List[str]] = typer.Option(
        None, "--browser", "-b", help="Browser kind; repeat for several (default: settings)"
    ),
    site_url: Optional[str] = typer.Option(None, "--site-url", help="Overrides SITE_URL"),
    headless: Optional[bool] = typer.Option(
        None, "--headless/--no-headless", help="Run browser headless"
    ),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Element lookup timeout (s)"),
    artifacts_dir: Optional[Path] = typer.Option(
        None, "--artifacts-dir", help="Where to save failure screenshots"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
) -> None:
    """
    Run every case against every browser kind.
    Exits 2 on an unknown browser or missing site url, 1 on any failed case.
    """
    configure_logging(log_level or settings.log_level)

    overrides: dict[str, object] = {}
    if headless is not None:
        overrides["headless"] = headless
    if timeout is not None:
        overrides["default_timeout_seconds"] = timeout
    if artifacts_dir is not None:
        overrides["artifacts_dir"] = artifacts_dir
    effective = settings.model_copy(update=overrides)

    url = site_url or effective.site_url
    if not url:
        typer.secho("[run] SITE_URL is not set (use --site-url)", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    kinds = browser or effective.browsers
    try:
        rows: list[CaseOutcome] = asyncio.run(run_suite(kinds, url, HOME_PAGE_CASES, effective))
    except UnknownBrowserError as e:
        typer.secho(f"[run] {e}", fg=typer.colors.RED)
        raise typer.Exit(code=2)

    table = Table(title="Run Results", show_header=True, header_style="bold")
    table.add_column("browser")
    table.add_column("case")
    table.add_column("result")
    table.add_column("detail")

    failures = 0
    for r in rows:
        detail = r.detail
        if not r.ok:
            failures += 1
            if r.artifact_path:
                detail = f"{detail} (artifact: {r.artifact_path})"
        table.add_row(r.browser, r.case_id, _STATUS_STYLE[r.status], detail)

    console.print(table)
    if failures:
        raise typer.Exit(code=1)
    typer.secho("[run] completed successfully", fg=typer.colors.GREEN)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
