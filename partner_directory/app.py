"""Typer CLI entrypoint for the partner directory."""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn
from rich import box
from rich.console import Console
from rich.table import Table

from .bootstrap import AppState, build_state
from .logging_conf import error_log_path, service_log_path, tail_log
from .pipeline import RefreshResult
from .service import Page
from .triangle import render_triangle

app = typer.Typer(
    help="Partner directory: fetch, join and serve partner solutions.",
    no_args_is_help=True,
    rich_markup_mode=None,
)
log_app = typer.Typer(
    name="log",
    help="Inspect service log files.",
    no_args_is_help=True,
    rich_markup_mode=None,
)

console = Console()


def _get_state(ctx: typer.Context) -> AppState:
    options = ctx.ensure_object(dict)
    state = options.get("state")
    if state is None:
        state = build_state(verbose=options.get("verbose", False))
        options["state"] = state
    return state


def _render_refresh_table(result: RefreshResult, cached: int) -> Table:
    table = Table(title="Refresh summary", box=box.SIMPLE_HEAD, show_header=False)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("Status", result.status)
    table.add_row("Partners fetched", str(result.partner_count))
    table.add_row("Solutions fetched", str(result.solution_count))
    table.add_row("Partners with solutions", str(result.with_solutions))
    table.add_row("Published", "yes" if result.published else "no")
    table.add_row("Cached records", str(cached))
    table.add_row("Duration (s)", f"{result.duration:.2f}")
    if result.reason:
        table.add_row("Reason", result.reason)
    return table


def _render_page_table(page: Page) -> Table:
    table = Table(
        title=f"Partners · page {page.number + 1} of {max(page.total_pages, 1)} · {page.total} total",
        box=box.SIMPLE_HEAD,
    )
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Partner", style="cyan")
    table.add_column("Level", style="magenta")
    table.add_column("Type", style="yellow")
    table.add_column("Solutions", style="green", overflow="fold")
    for item in page.items:
        table.add_row(
            item.partner_id or "-",
            item.partner_name or "-",
            item.partner_level or "-",
            item.partner_type or "-",
            ", ".join(solution.display_name or "?" for solution in item.solutions) or "-",
        )
    return table


app.add_typer(log_app, name="log", help="View log files")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging", is_flag=True),
) -> None:
    ctx.ensure_object(dict)["verbose"] = verbose


@app.command("serve", help="Run the HTTP API with the periodic refresh.")
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
) -> None:
    from .api import create_app

    state = _get_state(ctx)
    api = create_app(state)
    uvicorn.run(
        api,
        host=host or state.settings.api.host,
        port=port or state.settings.api.port,
    )


@app.command("refresh", help="Run the fetch and join pipeline once.")
def refresh(ctx: typer.Context) -> None:
    state = _get_state(ctx)
    try:
        result = state.driver.refresh_once()
    finally:
        state.close()
    console.print(_render_refresh_table(result, len(state.cache)))
    if not result.ok:
        raise typer.Exit(code=1)


@app.command("show", help="Refresh once and print one page of partners.")
def show(
    ctx: typer.Context,
    page: int = typer.Option(0, "--page", min=0, help="Zero-based page number"),
    size: int = typer.Option(10, "--size", min=1, help="Page size"),
    has_solutions: bool = typer.Option(
        False, "--has-solutions", help="Only partners with solutions", is_flag=True
    ),
) -> None:
    state = _get_state(ctx)
    try:
        result = state.driver.refresh_once()
    finally:
        state.close()
    if not result.ok:
        console.print(f"Refresh failed: {result.reason}", style="red")
        raise typer.Exit(code=1)
    view = state.queries.get_page(page * size, size, has_solutions_only=has_solutions)
    console.print(_render_page_table(view))


@app.command("triangle", help="Print a right-angled ASCII triangle.")
def triangle(
    height: int = typer.Option(3, "--height", help="Number of rows"),
    base: int = typer.Option(4, "--base", help="Stars on the last row"),
) -> None:
    try:
        rows = render_triangle(height, base)
    except ValueError as exc:
        console.print(f"Error: {exc}", style="red")
        raise typer.Exit(code=1)
    for row in rows:
        console.print(row, highlight=False)


@log_app.command("show", help="Print the last lines of the service log.")
def log_show(
    tail: int = typer.Option(100, "--tail", help="Number of lines"),
    errors: bool = typer.Option(False, "--errors", help="Show the error log", is_flag=True),
) -> None:
    path = error_log_path() if errors else service_log_path()
    lines = tail_log(path, tail)
    if not lines:
        console.print(f"No log entries in {path}", style="yellow")
        return
    for line in lines:
        console.print(line.rstrip("\n"), highlight=False, markup=False)


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
