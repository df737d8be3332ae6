"""CLI entrypoint.

Reference driver:
- fileacq demo

Utilities:
- fileacq acquire / read
- fileacq doctor
- fileacq init

CONTRACT
- Inputs: Command line arguments (parsed by Typer)
- Outputs (required):
  - Exit code 0 on success, non-zero on failure
  - Console output (stdout/stderr) describing results
- Invariants:
  - Library errors are turned into exit codes here and nowhere else
  - `demo` exits with PANIC_EXIT_CODE on any unrecovered error
- Failure:
  - Invalid arguments raise Typer exit/error
  - Invalid --config raises typer.BadParameter
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .acquirer import FileAcquirer
from .capability import LocalFilesystem
from .config import FileAcqConfig, load_config
from .doctor import doctor_report
from .errors import FileAcqError
from .handle import decode_content, read_all
from .propagate import read_file_or_fail, read_file_or_fail_explicit
from .recovery import open_or_create, open_or_create_fallback
from .reports import AcquireReport, ReadReport, failure_fields

# Same status an aborting process reports.
PANIC_EXIT_CODE = 101

app = typer.Typer(add_completion=False, help="Open-or-create file acquisition with typed failures.")

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool):
    if value:
        console.print(f"fileacq version: {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.enable("fileacq")
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log open/create decisions."),
    config: Path | None = typer.Option(None, "--config", help="fileacq.yaml config file."),
):
    _configure_logging(verbose)
    if config is None:
        ctx.obj = FileAcqConfig()
        return
    if not config.exists():
        raise typer.BadParameter(f"Config file not found: {config}")
    try:
        ctx.obj = load_config(config)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _cfg(ctx: typer.Context) -> FileAcqConfig:
    return ctx.obj if isinstance(ctx.obj, FileAcqConfig) else FileAcqConfig()


def _acquirer(cfg: FileAcqConfig) -> FileAcquirer:
    return FileAcquirer(LocalFilesystem(create_mode=cfg.io.create_mode))


_DIR_OPTION = typer.Option(
    Path("."),
    "--dir",
    help="Directory to work in (default: current dir).",
)
_JSON_OPTION = typer.Option(
    False,
    "--json",
    help="Print a JSON report.",
)


@app.command()
def demo(ctx: typer.Context, directory: Path = _DIR_OPTION) -> None:
    """Run the open-or-create / propagate walkthrough; abort on unrecovered errors."""
    cfg = _cfg(ctx)
    acquirer = _acquirer(cfg)
    first = directory / cfg.demo.first_path
    second = directory / cfg.demo.second_path
    console.print("Hello, World!")
    try:
        with open_or_create(acquirer, first) as f:
            console.print(f"{escape(str(first))}: {'created' if f.created else 'opened'} (explicit)")
        with open_or_create_fallback(acquirer, second) as f:
            console.print(f"{escape(str(second))}: {'created' if f.created else 'opened'} (fallback)")

        with acquirer.try_acquire(first).unwrap():
            pass
        with acquirer.try_acquire(second).expect(f"Failed to open {second}"):
            pass

        u1 = read_file_or_fail_explicit(first, acquirer, encoding=cfg.io.encoding, chunk_size=cfg.io.chunk_size)
        console.print(f"u1 is {escape(str(u1))}")
        u2 = read_file_or_fail(first, acquirer, encoding=cfg.io.encoding, chunk_size=cfg.io.chunk_size)
        console.print(f"u2 is {escape(str(u2))}")
    except FileAcqError as e:
        logger.warning(f"Unrecovered error: {e!r}")
        err_console.print(f"[bold red]aborting:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=PANIC_EXIT_CODE) from e


@app.command()
def acquire(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File to open."),
    create: bool = typer.Option(False, "--create/--no-create", help="Create the file if it is missing."),
    json_out: bool = _JSON_OPTION,
) -> None:
    """Open a file (optionally creating it) and report what happened."""
    outcome = _acquirer(_cfg(ctx)).try_acquire(path, create_if_missing=create)
    if outcome.ok:
        with outcome.unwrap() as h:
            report = AcquireReport(path=str(path), ok=True, created=h.created)
    else:
        report = AcquireReport(path=str(path), **failure_fields(outcome.error))

    if json_out:
        console.print_json(report.model_dump_json())
    elif report.ok:
        verb = "Created" if report.created else "Opened"
        console.print(f"[green]{verb}[/green] {escape(report.path)}")
    else:
        err_console.print(f"[red]{report.kind.value}[/red] {escape(report.message)}")
    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def read(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File to read."),
    json_out: bool = _JSON_OPTION,
) -> None:
    """Print a file's contents; never creates it."""
    cfg = _cfg(ctx)
    try:
        with _acquirer(cfg).acquire(path) as h:
            data = read_all(h, cfg.io.chunk_size)
        text = decode_content(data, path, cfg.io.encoding)
        report = ReadReport(path=str(path), ok=True, size_bytes=len(data), content=text)
    except FileAcqError as e:
        report = ReadReport(path=str(path), **failure_fields(e))

    if json_out:
        console.print_json(report.model_dump_json())
    elif report.ok:
        console.out(report.content, end="")
    else:
        err_console.print(f"[red]{report.kind.value}[/red] {escape(report.message)}")
    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def doctor(path: Path = typer.Argument(Path("hello.txt"), help="Target file.")) -> None:
    """Preflight checks for opening or creating a file."""
    report = doctor_report(path)
    table = Table(title="fileacq doctor")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")
    for item in report.items:
        table.add_row(item.name, item.status, escape(item.details))
    console.print(table)
    if report.ok:
        console.print("[green]OK[/green]")
    else:
        raise typer.Exit(code=2)


@app.command()
def init(
    directory: Path = _DIR_OPTION,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Write a fileacq.yaml template."""
    from .init import write_templates

    written = write_templates(directory, force=force)
    if written is None:
        console.print(f"[yellow]Kept existing[/yellow] {escape(str(directory / 'fileacq.yaml'))}")
    else:
        console.print(f"[green]Wrote[/green] {escape(str(written))}")


if __name__ == "__main__":
    app()
