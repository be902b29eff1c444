"""gutterdiff CLI — Typer application with classify, show, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gutterdiff import __version__

app = typer.Typer(
    name="gutterdiff",
    help="Classify git diffs into added, modified and deleted gutter markers.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gutterdiff.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load_config(root: Path, override: Optional[str], format: Optional[str]):
    """Load config and apply the --format override, exit 2 on failure."""
    from gutterdiff.config.loader import ConfigError, load_config
    from gutterdiff.config.schema import OUTPUT_FORMATS

    try:
        cfg = load_config(root, override)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    return cfg


def _relative_to_repo(repo_root: Path, path: str) -> str:
    """Return *path* relative to *repo_root* in posix form, exit 2 if outside."""
    resolved = (Path.cwd() / path).resolve()
    try:
        return resolved.relative_to(repo_root.resolve()).as_posix()
    except ValueError:
        console.print(f"[bold red]Error:[/bold red] {path} is outside the repository")
        raise typer.Exit(code=2)


# ── classify ──────────────────────────────────────────────────────────────────


@app.command()
def classify(
    diff_file: Optional[str] = typer.Argument(None, help="Diff file to read; '-' or omitted reads stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gutterdiff.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
) -> None:
    """Classify a prefix-encoded diff read from a file or stdin."""
    from gutterdiff.diff.classifier import classify as run_classify
    from gutterdiff.output import json_report, terminal

    cfg = _load_config(Path.cwd(), config, format)

    if diff_file is None or diff_file == "-":
        diff_text = sys.stdin.read()
    else:
        p = Path(diff_file)
        if not p.is_file():
            console.print(f"[bold red]Error:[/bold red] diff file not found: {diff_file}")
            raise typer.Exit(code=2)
        diff_text = p.read_bytes().decode("utf-8", errors="replace")

    parsed = run_classify(diff_text)
    label = None if diff_file in (None, "-") else diff_file

    if cfg.output.format == "json":
        print(json_report.render(parsed, path=label))
    else:
        terminal.render_summary(parsed, markers=cfg.markers, path=label)

    if output:
        Path(output).write_text(json_report.render(parsed, path=label), encoding="utf-8")

    raise typer.Exit(code=0)


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    path: str = typer.Argument(..., help="File in the current repository"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gutterdiff.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    raw: bool = typer.Option(False, "--raw", help="Print the encoded diff instead of classifying it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Show a file from the working tree with its change gutter."""
    from gutterdiff.config.loader import find_config_file
    from gutterdiff.diff.classifier import classify as run_classify
    from gutterdiff.git.adapter import GitError, get_file_diff, read_lines
    from gutterdiff.output import json_report, terminal

    repo_root = _resolve_repo_root()
    cfg = _load_config(repo_root, config, format)
    rel_path = _relative_to_repo(repo_root, path)

    if verbose:
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        console.print(f"[dim]Config: {find_config_file(repo_root, config) or 'defaults'}[/dim]")
        console.print(f"[dim]File: {rel_path}[/dim]")

    try:
        diff_text = get_file_diff(
            repo_root,
            rel_path,
            context_lines=cfg.git.context_lines,
            include_staged=cfg.git.include_staged,
            timeout=cfg.git.timeout,
        )
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Diff size: {len(diff_text.splitlines())} lines[/dim]")

    if raw:
        print(diff_text)
        raise typer.Exit(code=0)

    parsed = run_classify(diff_text)

    if cfg.output.format == "json":
        print(json_report.render(parsed, path=rel_path))
        raise typer.Exit(code=0)

    full_path = repo_root / rel_path
    if full_path.is_file():
        lines = read_lines(full_path)
        terminal.render_file(
            parsed,
            lines,
            markers=cfg.markers,
            path=rel_path,
            show_content=cfg.output.show_content,
            show_summary=cfg.output.show_summary,
        )
    else:
        # Deleted from the working tree; nothing to draw a gutter against
        terminal.render_summary(parsed, markers=cfg.markers, path=rel_path)

    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .gutterdiff.toml in the repo root."""
    from gutterdiff.config.defaults import DEFAULT_TOML

    repo_root = _resolve_repo_root()
    config_path = repo_root / ".gutterdiff.toml"

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  .gutterdiff.toml already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gutterdiff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gutterdiff — classify git diffs into gutter markers."""
