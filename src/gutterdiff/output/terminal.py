"""Rich terminal reporter — gutter view of a file and change summary."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gutterdiff.config.schema import MarkersConfig
from gutterdiff.diff.aggregator import all_changed
from gutterdiff.diff.models import GutterMarker, LineChange, ParsedDiff
from gutterdiff.output.markers import build_gutter_markers, line_decorations


def _glyph(change: LineChange, markers: MarkersConfig) -> Text:
    if change is LineChange.ADDED:
        return Text(markers.added, style=markers.added_style)
    if change is LineChange.MODIFIED:
        return Text(markers.modified, style=markers.modified_style)
    return Text(markers.deleted, style=markers.deleted_style)


def _style_for(change: LineChange, markers: MarkersConfig) -> str:
    return {
        LineChange.ADDED: markers.added_style,
        LineChange.MODIFIED: markers.modified_style,
        LineChange.DELETED: markers.deleted_style,
    }[change]


def _gutter_cells(
    gutter: List[GutterMarker], markers: MarkersConfig
) -> Dict[int, Text]:
    cells: Dict[int, Text] = {}
    for marker in gutter:
        cells.setdefault(marker.line, Text()).append_text(_glyph(marker.change, markers))
    return cells


def render_file(
    parsed: ParsedDiff,
    lines: Sequence[str],
    *,
    markers: Optional[MarkersConfig] = None,
    path: Optional[str] = None,
    show_content: bool = True,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print *lines* with a change gutter using Rich."""
    console = console or Console()
    markers = markers or MarkersConfig()

    gutter = build_gutter_markers(parsed, len(lines), clamp_deleted=True)
    cells = _gutter_cells(gutter, markers)
    decorations = line_decorations(parsed, len(lines))

    table = Table(
        title=path,
        show_header=False,
        show_edge=False,
        box=None,
        padding=(0, 1),
        title_style="bold",
    )
    table.add_column("gutter", width=2, no_wrap=True)
    table.add_column("line", justify="right", style="dim")
    if show_content:
        table.add_column("content", overflow="fold")

    for idx, content in enumerate(lines, start=1):
        change = decorations.get(idx)
        number = Text(str(idx), style=_style_for(change, markers) if change else "")
        row = [cells.get(idx, Text(" ")), number]
        if show_content:
            row.append(Text(content))
        table.add_row(*row)

    console.print(table)

    if show_summary:
        _print_summary(console, parsed)


def render_summary(
    parsed: ParsedDiff,
    *,
    markers: Optional[MarkersConfig] = None,
    path: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print the classified line numbers and change counts."""
    console = console or Console()
    markers = markers or MarkersConfig()
    if path:
        console.print(f"[bold]{path}[/bold]")
    for label, change, values in (
        ("added", LineChange.ADDED, parsed.added_lines),
        ("modified", LineChange.MODIFIED, parsed.modified_lines),
        ("deleted at", LineChange.DELETED, parsed.deleted_at_lines),
    ):
        if values:
            text = Text(f"{label}: ", style=_style_for(change, markers))
            text.append(", ".join(str(v) for v in values))
            console.print(text)
    _print_summary(console, parsed)


def _print_summary(console: Console, parsed: ParsedDiff) -> None:
    console.print()
    if parsed.is_empty:
        console.print("[bold green]No changes.[/bold green]")
        return
    console.print(f"[dim]Added:[/dim]     {len(parsed.added_lines)}")
    console.print(f"[dim]Modified:[/dim]  {len(parsed.modified_lines)}")
    console.print(f"[dim]Deleted:[/dim]   {len(parsed.deleted_at_lines)}")
    console.print(f"[dim]Changed lines:[/dim] {len(all_changed(parsed))}")
