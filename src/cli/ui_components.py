"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los comandos solo deciden *qué* mostrar (JSON, tabla o informe).

Todo se imprime como `Text`, nunca como markup: los datos de la API pueden
contener corchetes.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import typer
from rich.console import Console
from rich.text import Text

from adapters.json_exporter import to_json_text
from core.services.reports import Column, Report

MAX_COLUMN_WIDTH = 40

console = Console()
err_console = Console(stderr=True)


def print_success(out: Console, message: str) -> None:
    out.print(Text.assemble(("✓", "green"), " ", message), soft_wrap=True)


def print_error(out: Console, message: str) -> None:
    out.print(Text.assemble(("✗", "red"), " ", message), soft_wrap=True)


def print_config_hint(out: Console) -> None:
    out.print()
    out.print(Text("Run the following to configure:"))
    out.print(Text("  vatapi config set --api-key <key>", style="cyan"), soft_wrap=True)


def print_json(payload: Any) -> None:
    """Salida estructurada: JSON plano, sin estilos ni nada más."""

    typer.echo(to_json_text(payload))


def compute_column_widths(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[Column],
    *,
    max_width: int = MAX_COLUMN_WIDTH,
) -> list[int]:
    """Ancho = max(etiqueta, celdas), nunca más de `max_width`."""

    widths: list[int] = []
    for column in columns:
        width = len(column.label)
        for row in rows:
            width = max(width, len(column.cell(row)))
        widths.append(min(width, max_width))
    return widths


def render_table_lines(rows: Sequence[Mapping[str, Any]], columns: Sequence[Column]) -> tuple[str, str, list[str]]:
    """Devuelve (cabecera, separador, filas) ya alineadas."""

    widths = compute_column_widths(rows, columns)
    header = "  ".join(column.label.ljust(width) for column, width in zip(columns, widths))
    divider = "─" * len(header)
    lines = [
        "  ".join(column.cell(row)[:width].ljust(width) for column, width in zip(columns, widths))
        for row in rows
    ]
    return header, divider, lines


def print_table(out: Console, rows: Sequence[Mapping[str, Any]], columns: Sequence[Column]) -> None:
    if not rows:
        out.print(Text("No results found.", style="yellow"))
        return

    header, divider, lines = render_table_lines(rows, columns)
    out.print(Text(header, style="bold cyan"), soft_wrap=True)
    out.print(Text(divider, style="dim"), soft_wrap=True)
    for line in lines:
        out.print(Text(line), soft_wrap=True)
    out.print(Text(f"\n{len(rows)} result(s)", style="dim"))


def print_report(out: Console, report: Report) -> None:
    """Informe etiquetado: título, una línea por campo y una línea en blanco."""

    out.print(Text(f"\n{report.title}\n", style="bold"))
    width = max((len(line.label) for line in report.lines), default=0) + 2
    for line in report.lines:
        out.print(
            Text.assemble(f"{line.label}:".ljust(width), (line.value, line.style or "")),
            soft_wrap=True,
        )
    out.print()
