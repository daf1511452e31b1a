"""Rich renderables for parse outcomes."""

from __future__ import annotations

import dataclasses
from typing import Any
from uuid import UUID

from rich.table import Table
from rich.text import Text

from admap.core.outcome import ParseOutcome, ParseResults
from admap.ui.palette import PALETTE, Palette


def format_field(value: Any) -> str:
    """Short display form for one decoded field value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return value.hex(" ") if value else "(empty)"
    if isinstance(value, tuple):
        if value and all(isinstance(v, bool) for v in value):
            return "".join("1" if v else "0" for v in value)
        return "[" + ", ".join(format_field(v) for v in value) + "]"
    if isinstance(value, int):
        return f"{value} ({value:#x})"
    return repr(value) if isinstance(value, str) else str(value)


def value_text(value: Any, palette: Palette = PALETTE) -> Text:
    """name=value pairs for a decoded data type or descriptor."""
    text = Text()
    items = [f for f in dataclasses.fields(value) if f.name != "length"]
    for i, f in enumerate(items):
        if i:
            text.append(", ", style=palette.parsed_punct)
        text.append(f.name, style=palette.parsed_name)
        text.append("=", style=palette.parsed_punct)
        text.append(format_field(getattr(value, f.name)), style=palette.parsed_value)
    return text


def outcome_text(outcome: ParseOutcome, palette: Palette = PALETTE) -> Text:
    if outcome.ok:
        return value_text(outcome.value, palette)
    style = palette.unsupported_fg if outcome.unsupported else palette.parsed_error
    text = Text()
    text.append(f"{type(outcome.error).__name__}: {outcome.error.message}", style=style)
    if outcome.raw:
        text.append("  ", style=palette.parsed_punct)
        text.append(outcome.raw.hex(" "), style=palette.raw_bytes_fg)
    return text


def _type_name(outcome: ParseOutcome) -> str:
    if outcome.ok:
        return type(outcome.value).__name__
    return "?"


def results_table(results: ParseResults, palette: Palette = PALETTE, title: str | None = None) -> Table:
    """One row per record: offset, tag, type, length, value or error."""
    table = Table(title=title, header_style=palette.header, border_style=palette.panel_border)
    table.add_column("#", style=palette.parsed_index, justify="right")
    table.add_column("Offset", style=palette.parsed_offset)
    table.add_column("Tag", style=palette.parsed_type)
    table.add_column("Type", style=palette.parsed_type)
    table.add_column("Len", justify="right")
    table.add_column("Value")

    for i, outcome in enumerate(results):
        tag = "-" if outcome.tag is None else f"0x{outcome.tag:02X}"
        length = str(outcome.raw[0]) if outcome.raw else "-"
        table.add_row(
            str(i),
            f"0x{outcome.offset:04X}",
            tag,
            _type_name(outcome),
            length,
            outcome_text(outcome, palette),
        )
    return table


def descriptor_text(uuid16: int, outcome: ParseOutcome, palette: Palette = PALETTE) -> Text:
    text = Text()
    text.append(f"0x{uuid16:04X}", style=palette.parsed_offset)
    text.append(" ", style=palette.parsed_punct)
    text.append(_type_name(outcome), style=palette.parsed_type)
    text.append(": ", style=palette.parsed_punct)
    text.append_text(outcome_text(outcome, palette))
    return text


def summary_text(results: ParseResults, palette: Palette = PALETTE) -> Text:
    failed = len(results.failures())
    text = Text()
    text.append(f"{len(results)} records", style=palette.parsed_name)
    text.append(", ", style=palette.parsed_punct)
    if failed:
        text.append(f"{failed} failed", style=palette.parsed_error)
    else:
        text.append("all decoded", style=palette.ok_fg)
    return text
