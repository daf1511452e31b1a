from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    header: str
    panel_border: str
    parsed_name: str
    parsed_value: str
    parsed_index: str
    parsed_offset: str
    parsed_type: str
    parsed_punct: str
    parsed_error: str
    unsupported_fg: str
    raw_bytes_fg: str
    ok_fg: str


DEFAULT = Palette(
    header="#4c75c6",
    panel_border="#3b4252",
    parsed_name="#d8dee9",
    parsed_value="#ffffff",
    parsed_index="#5ea1ff",
    parsed_offset="#8892a0",
    parsed_type="#4c75c6",
    parsed_punct="#6b7280",
    parsed_error="#ff5555",
    unsupported_fg="#ffb86c",
    raw_bytes_fg="#ce9178",
    ok_fg="#10b981",
)

DIM = Palette(
    header="#888888",
    panel_border="#444444",
    parsed_name="#e0e0e0",
    parsed_value="#f0f0f0",
    parsed_index="#a0a0a0",
    parsed_offset="#777777",
    parsed_type="#888888",
    parsed_punct="#666666",
    parsed_error="#ff6666",
    unsupported_fg="#e6b673",
    raw_bytes_fg="#aaaaaa",
    ok_fg="#00bb66",
)

HIGH_CONTRAST = Palette(
    header="#00aaaa",
    panel_border="#888888",
    parsed_name="#ffffff",
    parsed_value="#ffffff",
    parsed_index="#00ffff",
    parsed_offset="#aaaaaa",
    parsed_type="#00aaaa",
    parsed_punct="#888888",
    parsed_error="#ff6666",
    unsupported_fg="#ffb000",
    raw_bytes_fg="#ff00ff",
    ok_fg="#00ff00",
)

PALETTES = {"default": DEFAULT, "dim": DIM, "high-contrast": HIGH_CONTRAST}

# Selected palette for now
PALETTE = DEFAULT
