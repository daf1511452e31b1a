from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from admap.core.scanner import parse_advertising_data, parse_descriptor
from admap.ui.palette import PALETTES
from admap.ui.render import descriptor_text, results_table, summary_text


def parse_hex(text: str) -> bytes:
    """Hex string to bytes; spaces, colons, dashes and a 0x prefix are ignored.

    Raises:
        ValueError: If the remaining text is not valid hex
    """
    cleaned = text.strip()
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    for sep in (" ", ":", "-", "\t"):
        cleaned = cleaned.replace(sep, "")
    return bytes.fromhex(cleaned)


def parse_uuid16(text: str) -> int:
    value = int(text, 16)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"not a 16-bit UUID: {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="admap", description="Decode Bluetooth LE advertising data")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--theme", choices=sorted(PALETTES), default="default", help="Colour theme"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ad = sub.add_parser("ad", help="Decode an advertising (AD/EIR) payload")
    ad.add_argument("hex", help="Payload as hex, e.g. 020106")

    desc = sub.add_parser("descriptor", help="Decode one GATT descriptor value")
    desc.add_argument("uuid", help="16-bit descriptor UUID in hex, e.g. 2902")
    desc.add_argument("hex", help="Descriptor value as hex")
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    console = console or Console()
    palette = PALETTES[args.theme]

    try:
        data = parse_hex(args.hex)
    except ValueError:
        print(f"admap: invalid hex: {args.hex}", file=sys.stderr)
        return 2

    if args.command == "descriptor":
        try:
            uuid16 = parse_uuid16(args.uuid)
        except ValueError:
            print(f"admap: invalid descriptor UUID: {args.uuid}", file=sys.stderr)
            return 2
        outcome = parse_descriptor(uuid16, data)
        console.print(descriptor_text(uuid16, outcome, palette))
        return 0 if outcome.ok else 1

    results = parse_advertising_data(data)
    console.print(results_table(results, palette))
    console.print(summary_text(results, palette))
    return 0 if results.ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
