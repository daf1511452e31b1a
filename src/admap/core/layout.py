"""YAML-driven wire layouts for data types and descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from admap.core.errors import LayoutError
from admap.core.fields import INT_SIZES, UUID_SIZES

LAYOUTS_PATH = Path(__file__).with_name("layouts.yaml")

# Types that always occupy the rest of the payload
TAIL_TYPES = {"utf8", "list"}
# Types that are fixed with `length`, otherwise a tail
BLOCK_TYPES = {"bytes", "bits"}
LIST_ELEMENTS = {**INT_SIZES, **UUID_SIZES}


@dataclass(frozen=True)
class FieldDef:
    """One field of a wire layout."""

    name: str
    type: str
    length: int | None = None  # byte count for fixed bytes/bits blocks
    element: str | None = None  # element type for lists

    @property
    def size(self) -> int | None:
        """Fixed wire size in bytes, or None for the variable tail."""
        if self.type in INT_SIZES:
            return INT_SIZES[self.type]
        if self.type in UUID_SIZES:
            return UUID_SIZES[self.type]
        if self.type in BLOCK_TYPES:
            return self.length
        return None

    @property
    def element_size(self) -> int | None:
        if self.element is None:
            return None
        return LIST_ELEMENTS[self.element]


@dataclass(frozen=True)
class Layout:
    """Wire layout for one data type (keyed by tag) or descriptor (keyed by UUID)."""

    name: str
    fields: tuple[FieldDef, ...]
    tag: int | None = None
    uuid: int | None = None
    exact: bool = False  # descriptor value must be exactly fixed_size bytes
    custom: bool = False  # payload encoded by hand in Python

    @property
    def fixed_size(self) -> int:
        return sum(f.size for f in self.fields if f.size is not None)

    @property
    def tail(self) -> FieldDef | None:
        for f in self.fields:
            if f.size is None:
                return f
        return None


@dataclass(frozen=True)
class LayoutTable:
    data_types: dict[str, Layout]
    descriptors: dict[str, Layout]


def _parse_field(owner: str, spec: Any, errors: list[str]) -> FieldDef | None:
    if not isinstance(spec, dict) or "name" not in spec or "type" not in spec:
        errors.append(f"{owner}: each field needs 'name' and 'type'")
        return None
    name = spec["name"]
    ftype = spec["type"]
    length = spec.get("length")
    element = spec.get("element")

    if ftype not in INT_SIZES and ftype not in UUID_SIZES and ftype not in TAIL_TYPES | BLOCK_TYPES:
        errors.append(f"{owner}.{name}: unknown field type '{ftype}'")
        return None
    if length is not None:
        if ftype not in BLOCK_TYPES:
            errors.append(f"{owner}.{name}: length only applies to bytes/bits")
            return None
        if not isinstance(length, int) or length <= 0:
            errors.append(f"{owner}.{name}: length must be a positive int")
            return None
    if ftype == "list":
        if element not in LIST_ELEMENTS:
            errors.append(f"{owner}.{name}: list element must be one of {sorted(LIST_ELEMENTS)}")
            return None
    elif element is not None:
        errors.append(f"{owner}.{name}: element only applies to list")
        return None
    return FieldDef(name=name, type=ftype, length=length, element=element)


def _parse_layout(name: str, spec: Any, key: str, errors: list[str]) -> Layout | None:
    if not isinstance(spec, dict):
        errors.append(f"{name}: layout must be a mapping")
        return None
    ident = spec.get(key)
    limit = 0xFF if key == "tag" else 0xFFFF
    if not isinstance(ident, int) or not 0 <= ident <= limit:
        errors.append(f"{name}: {key} must be an int in 0..{limit:#x}")
        return None

    custom = spec.get("codec") == "custom"
    fields: list[FieldDef] = []
    for field_spec in spec.get("fields", []) or []:
        fd = _parse_field(name, field_spec, errors)
        if fd is not None:
            fields.append(fd)
    if not custom and not fields:
        errors.append(f"{name}: fields must be a non-empty list (or codec: custom)")
        return None

    tails = [f.name for f in fields if f.size is None]
    if len(tails) > 1:
        errors.append(f"{name}: at most one variable-length field, got {', '.join(tails)}")
        return None

    exact = bool(spec.get("exact", False))
    if exact and tails:
        errors.append(f"{name}: exact layouts cannot have a variable-length field")
        return None

    return Layout(
        name=name,
        fields=tuple(fields),
        tag=ident if key == "tag" else None,
        uuid=ident if key == "uuid" else None,
        exact=exact,
        custom=custom,
    )


def _parse_section(data: dict, section: str, key: str, errors: list[str]) -> dict[str, Layout]:
    raw = data.get(section) or {}
    if not isinstance(raw, dict):
        errors.append(f"{section} must be a mapping of class name -> layout")
        return {}
    layouts: dict[str, Layout] = {}
    seen: dict[int, str] = {}
    for name, spec in raw.items():
        layout = _parse_layout(name, spec, key, errors)
        if layout is None:
            continue
        ident = layout.tag if key == "tag" else layout.uuid
        if ident in seen:
            errors.append(f"{name}: duplicate {key} {ident:#x} (already used by {seen[ident]})")
            continue
        seen[ident] = name
        layouts[name] = layout
    return layouts


def load_layouts(text: str) -> LayoutTable:
    """Parse and validate a layout table.

    Raises:
        LayoutError: With every problem found, not just the first
    """
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise LayoutError([f"YAML parse error: {e}"]) from None

    if not isinstance(data, dict):
        raise LayoutError(["Top-level YAML must be a mapping (use 'data_types' and 'descriptors')."])

    errors: list[str] = []
    data_types = _parse_section(data, "data_types", "tag", errors)
    descriptors = _parse_section(data, "descriptors", "uuid", errors)
    if errors:
        raise LayoutError(errors)
    return LayoutTable(data_types=data_types, descriptors=descriptors)


@lru_cache(maxsize=1)
def default_layouts() -> LayoutTable:
    """The packaged layout table, loaded once per process."""
    return load_layouts(LAYOUTS_PATH.read_text(encoding="utf-8"))
