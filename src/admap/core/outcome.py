"""Per-record parse outcomes and the ordered collection the scanner returns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, TypeVar, overload

from admap.core.errors import CodecError, ErrorKind

V = TypeVar("V")


@dataclass(frozen=True)
class ParseOutcome:
    """Result of decoding one record: a value, or the error and the raw bytes.

    `tag` is the AD type byte (or the 16-bit UUID for descriptors) when it
    could be read; `offset` is where the record starts in the scanned payload.
    """

    value: Any = None
    error: CodecError | None = None
    raw: bytes = b""
    offset: int = 0
    tag: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def unsupported(self) -> bool:
        return self.error is not None and self.error.kind is ErrorKind.UNSUPPORTED_TAG

    def is_type(self, cls: type) -> bool:
        return self.ok and isinstance(self.value, cls)

    def unwrap(self) -> Any:
        """Return the decoded value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


@dataclass(frozen=True)
class ParseResults(Sequence[ParseOutcome]):
    """Immutable outcomes in record order, one per record encountered."""

    outcomes: tuple[ParseOutcome, ...] = ()

    @overload
    def __getitem__(self, index: int) -> ParseOutcome: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ParseOutcome, ...]: ...

    def __getitem__(self, index):
        return self.outcomes[index]

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[ParseOutcome]:
        return iter(self.outcomes)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    def values(self) -> list[Any]:
        return [o.value for o in self.outcomes if o.ok]

    def failures(self) -> list[ParseOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def of_type(self, cls: type[V]) -> list[V]:
        return [o.value for o in self.outcomes if o.is_type(cls)]

    def first(self, cls: type[V]) -> V | None:
        for o in self.outcomes:
            if o.is_type(cls):
                return o.value
        return None
