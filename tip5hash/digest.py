"""The fixed-size result of hashing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator

from .field import BFieldElement


@dataclass(frozen=True)
class Digest:
    """Five field elements produced by hashing."""

    elements: tuple[BFieldElement, ...]

    LEN: ClassVar[int] = 5

    def __post_init__(self) -> None:
        elements = tuple(self.elements)
        if len(elements) != self.LEN:
            raise ValueError(
                f"a digest holds {self.LEN} elements, got {len(elements)}"
            )
        object.__setattr__(self, "elements", elements)

    def values(self) -> tuple[BFieldElement, ...]:
        return self.elements

    def __iter__(self) -> Iterator[BFieldElement]:
        return iter(self.elements)