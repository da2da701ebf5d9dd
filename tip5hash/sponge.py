"""The sponge construction and the domains that separate hashing modes."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from itertools import chain, islice, repeat
from typing import ClassVar, Iterable, Iterator, Sequence

from .field import BFieldElement

RATE = 10


class Domain(enum.Enum):
    """Mode of hashing, fixing how the sponge's capacity is initialised."""

    VARIABLE_LENGTH = enum.auto()
    """For objects that may serialise to more than ``RATE`` elements."""

    FIXED_LENGTH = enum.auto()
    """For objects that always fit in ``RATE`` elements, such as digest pairs."""


def _chunked(items: Iterable[BFieldElement], size: int) -> Iterator[tuple[BFieldElement, ...]]:
    iterator = iter(items)
    while chunk := tuple(islice(iterator, size)):
        yield chunk


class Sponge(ABC):
    """A cryptographic sponge built on a permutation."""

    RATE: ClassVar[int] = RATE

    @classmethod
    @abstractmethod
    def init(cls) -> Sponge:
        """Return a sponge in its initial variable-length state."""

    @abstractmethod
    def absorb(self, chunk: Sequence[BFieldElement]) -> None:
        """Absorb exactly ``RATE`` elements."""

    @abstractmethod
    def squeeze(self) -> tuple[BFieldElement, ...]:
        """Produce ``RATE`` elements."""

    def pad_and_absorb_all(self, elements: Iterable[BFieldElement]) -> None:
        """Pad with ``[1, 0, 0, ...]`` to a multiple of ``RATE`` and absorb it all."""
        items = list(elements)
        padded_length = -(-(len(items) + 1) // self.RATE) * self.RATE
        padding = chain((BFieldElement.one(),), repeat(BFieldElement.zero()))
        padded = islice(chain(items, padding), padded_length)
        for chunk in _chunked(padded, self.RATE):
            self.absorb(chunk)