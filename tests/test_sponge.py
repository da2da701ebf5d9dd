import pytest
from hypothesis import given, strategies as st

from tip5hash.field import BFieldElement
from tip5hash.sponge import RATE, Sponge


class RecordingSponge(Sponge):
    def __init__(self):
        self.chunks = []

    @classmethod
    def init(cls):
        return cls()

    def absorb(self, chunk):
        chunk = tuple(chunk)
        if len(chunk) != self.RATE:
            raise ValueError("wrong chunk length")
        self.chunks.append(chunk)

    def squeeze(self):
        return self.chunks[-1] if self.chunks else (BFieldElement.zero(),) * self.RATE


def _elements(n):
    return [BFieldElement.new(i + 2) for i in range(n)]


def test_absorbed_chunks_have_rate_ten():
    sponge = RecordingSponge.init()
    sponge.pad_and_absorb_all(_elements(23))
    assert RATE == 10
    assert Sponge.RATE == RATE
    assert len(sponge.chunks) == 3
    assert all(len(chunk) == 10 for chunk in sponge.chunks)


def test_sponge_is_abstract():
    with pytest.raises(TypeError):
        Sponge()


def test_empty_input_pads_to_single_chunk():
    sponge = RecordingSponge.init()
    sponge.pad_and_absorb_all([])
    one, zero = BFieldElement.one(), BFieldElement.zero()
    assert sponge.chunks == [(one,) + (zero,) * (RATE - 1)]


def test_nine_elements_fill_one_chunk():
    sponge = RecordingSponge.init()
    items = _elements(RATE - 1)
    sponge.pad_and_absorb_all(items)
    assert sponge.chunks == [tuple(items) + (BFieldElement.one(),)]


def test_full_chunk_gets_extra_padding_chunk():
    sponge = RecordingSponge.init()
    items = _elements(RATE)
    sponge.pad_and_absorb_all(items)
    one, zero = BFieldElement.one(), BFieldElement.zero()
    assert sponge.chunks == [tuple(items), (one,) + (zero,) * (RATE - 1)]


@given(st.lists(st.integers(0, BFieldElement.P - 1), max_size=45))
def test_padding_invariants(values):
    items = [BFieldElement.new(v) for v in values]
    sponge = RecordingSponge.init()
    sponge.pad_and_absorb_all(iter(items))
    flat = [e for chunk in sponge.chunks for e in chunk]
    assert len(flat) % RATE == 0
    assert len(items) < len(flat) <= len(items) + RATE
    assert flat[: len(items)] == items
    assert flat[len(items)] == BFieldElement.one()
    assert all(e.is_zero() for e in flat[len(items) + 1 :])