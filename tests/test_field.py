import pytest
from hypothesis import given
from hypothesis import strategies as st

from tip5hash.field import BFieldElement, montyred

P = BFieldElement.P
values = st.integers(min_value=0, max_value=P - 1)
nonzero_values = st.integers(min_value=1, max_value=P - 1)


def test_montgomery_reduction():
    assert montyred(2_609_026_890_597_981_882) == 11_259_563_268_822_605_859


def test_montify():
    value = 12_045_832_659_793_544_965
    bfe = BFieldElement.new(value)
    assert bfe.raw_u64() == 9_712_864_734_344_745_984
    assert bfe.value() == value


def test_montyred_rejects_out_of_range():
    with pytest.raises(ValueError):
        montyred(1 << 128)
    with pytest.raises(ValueError):
        montyred(-1)


def test_new_rejects_out_of_range():
    with pytest.raises(ValueError):
        BFieldElement.new(1 << 64)


@given(values)
def test_value_round_trip(value):
    assert BFieldElement.new(value).value() == value


def test_new_reduces_modulo_p():
    assert BFieldElement.new(P).value() == 0
    assert BFieldElement.new(P + 5).value() == 5


def test_zero_and_one():
    assert BFieldElement.zero().is_zero()
    assert BFieldElement.one().is_one()
    assert not BFieldElement.one().is_zero()
    assert BFieldElement.zero().value() == 0
    assert BFieldElement.one().value() == 1


@given(values)
def test_raw_bytes_round_trip(value):
    element = BFieldElement.new(value)
    assert BFieldElement.from_raw_bytes(element.raw_bytes()) == element


def test_raw_bytes_little_endian():
    assert BFieldElement.from_raw_u64(1).raw_bytes() == b"\x01" + b"\x00" * 7


def test_from_raw_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        BFieldElement.from_raw_bytes(b"\x00" * 7)


@given(values)
def test_from_raw_u64_round_trip(value):
    element = BFieldElement.new(value)
    assert BFieldElement.from_raw_u64(element.raw_u64()) == element


@given(values, values)
def test_add_then_sub(a, b):
    x, y = BFieldElement.new(a), BFieldElement.new(b)
    assert ((x + y) - y).value() == a


@given(values, values)
def test_add_commutes(a, b):
    x, y = BFieldElement.new(a), BFieldElement.new(b)
    assert (x + y).value() == (y + x).value()


@given(values, values, values)
def test_distributive(a, b, c):
    x, y, z = BFieldElement.new(a), BFieldElement.new(b), BFieldElement.new(c)
    assert (x * (y + z)).value() == (x * y + x * z).value()


@given(values)
def test_negation(value):
    x = BFieldElement.new(value)
    assert (x + (-x)).value() == 0


def test_max_plus_one_wraps_to_zero():
    result = BFieldElement.new(BFieldElement.MAX) + BFieldElement.one()
    assert result.value() == 0


def test_zero_minus_one_is_max():
    assert (BFieldElement.zero() - BFieldElement.one()).value() == BFieldElement.MAX


@given(nonzero_values)
def test_inverse(value):
    x = BFieldElement.new(value)
    assert (x * x.inverse()).value() == 1


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        BFieldElement.zero().inverse()


@given(values, nonzero_values)
def test_division(a, b):
    x, y = BFieldElement.new(a), BFieldElement.new(b)
    assert ((x / y) * y).value() == a


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        BFieldElement.one() / BFieldElement.zero()


def test_equality_and_hash():
    assert BFieldElement.new(5) == BFieldElement.new(5)
    assert hash(BFieldElement.new(5)) == hash(BFieldElement.new(5))
    assert len({BFieldElement.new(5), BFieldElement.new(5), BFieldElement.new(6)}) == 2