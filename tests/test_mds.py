import pytest
from hypothesis import given
from hypothesis import strategies as st

from tip5hash.mds import generated_function

MASK = (1 << 64) - 1
words = st.integers(min_value=0, max_value=MASK)
vectors = st.lists(words, min_size=16, max_size=16)


def test_zero_maps_to_zero():
    assert generated_function([0] * 16) == [0] * 16


@given(vectors)
def test_outputs_are_64_bit_words(vector):
    result = generated_function(vector)
    assert len(result) == 16
    assert all(0 <= word <= MASK for word in result)


@given(vectors, vectors)
def test_additive(a, b):
    summed = [(x + y) & MASK for x, y in zip(a, b)]
    expected = [(x + y) & MASK for x, y in zip(generated_function(a), generated_function(b))]
    assert generated_function(summed) == expected


@given(vectors, words)
def test_scalar_multiplication(vector, scalar):
    scaled = [(x * scalar) & MASK for x in vector]
    expected = [(y * scalar) & MASK for y in generated_function(vector)]
    assert generated_function(scaled) == expected


@given(vectors)
def test_negation(vector):
    negated = [(-x) & MASK for x in vector]
    expected = [(-y) & MASK for y in generated_function(vector)]
    assert generated_function(negated) == expected


def test_input_is_not_modified():
    vector = list(range(16))
    generated_function(vector)
    assert vector == list(range(16))


@pytest.mark.parametrize("length", [0, 15, 17])
def test_wrong_length_raises(length):
    with pytest.raises(ValueError):
        generated_function([0] * length)


def test_out_of_range_word_raises():
    with pytest.raises(ValueError):
        generated_function([1 << 64] + [0] * 15)