# tip5hash

Tip5 is a hash function for use inside zero-knowledge proof systems. It works
over the prime field of order `p = 2^64 - 2^32 + 1`. It runs a sponge with a
16-element state and a rate of 10 elements, and it produces digests of 5 field
elements.

This package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tip5hash.field`: `BFieldElement` and the Montgomery reduction `montyred`.
- `tip5hash.digest`: `Digest`, a frozen holder of exactly five field elements.
- `tip5hash.mds`: `generated_function`, which multiplies 16 words by the
  circulant MDS matrix using wrapping 64-bit arithmetic.
- `tip5hash.sponge`: the `Domain` enum and the abstract `Sponge` base class.
- `tip5hash.tip5`: the `Tip5` sponge and its constants (`LOOKUP_TABLE`,
  `ROUND_CONSTANTS`, `MDS_MATRIX_FIRST_COLUMN`), plus `offset_fermat_cube_map`.

## Field elements

`BFieldElement` is an element of the base field. It is held internally in
Montgomery form.

```python
from tip5hash.field import BFieldElement

a = BFieldElement.new(5)
b = BFieldElement.new(7)

(a * b).value()                          # 35
(a - b).value()                          # p - 2
(a / b * b).value()                      # 5
a.inverse() * a == BFieldElement.one()   # True
```

- `value()` gives the canonical integer in `[0, p)`.
- `raw_u64()` and `raw_bytes()` give the Montgomery representation. The bytes are
  8 bytes in little-endian order.
- `from_raw_u64()` and `from_raw_bytes()` build an element back from that
  representation.
- `zero()`, `one()`, `is_zero()` and `is_one()` do what their names say.

Error handling:

- `inverse()` on zero, and dividing by zero, raise `ZeroDivisionError`.
- `new()` raises `ValueError` for values outside the 64-bit range.
- `from_raw_bytes()` raises `ValueError` unless it gets exactly 8 bytes.

## Hashing

```python
from tip5hash.field import BFieldElement
from tip5hash.tip5 import Tip5

# A sequence of any length; it is padded before it is absorbed.
digest = Tip5.hash_varlen([BFieldElement.new(1), BFieldElement.new(0)])
[e.value() for e in digest.values()]

# Exactly ten elements, with no padding; returns a tuple of five elements.
ten = [BFieldElement.new(i) for i in range(10)]
five = Tip5.hash_10(ten)

# Two digests combined into one, as in a Merkle tree.
parent = Tip5.hash_pair(digest, digest)
```

`hash_10` raises `ValueError` unless it is given exactly ten elements.

`hash_10` and `hash_varlen` are separate functions. They give different results
even when their inputs agree after padding, because they start from different
states:

- Fixed-length hashing starts with the capacity part of the state set to ones.
- Variable-length hashing starts with it set to zeros.

A `Digest` can be iterated over. Building one from anything but five elements
raises `ValueError`.

## Using the sponge directly

```python
from tip5hash.field import BFieldElement
from tip5hash.sponge import Domain
from tip5hash.tip5 import Tip5

elements = [BFieldElement.new(i) for i in range(23)]

sponge = Tip5.init()                       # variable-length domain
sponge.pad_and_absorb_all(elements)
first = sponge.squeeze()                   # tuple of 10 elements
second = sponge.squeeze()

fixed = Tip5(Domain.FIXED_LENGTH)
rows = fixed.trace()                       # 8 states: the initial one and one after each of 7 rounds
```

`absorb` overwrites the rate part of the state with exactly 10 elements and then
applies the permutation. It raises `ValueError` for any other count.

`squeeze` returns the rate part of the state and then applies the permutation.

`pad_and_absorb_all` appends a `1`, followed by as many `0`s as are needed to
reach a multiple of 10, and absorbs the result 10 elements at a time.

`permutation()` applies the 7 rounds to the state in place.

## What this package does not do

- There is no command-line tool.
- Inputs must already be field elements. The package does not encode bytes,
  strings or other objects into field elements for hashing.