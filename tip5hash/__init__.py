"""The Tip5 hash function, its sponge, and arithmetic in the field of order 2^64 - 2^32 + 1."""

__version__ = "0.1.0"
__all__ = ["field", "digest", "mds", "sponge", "tip5"]