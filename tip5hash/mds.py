"""Multiplication of a 16-word vector by the circulant MDS matrix, modulo 2^64."""

from __future__ import annotations

from typing import Sequence

_MASK64 = (1 << 64) - 1
_WIDTH = 16


def generated_function(values: Sequence[int]) -> list[int]:
    """Apply the MDS matrix to 16 words with wrapping 64-bit arithmetic."""
    if len(values) != _WIDTH:
        raise ValueError(f"expected {_WIDTH} words, got {len(values)}")
    if any(not 0 <= v <= _MASK64 for v in values):
        raise ValueError("words must fit in 64 bits")

    # All operations are ring operations, so reducing once at the end gives
    # the same result as wrapping after every step.
    x0, x1, x2, x3, x4, x5, x6, x7, x8, x9, x10, x11, x12, x13, x14, x15 = values

    n34 = x0 + x8
    n38 = x4 + x12
    n36 = x2 + x10
    n40 = x6 + x14
    n35 = x1 + x9
    n39 = x5 + x13
    n37 = x3 + x11
    n41 = x7 + x15
    n50 = n34 + n38
    n52 = n36 + n40
    n51 = n35 + n39
    n53 = n37 + n41
    n160 = x0 - x8
    n161 = x1 - x9
    n165 = x5 - x13
    n163 = x3 - x11
    n167 = x7 - x15
    n162 = x2 - x10
    n166 = x6 - x14
    n164 = x4 - x12
    n58 = n50 + n52
    n59 = n51 + n53
    n90 = n34 - n38
    n91 = n35 - n39
    n93 = n37 - n41
    n92 = n36 - n40
    n64 = (n58 + n59) * 524757
    n67 = (n58 - n59) * 52427
    n71 = n50 - n52
    n72 = n51 - n53
    n177 = n161 + n165
    n179 = n163 + n167
    n178 = n162 + n166
    n176 = n160 + n164
    n69 = n64 + n67
    n397 = n71 * 18446744073709525744 - n72 * 53918
    n1857 = n90 * 395512
    n99 = n91 + n93
    n1865 = n91 * 18446744073709254400
    n1869 = n93 * 179380
    n1873 = n92 * 18446744073709509368
    n1879 = n160 * 35608
    n185 = n161 + n163
    n1915 = n161 * 18446744073709340312
    n1921 = n163 * 18446744073709494992
    n1927 = n162 * 18446744073709450808
    n228 = n165 + n167
    n1939 = n165 * 18446744073709420056
    n1945 = n167 * 18446744073709505128
    n1951 = n166 * 216536
    n1957 = n164 * 18446744073709515080
    n70 = n64 - n67
    n702 = n71 * 53918 + n72 * 18446744073709525744
    n1961 = n90 * 18446744073709254400
    n1963 = n91 * 395512
    n1965 = n92 * 179380
    n1967 = n93 * 18446744073709509368
    n1970 = n160 * 18446744073709340312
    n1973 = n161 * 35608
    n1982 = n162 * 18446744073709494992
    n1985 = n163 * 18446744073709450808
    n1988 = n166 * 18446744073709505128
    n1991 = n167 * 216536
    n1994 = n164 * 18446744073709420056
    n1997 = n165 * 18446744073709515080
    n98 = n90 + n92
    n184 = n160 + n162
    n227 = n164 + n166
    n86 = n69 + n397
    n403 = n1857 - (n99 * 18446744073709433780 - n1865 - n1869 + n1873)
    n271 = n177 + n179
    n1891 = n177 * 18446744073709208752
    n1897 = n179 * 18446744073709448504
    n1903 = n178 * 115728
    n1909 = n185 * 18446744073709283688
    n1933 = n228 * 18446744073709373568
    n88 = n70 + n702
    n708 = n1961 + n1963 - (n1965 + n1967)
    n1976 = n178 * 18446744073709448504
    n1979 = n179 * 115728
    n87 = n69 - n397
    n897 = n1865 + n98 * 353264 - n1857 - n1873 - n1869
    n2007 = n184 * 18446744073709486416
    n2013 = n227 * 180000
    n89 = n70 - n702
    n1077 = (
        n98 * 18446744073709433780
        + n99 * 353264
        - (n1961 + n1963)
        - (n1965 + n1967)
    )
    n2020 = n184 * 18446744073709283688
    n2023 = n185 * 18446744073709486416
    n2026 = n227 * 18446744073709373568
    n2029 = n228 * 180000
    n2035 = n176 * 18446744073709550688
    n2038 = n176 * 18446744073709208752
    n2041 = n177 * 18446744073709550688
    n270 = n176 + n178
    n152 = n86 + n403
    n412 = n1879 - (
        n271 * 18446744073709105640
        - n1891
        - n1897
        + n1903
        - (n1909 - n1915 - n1921 + n1927)
        - (n1933 - n1939 - n1945 + n1951)
        + n1957
    )
    n154 = n88 + n708
    n717 = n1970 + n1973 - (
        n1976
        + n1979
        - (n1982 + n1985)
        - (n1988 + n1991)
        + (n1994 + n1997)
    )
    n156 = n87 + n897
    n906 = (
        n1915
        + n2007
        - n1879
        - n1927
        - (n1897 - n1921 - n1945 + (n1939 + n2013 - n1957 - n1951))
    )
    n158 = n89 + n1077
    n1086 = (
        n2020
        + n2023
        - (n1970 + n1973)
        - (n1982 + n1985)
        - (n2026 + n2029 - (n1994 + n1997) - (n1988 + n1991))
    )
    n153 = n86 - n403
    n1237 = (
        n1909
        - n1915
        - n1921
        + n1927
        + n2035
        - n1879
        - n1957
        - (n1933 - n1939 - n1945 + n1951)
    )
    n155 = n88 - n708
    n1375 = (
        n1982
        + n1985
        + (n2038 + n2041)
        - (n1970 + n1973)
        - (n1994 + n1997)
        - (n1988 + n1991)
    )
    n157 = n87 - n897
    n1492 = (
        n1921
        + (n1891 + n270 * 114800 - n2035 - n1903)
        - (n1915 + n2007 - n1879 - n1927)
        - (n1939 + n2013 - n1957 - n1951)
        - n1945
    )
    n159 = n89 - n1077
    n1657 = (
        n270 * 18446744073709105640
        + n271 * 114800
        - (n2038 + n2041)
        - (n1976 + n1979)
        - (n2020 + n2023 - (n1970 + n1973) - (n1982 + n1985))
        - (n2026 + n2029 - (n1994 + n1997) - (n1988 + n1991))
    )

    outputs = (
        n152 + n412,
        n154 + n717,
        n156 + n906,
        n158 + n1086,
        n153 + n1237,
        n155 + n1375,
        n157 + n1492,
        n159 + n1657,
        n152 - n412,
        n154 - n717,
        n156 - n906,
        n158 - n1086,
        n153 - n1237,
        n155 - n1375,
        n157 - n1492,
        n159 - n1657,
    )
    return [word & _MASK64 for word in outputs]