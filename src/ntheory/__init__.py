"""
Number theory engine: modular arithmetic, CRT, discrete logarithms,
primality and factorization.

Every operation is exact at the boundaries of a fixed-width integer
representation (IntWidth) and has an arbitrary-precision counterpart.
"""
