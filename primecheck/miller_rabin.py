# primecheck/miller_rabin.py
# Deterministic Miller–Rabin for machine words.
# - 32-bit: bases 2, 7, 61 are exact for every n < 4,759,123,141
# - 64-bit: the first twelve primes are exact for every n < 3.3e24

from __future__ import annotations
from typing import Tuple

from .modpow import modpow, word_mask

BASES_U32 = (2, 7, 61)
BASES_U64 = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

BASES_BY_WIDTH = {32: BASES_U32, 64: BASES_U64}


def decompose(n: int) -> Tuple[int, int]:
    """Return (r, d) with d odd and n - 1 == d * 2**r."""
    assert n >= 2
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return r, d


def _passes_base(n: int, b: int, r: int, d: int, bits: int) -> bool:
    m = modpow(b, d, n, bits)
    if m == 1 or m == n - 1:
        return True
    # r-1 more squarings before b counts as a witness
    for _ in range(r - 1):
        m = modpow(m, 2, n, bits)
        if m == n - 1:
            return True
    return False


def is_strong_probable_prime(n: int, base: int, bits: int = 32) -> bool:
    """
    One strong Miller–Rabin round: True when `base` does not prove n composite.
    n must be odd and > 2, and 1 <= base < n.
    """
    assert 3 <= n <= word_mask(bits) and n % 2 == 1
    assert 1 <= base < n
    r, d = decompose(n)
    return _passes_base(n, base, r, d, bits)


def _miller_rabin(n: int, bits: int) -> bool:
    assert 2 <= n <= word_mask(bits), f"n must be in 2..2^{bits}-1"
    if n < 4:
        return True
    if n % 2 == 0:
        return False

    r, d = decompose(n)
    for b in BASES_BY_WIDTH[bits]:
        # the base set runs out for tiny n; the smaller bases already decided it
        if b >= n:
            break
        if not _passes_base(n, b, r, d, bits):
            return False
    return True


def is_prime(n: int) -> bool:
    """Exact primality for 2 <= n < 2**32. n < 2 is a caller bug (asserts)."""
    return _miller_rabin(n, 32)


def is_prime_u64(n: int) -> bool:
    """Exact primality for 2 <= n < 2**64, same contract as is_prime."""
    return _miller_rabin(n, 64)
