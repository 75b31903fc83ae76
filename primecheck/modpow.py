# primecheck/modpow.py
# Modular exponentiation over unsigned machine words.
# Products are formed in a double-width intermediate and every operand is
# reduced mod m before it is multiplied, so nothing ever exceeds 2*bits.

from __future__ import annotations

WORD_BITS = (32, 64)

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1


def word_mask(bits: int) -> int:
    """All-ones mask for an unsigned word of the given width (32 or 64)."""
    assert bits in WORD_BITS, f"unsupported word width: {bits}"
    return (1 << bits) - 1


def mulmod(a: int, b: int, m: int, bits: int = 32) -> int:
    """(a * b) mod m with both factors reduced first; product fits in 2*bits."""
    a %= m
    b %= m
    wide = a * b
    assert wide < (1 << (2 * bits))
    return wide % m


def modpow(base: int, exponent: int, modulus: int, bits: int = 32) -> int:
    """
    base^exponent mod modulus, right-to-left square-and-multiply.
    Operands must fit in `bits` unsigned bits and modulus must be >= 1.
    exponent == 0 gives 1 by convention, even for modulus 1.
    """
    mask = word_mask(bits)
    assert 1 <= modulus <= mask, "modulus must be in 1..2^bits-1"
    assert 0 <= base <= mask and 0 <= exponent <= mask, "operand out of word range"

    if exponent == 0:
        return 1

    acc = 1
    x = base
    e = exponent
    while e:
        if e & 1:
            acc = mulmod(acc, x, modulus, bits)
        x = mulmod(x, x, modulus, bits)
        e >>= 1

    # narrowing is lossless: acc < modulus <= mask
    return (acc % modulus) & mask
