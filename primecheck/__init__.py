from .miller_rabin import (
    BASES_U32,
    BASES_U64,
    decompose,
    is_prime,
    is_prime_u64,
    is_strong_probable_prime,
)
from .modpow import U32_MAX, U64_MAX, modpow, mulmod, word_mask
__all__ = [
    "BASES_U32", "BASES_U64", "U32_MAX", "U64_MAX",
    "decompose", "is_prime", "is_prime_u64", "is_strong_probable_prime",
    "modpow", "mulmod", "word_mask",
]
