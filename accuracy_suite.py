#!/usr/bin/env python3
import argparse, csv, random, sys
from math import gcd
from sympy import isprime, prime

from primecheck import U32_MAX, is_prime, modpow

FERMAT_BASES = (2, 3, 5, 7, 11)

# each passes at least one of the bases 2, 7, 61 on its own
STRONG_PSEUDOPRIMES = (25, 325, 703, 2101, 2353, 2047, 3277, 4033, 4681, 8321, 3215031751)

def boundary_values():
    yield from (2, 3, 4, 5, 7, 9, 11, 13, 59, 60, 61, 62, 63, 65, 67)
    yield from (2**31 - 1, 2**31, 2**31 + 1, U32_MAX - 4, U32_MAX - 1, U32_MAX)

def prime_squares(count=50):
    # p^2 stays inside 32 bits for every p below 65536
    for k in range(1, count + 1):
        p = int(prime(k * 100))
        yield p * p

def fermat_ok(n: int) -> bool:
    """Fermat's little theorem as an independent oracle for prime n."""
    for b in FERMAT_BASES:
        if gcd(b, n) != 1:
            continue
        if modpow(b, n - 1, n) != 1:
            return False
    return True

def check_one(n: int) -> dict:
    expect = bool(isprime(n))
    got = is_prime(n)
    ok, reason = (got == expect), ""
    if not ok:
        reason = f"is_prime={got} sympy={expect}"
    elif expect and not fermat_ok(n):
        ok, reason = False, "fermat check failed on a prime"
    return {"n": str(n), "expect": "prime" if expect else "composite",
            "got": "prime" if got else "composite", "ok": ok, "reason": reason}

def cases(seed: int, count: int):
    rng = random.Random(seed)
    yield from boundary_values()
    yield from STRONG_PSEUDOPRIMES
    yield from prime_squares()
    for bits in range(2, 33):
        lo = max(2, 1 << (bits - 1))
        hi = min(U32_MAX, (1 << bits) - 1)
        for _ in range(count):
            yield rng.randint(lo, hi)

def main(argv=None):
    ap = argparse.ArgumentParser(description="cross-check is_prime against sympy")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--per-width", type=int, default=200, help="random samples per bit length")
    ap.add_argument("--out", default="accuracy_failures.csv")
    args = ap.parse_args(argv)

    results = [check_one(n) for n in cases(args.seed, args.per_width)]

    total = len(results)
    ok = sum(1 for r in results if r["ok"])
    by = {}
    for r in results:
        by.setdefault(r["expect"], [0, 0])
        if r["ok"]: by[r["expect"]][0] += 1
        else: by[r["expect"]][1] += 1

    print("\n=== SUMMARY ===", flush=True)
    print(f"Total: {total} | PASS: {ok} | FAIL: {total-ok}")
    for k, (p, f) in by.items():
        print(f"  {k:10s}  PASS {p:5d}  FAIL {f:5d}")

    fails = [r for r in results if not r["ok"]]
    if fails:
        with open(args.out, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(fails[0].keys()))
            w.writeheader()
            w.writerows(fails)
        print(f"\nWrote details for {len(fails)} failures to {args.out}", file=sys.stderr)
        return 1
    print("\nNo failures recorded.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
