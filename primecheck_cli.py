import sys, argparse, json
from primecheck import is_prime, is_prime_u64, word_mask

CHECKS = {32: is_prime, 64: is_prime_u64}

def process(n: int, bits: int, as_json: bool) -> int:
    if n < 2 or n > word_mask(bits):
        print(f"# skip: {n} (outside 2..2^{bits}-1)", file=sys.stderr)
        return 1
    prime = CHECKS[bits](n)
    label = "prime" if prime else "composite"
    if as_json:
        print(json.dumps({"n": n, "bits": bits, "prime": prime, "class": label}))
    else:
        print(f"{n}\t{label}")
    return 0

def main(argv=None):
    ap = argparse.ArgumentParser(prog="primecheck",
                                 description="deterministic Miller-Rabin primality check")
    ap.add_argument("--bits", type=int, choices=sorted(CHECKS), default=32, help="word size of the inputs")
    ap.add_argument("--json", action="store_true", help="one JSON object per line")
    ap.add_argument("N", nargs="*", type=int, help="optional list of integers (default: read stdin)")
    args = ap.parse_args(argv)

    rc = 0
    if args.N:
        for n in args.N:
            rc |= process(n, args.bits, args.json)
    else:
        for line in sys.stdin:
            line = line.strip()
            if not line: continue
            try:
                n = int(line, 10)
            except ValueError:
                print(f"# skip: {line}", file=sys.stderr); rc |= 1; continue
            rc |= process(n, args.bits, args.json)
    raise SystemExit(rc)

if __name__ == "__main__":
    main()
