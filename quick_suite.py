#!/usr/bin/env python3
import os, sys, time, random, requests

BASE_URL  = (os.getenv("PRIMECHECK_BASE_URL", "http://127.0.0.1:8082") or "http://127.0.0.1:8082").rstrip("/")
TIMEOUT   = float(os.getenv("PRIMECHECK_TIMEOUT", "10"))
MAX_TRIES = max(1, int(os.getenv("PRIMECHECK_MAX_TRIES", "3")))

def cases():
    # Hand-picked sanity
    for n in (2, 3, 5, 7, 11, 13, 37, 61, 271, 8191, 524287, 2147483647, 4294967291):
        yield n, 32, "prime"
    for n in (4, 8, 9, 14, 25, 100, 111, 303, 909, 2047, 3215031751, 4294967295):
        yield n, 32, "composite"
    # past the reach of the 32-bit bases
    yield 4759123141, 64, "composite"
    yield 2**61 - 1, 64, "prime"
    yield 2**64 - 59, 64, "prime"

def jget(session, path, **params):
    """
    GET with bounded retries; returns the decoded body or raises the last error.
    Only connection errors, timeouts and 5xx are retried; a 4xx raises at once.
    """
    tries = max(1, MAX_TRIES)
    last = None
    for t in range(1, tries + 1):
        try:
            r = session.get(f"{BASE_URL}{path}", params=params, timeout=TIMEOUT)
            r.raise_for_status()
            return r.json()
        except requests.RequestException as e:
            resp = getattr(e, "response", None)
            if resp is not None and resp.status_code < 500:
                raise
            last = e
            print("requests_error", f"try={t}", "err="+repr(e), file=sys.stderr, flush=True)
            if t < tries:
                time.sleep(min(5.0, (2 ** t) * 0.25 + random.uniform(0, 0.25)))
    raise last

def run(session) -> list:
    fails = []
    for n, bits, expect in cases():
        try:
            res = jget(session, "/api/is_prime", n=str(n), bits=bits)
        except requests.RequestException as e:
            fails.append({"n": n, "expect": expect, "reason": f"HTTP: {e}"})
            continue
        got = res.get("class")
        if got != expect:
            fails.append({"n": n, "expect": expect, "reason": f"got {got}"})
    return fails

def main():
    session = requests.Session()
    session.headers.update({"User-Agent": "primecheck-quick-suite/1.0"})
    try:
        health = jget(session, "/api/health")
        print("health", health.get("ok"), "bases", health.get("bases"), flush=True)
    except requests.RequestException as e:
        print("health_error", repr(e), file=sys.stderr, flush=True)

    total = sum(1 for _ in cases())
    fails = run(session)
    print("\n=== QUICK SUITE SUMMARY ===")
    print(f"Total: {total} | ok: {total - len(fails)} | fails: {len(fails)}")
    for f in fails:
        print(f"  {f['n']}: expected {f['expect']}, {f['reason']}")
    return 1 if fails else 0

if __name__ == "__main__":
    sys.exit(main())
