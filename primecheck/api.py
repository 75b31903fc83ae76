import time
from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import BadRequest

from .miller_rabin import BASES_BY_WIDTH, is_prime, is_prime_u64
from .modpow import modpow, word_mask

prime_bp = Blueprint("prime_bp", __name__)

_CHECKS = {32: is_prime, 64: is_prime_u64}

# ------------------ helpers ------------------
def _int_arg(data, key: str, default=None) -> int:
    raw = data.get(key, default)
    if raw is None or str(raw).strip() == "":
        raise BadRequest(f"missing {key}")
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        raise BadRequest(f"{key} must be integer")

def _bits_arg(data) -> int:
    bits = _int_arg(data, "bits", 32)
    if bits not in _CHECKS:
        raise BadRequest("bits must be 32 or 64")
    return bits

def _json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequest("expected a JSON object")
    return data

def _check(data):
    t0 = time.perf_counter()
    bits = _bits_arg(data)
    n = _int_arg(data, "n")
    if n < 2 or n > word_mask(bits):
        raise BadRequest(f"n must be in 2..2^{bits}-1")
    prime = _CHECKS[bits](n)
    d = jsonify({"n": str(n), "bits": bits, "prime": prime,
                 "class": "prime" if prime else "composite"})
    d.headers["X-Compute-ms"] = str(int((time.perf_counter() - t0) * 1000))
    return d

@prime_bp.errorhandler(BadRequest)
def bad_request(e):
    current_app.logger.warning("rejected %s %s: %s", request.method, request.path, e.description)
    return jsonify({"error": e.description}), 400

# ------------------ API ------------------
@prime_bp.get("/api/health")
def health():
    bases = {str(bits): list(b) for bits, b in BASES_BY_WIDTH.items()}
    return jsonify({"ok": True, "bases": bases, "time": int(time.time())})

@prime_bp.get("/api/is_prime")
def is_prime_query():
    return _check(request.args)

@prime_bp.post("/api/is_prime")
def is_prime_post():
    return _check(_json_body())

# /api/modpow?base=7&exponent=560&modulus=561
@prime_bp.get("/api/modpow")
def modpow_query():
    data = request.args
    bits = _bits_arg(data)
    mask = word_mask(bits)
    base = _int_arg(data, "base")
    exponent = _int_arg(data, "exponent")
    modulus = _int_arg(data, "modulus")
    if not 0 <= base <= mask:
        raise BadRequest(f"base must be in 0..2^{bits}-1")
    if not 0 <= exponent <= mask:
        raise BadRequest(f"exponent must be in 0..2^{bits}-1")
    if not 1 <= modulus <= mask:
        raise BadRequest(f"modulus must be in 1..2^{bits}-1")
    result = modpow(base, exponent, modulus, bits)
    return jsonify({"base": str(base), "exponent": str(exponent), "modulus": str(modulus),
                    "bits": bits, "result": str(result)})
