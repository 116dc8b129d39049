"""
apicrypt — Live Demo: both algorithms + time-boxed tokens
=========================================================
Run:  python examples/demo.py

Encrypts a sample API token with every path, printing envelope sizes
and round-trip timings.
"""

import sys, os, time, base64, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from apicrypt import (Algorithm, Codec, StaticKeyProvider, TimeBoxedCipher,
                      Expired, InvalidEncoding, KeyUnavailable)
from apicrypt.config import get_settings

LINE = "═" * 70
MSG  = b"access_token=8f14e45fceea167a5a36dedd4bea2543"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL, format=" %(name)s: %(message)s")

print(f"\n{LINE}")
print("  apicrypt — Demo")
print(LINE)
print(f"  Message: {MSG.decode()}\n")

codec = Codec(StaticKeyProvider("demo-client-secret"))

# ── AES-128 ──────────────────────────────────────────────────────────────────
header("LEGACY — AES-128-ECB (MD5-derived key)")
t0  = time.perf_counter()
ct  = codec.encrypt(MSG, Algorithm.AES_128)
pt  = codec.decrypt(ct, Algorithm.AES_128)
elapsed = time.perf_counter() - t0
ok("Ciphertext",  ct[:40] + "...")
ok("Envelope",    f"{len(base64.b64decode(ct))} bytes (no IV)")
ok("Deterministic", str(ct == codec.encrypt(MSG, Algorithm.AES_128)))
ok("Round-trip",  f"{elapsed*1000:.2f} ms")
ok("Decrypted",   pt.decode())

# ── AES-256 ──────────────────────────────────────────────────────────────────
header("MODERN — AES-256-CBC (random IV)")
key = os.urandom(32)
t0  = time.perf_counter()
ct  = codec.encrypt(MSG, Algorithm.AES_256, key)
pt  = codec.decrypt(ct, Algorithm.AES_256, key)
elapsed = time.perf_counter() - t0
ok("Ciphertext",  ct[:40] + "...")
ok("Envelope",    f"{len(base64.b64decode(ct))} bytes (tag=6 + iv=16 + data)")
ok("Randomised",  str(ct != codec.encrypt(MSG, Algorithm.AES_256, key)))
ok("Round-trip",  f"{elapsed*1000:.2f} ms")
ok("Decrypted",   pt.decode())

# ── Time-boxed ───────────────────────────────────────────────────────────────
header("TIME-BOXED — timestamp + shared salt")
tb      = TimeBoxedCipher(settings.GLOBAL_SALT or "demo-salt")
expires = int(time.time()) + 60
ct      = tb.encrypt_type_one(MSG, expires)
ok("Expires at",  str(expires))
ok("Decrypted",   tb.decrypt_type_one(ct, expires).decode())
try:
    tb.decrypt_type_one(ct, expires - 3600)
except Expired as e:
    ok("Past timestamp rejected", str(e))

# ── Errors ───────────────────────────────────────────────────────────────────
header("ERRORS")
try:
    codec.decrypt("not-base64!!", Algorithm.AES_128)
except InvalidEncoding as e:
    ok("InvalidEncoding", str(e))
try:
    Codec().encrypt(MSG, Algorithm.AES_128)
except KeyUnavailable as e:
    ok("KeyUnavailable", str(e))

print(f"\n{LINE}\n")
