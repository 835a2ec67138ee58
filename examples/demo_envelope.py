"""
envelope_cipher — Console Demo
==============================
Run:  python examples/demo_envelope.py

Encrypts a message, shows the base64 envelope, then decrypts it back,
once with AES-256-CBC and once with AES-256-GCM. Set ENVELOPE_CIPHER_KEY
(base64, 32 bytes) to use your own key; otherwise one is generated.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from envelope_cipher import (
    SymmetricCipher, AuthenticatedCipher, KeyNotConfigured, key_from_env,
)

logger = logging.getLogger(__name__)

LINE = "═" * 70
MSG  = "I am Ziggy Rafiq from United Kingdom"


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def load_key() -> bytes:
    try:
        return key_from_env()
    except KeyNotConfigured:
        logger.info("ENVELOPE_CIPHER_KEY not set; generating a throwaway key")
        return SymmetricCipher.generate_key()


def main():
    key = load_key()
    print(f"\n{LINE}")
    print("  envelope_cipher — Demo")
    print(LINE)
    print(f"  Message: {MSG}")

    header("AES-256-CBC + PKCS#7")
    t0  = time.perf_counter()
    ct  = SymmetricCipher.encrypt_text(MSG, key)
    pt  = SymmetricCipher.decrypt_text(ct, key)
    elapsed = time.perf_counter() - t0
    ok("Cipher text", ct)
    ok("Decrypted",   pt)
    ok("Round-trip",  f"{elapsed*1000:.2f} ms")

    header("AES-256-GCM (authenticated)")
    t0  = time.perf_counter()
    ct  = AuthenticatedCipher.encrypt_text(MSG, key, aad=b"demo")
    pt  = AuthenticatedCipher.decrypt_text(ct, key, aad=b"demo")
    elapsed = time.perf_counter() - t0
    ok("Cipher text", ct)
    ok("Decrypted",   pt)
    ok("Round-trip",  f"{elapsed*1000:.2f} ms")
    print(f"{LINE}\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    main()
