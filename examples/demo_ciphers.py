"""
lab_ciphers — Live Demo: Gronsfeld + Route-Permutation
=======================================================
Run:  python examples/demo_ciphers.py

Encrypts and decrypts a message with each cipher, then shows the
errors each one raises for a bad key and bad text.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lab_ciphers.ciphers.gronsfeld     import GronsfeldCipher
from lab_ciphers.ciphers.permutation   import PermutationCipher
from lab_ciphers.errors                import CipherError

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def rejected(label, fn):
    try:
        fn()
        print(f"  ✗  {label}: accepted")
    except CipherError as e:
        print(f"  ✓  {label}: {type(e).__name__}: {e}")

# ── GRONSFELD ────────────────────────────────────────────────────────────────
header("Gronsfeld — letter key over the Russian alphabet")
msg = "ШИФРГРОНСФЕЛЬДА"
g   = GronsfeldCipher("КЛЮЧ")
ct  = g.encrypt(msg)
ok("Key shifts", str(g.key))
ok("Plaintext",  msg)
ok("Encrypted",  ct)
ok("Decrypted",  g.decrypt(ct))
rejected("Key '1Б'",     lambda: GronsfeldCipher("1Б"))
rejected("Empty key",    lambda: GronsfeldCipher(""))
rejected("Text 'hello'", lambda: g.encrypt("hello"))

# ── ROUTE-PERMUTATION ────────────────────────────────────────────────────────
header("Route-permutation — digit key over Russian + Latin lowercase")
msg = "МАРШРУТroute"
p   = PermutationCipher("2024")
ct  = p.encrypt(msg)
ok("Key shifts", str(p.key))
ok("Plaintext",  msg)
ok("Encrypted",  ct)
ok("Decrypted",  p.decrypt(ct))
rejected("Key '00'",   lambda: PermutationCipher("00"))
rejected("Key '12a'",  lambda: PermutationCipher("12a"))
rejected("Text 'ABC'", lambda: p.encrypt("ABC"))
rejected("Empty text", lambda: p.decrypt(""))

print(f"\n{LINE}\n")
