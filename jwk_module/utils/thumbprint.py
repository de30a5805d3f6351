# Thumbprints are built by hand from the required public members (RFC 7638)
# instead of going through the codec's JWK.thumbprint().
import hashlib
import json
from typing import Dict

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicNumbers
from jwcrypto.common import base64url_encode


def _int_b64url(value: int) -> str:
    return base64url_encode(value.to_bytes((value.bit_length() + 7) // 8 or 1, "big"))


def canonical_json(fields: Dict[str, str]) -> bytes:
    return json.dumps(fields, separators=(",", ":"), sort_keys=True).encode("utf-8")


def thumbprint(fields: Dict[str, str]) -> str:
    return base64url_encode(hashlib.sha256(canonical_json(fields)).digest())


def okp_thumbprint(x: bytes, crv: str = "Ed25519") -> str:
    return thumbprint({"crv": crv, "kty": "OKP", "x": base64url_encode(x)})


def rsa_thumbprint(numbers: RSAPublicNumbers) -> str:
    return thumbprint({"e": _int_b64url(numbers.e), "kty": "RSA", "n": _int_b64url(numbers.n)})
