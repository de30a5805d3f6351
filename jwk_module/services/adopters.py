from typing import Any, Callable, Dict

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa

from jwk_module.models.algorithms import (
    ED25519_PRIVATE_KEY_SIZE,
    ED25519_PUBLIC_KEY_SIZE,
    ED25519_SEED_SIZE,
    EDDSA,
    RS256,
    USE_SIG,
    Algorithm,
)
from jwk_module.models.key import Key
from jwk_module.utils.convert import to_bytes
from jwk_module.utils.errors import KeyParseError
from jwk_module.utils.thumbprint import okp_thumbprint, rsa_thumbprint


def adopt_ed25519(data: bytes, is_public: bool) -> Key:
    """Wrap raw Ed25519 bytes: 32-byte public key or 64-byte seed||public."""
    if is_public:
        if len(data) != ED25519_PUBLIC_KEY_SIZE:
            raise KeyParseError(f"invalid Ed25519 public key length {len(data)}")
        material = ed25519.Ed25519PublicKey.from_public_bytes(data)
        x = data
    else:
        if len(data) != ED25519_PRIVATE_KEY_SIZE:
            raise KeyParseError(f"invalid Ed25519 private key length {len(data)}")
        material = ed25519.Ed25519PrivateKey.from_private_bytes(data[:ED25519_SEED_SIZE])
        # kid comes from the embedded public half, which must belong to the seed
        x = data[ED25519_SEED_SIZE:]
        if material.public_key().public_bytes_raw() != x:
            raise KeyParseError("Ed25519 private key public half does not match its seed")

    return Key(
        key=material,
        key_type="OKP",
        is_public=is_public,
        algorithm=EDDSA,
        use=USE_SIG,
        key_id=okp_thumbprint(x),
    )


def _load_rsa(data: bytes, is_public: bool) -> Any:
    try:
        if is_public:
            material = serialization.load_der_public_key(data)
        else:
            material = serialization.load_der_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyParseError(f"invalid RSA {'public' if is_public else 'private'} key: {exc}") from exc

    expected = rsa.RSAPublicKey if is_public else rsa.RSAPrivateKey
    if not isinstance(material, expected):
        raise KeyParseError(f"DER key is {type(material).__name__}, expected RSA")
    return material


def adopt_rsa(data: bytes, is_public: bool) -> Key:
    """Wrap a DER-encoded RSA key (PKCS#1 or PKCS#8 / SubjectPublicKeyInfo)."""
    material = _load_rsa(data, is_public)
    public = material if is_public else material.public_key()

    return Key(
        key=material,
        key_type="RSA",
        is_public=is_public,
        algorithm=RS256,
        use=USE_SIG,
        key_id=rsa_thumbprint(public.public_numbers()),
    )


ADOPTERS: Dict[Algorithm, Callable[[bytes, bool], Key]] = {
    Algorithm.ED25519: adopt_ed25519,
    Algorithm.RSA1_5: adopt_rsa,
}


def adopt(algorithm: str, key_in: Any, is_public: bool = False) -> Key:
    alg = Algorithm.from_token(algorithm)
    data = to_bytes(key_in)
    return ADOPTERS[alg](data or b"", bool(is_public))
