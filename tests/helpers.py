from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa
from jwcrypto.common import base64url_decode

# RFC 8037, appendix A
RFC8037_SEED = base64url_decode("nWGxne_9WmC6hEr0kuwsxERJxWl7MmkZcDusAxyuf2A")
RFC8037_X = base64url_decode("11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo")
RFC8037_THUMBPRINT = "kPrK_qmxVWaYVA9wwBF6Iuo3vVzz7TxHCTwXBygrS4k"


def ed25519_raw(seed: bytes) -> tuple[bytes, bytes]:
    """(64-byte seed||public, 32-byte public) for a seed."""
    priv = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
    pub = priv.public_key().public_bytes_raw()
    return seed + pub, pub


def rsa_der(key_size: int = 2048) -> tuple[rsa.RSAPrivateKey, bytes, bytes]:
    """(key, PKCS#1 private DER, PKCS#1 public DER)"""
    priv = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    priv_der = priv.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    pub_der = priv.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.PKCS1,
    )
    return priv, priv_der, pub_der
