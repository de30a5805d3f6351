import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from cryptography.hazmat.primitives.asymmetric import ed25519, rsa
from jwcrypto import jwk
from jwcrypto.common import base64url_encode

from jwk_module.utils.errors import InvalidKeyError, UnsupportedAlgorithmError
from jwk_module.utils.thumbprint import okp_thumbprint, rsa_thumbprint


@dataclass(frozen=True)
class Key:
    """Immutable JWK value object.

    ``key`` holds the cryptography key object (or raw bytes for ``oct`` keys
    read from a document). ``key_id`` is attached once when the key is built
    and is never recomputed, so parsed keys keep the ``kid`` of their source.
    """

    key: Any = field(repr=False)
    key_type: str
    is_public: bool
    algorithm: Optional[str] = None
    use: Optional[str] = None
    key_id: Optional[str] = None

    def public_key(self) -> Any:
        if self.is_public:
            return self.key
        if self.key_type == "oct":
            raise InvalidKeyError("oct keys have no public part")
        return self.key.public_key()

    def public(self) -> "Key":
        if self.is_public:
            return self
        return replace(self, key=self.public_key(), is_public=True)

    def thumbprint(self) -> str:
        """RFC 7638 thumbprint of the current key material."""
        material = self.public_key()
        if isinstance(material, ed25519.Ed25519PublicKey):
            return okp_thumbprint(material.public_bytes_raw())
        if isinstance(material, rsa.RSAPublicKey):
            return rsa_thumbprint(material.public_numbers())
        raise UnsupportedAlgorithmError(self.key_type)

    def _includes_private(self, private_key: bool) -> bool:
        return private_key and not self.is_public

    def to_jwk(self, private_key: bool = True) -> jwk.JWK:
        if self.key_type == "oct":
            if not private_key:
                raise InvalidKeyError("oct keys have no public part")
            params: Dict[str, Any] = {"kty": "oct", "k": base64url_encode(self.key)}
        else:
            material = self.key if self._includes_private(private_key) else self.public_key()
            params = jwk.JWK.from_pyca(material).export(
                private_key=self._includes_private(private_key), as_dict=True
            )
        if self.algorithm is not None:
            params["alg"] = self.algorithm
        if self.use is not None:
            params["use"] = self.use
        if self.key_id is not None:
            params["kid"] = self.key_id
        return jwk.JWK(**params)

    def as_dict(self, private_key: bool = True) -> Dict[str, Any]:
        return self.to_jwk(private_key).export(private_key=self._includes_private(private_key), as_dict=True)

    def export(self, private_key: bool = True) -> str:
        """Encode as JWK JSON; public keys are always exported as public."""
        return json.dumps(self.as_dict(private_key), separators=(",", ":"))
