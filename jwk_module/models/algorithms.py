from enum import Enum

from jwk_module.utils.errors import UnsupportedAlgorithmError

# JWA names written into the "alg" member
EDDSA = "EdDSA"
RS256 = "RS256"

USE_SIG = "sig"

ED25519_SEED_SIZE = 32
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_PRIVATE_KEY_SIZE = ED25519_SEED_SIZE + ED25519_PUBLIC_KEY_SIZE


class Algorithm(str, Enum):
    ED25519 = "ED25519"
    RSA1_5 = "RSA1_5"

    @classmethod
    def from_token(cls, token) -> "Algorithm":
        """Resolve a case-insensitive algorithm token."""
        if not isinstance(token, str):
            raise UnsupportedAlgorithmError(token)
        try:
            return cls(token.upper())
        except ValueError as exc:
            raise UnsupportedAlgorithmError(token) from exc
