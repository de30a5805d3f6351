import os
from typing import Any, Callable, Dict, Optional

from cryptography.hazmat.primitives.asymmetric import ed25519

from jwk_module.models.algorithms import ED25519_SEED_SIZE, Algorithm
from jwk_module.models.key import Key
from jwk_module.services.adopters import adopt_ed25519
from jwk_module.utils.convert import to_bytes
from jwk_module.utils.errors import KeyGenerationError, UnsupportedAlgorithmError


def generate_ed25519(seed: Optional[bytes]) -> Key:
    if seed is None:
        seed = os.urandom(ED25519_SEED_SIZE)
    try:
        private = ed25519.Ed25519PrivateKey.from_private_bytes(seed)
    except ValueError as exc:
        raise KeyGenerationError(f"invalid Ed25519 seed: {exc}") from exc

    raw = private.private_bytes_raw() + private.public_key().public_bytes_raw()
    return adopt_ed25519(raw, is_public=False)


GENERATORS: Dict[Algorithm, Callable[[Optional[bytes]], Key]] = {
    Algorithm.ED25519: generate_ed25519,
}


def generate(algorithm: str, seed_in: Any = None) -> Key:
    alg = Algorithm.from_token(algorithm)
    generator = GENERATORS.get(alg)
    if generator is None:
        raise UnsupportedAlgorithmError(algorithm)

    seed = to_bytes(seed_in)
    return generator(seed)
