from jwk_module.main import create_module
from jwk_module.models.algorithms import Algorithm
from jwk_module.models.key import Key
from jwk_module.services.adopters import adopt
from jwk_module.services.generator import generate
from jwk_module.services.jwk_service import JWKModule
from jwk_module.services.parser import export_key_set, parse, parse_key_set
from jwk_module.utils.errors import (
    ConversionError,
    InvalidKeyError,
    JWKError,
    KeyDecodeError,
    KeyGenerationError,
    KeyParseError,
    UnsupportedAlgorithmError,
)

__all__ = [
    "Algorithm",
    "ConversionError",
    "InvalidKeyError",
    "JWKError",
    "JWKModule",
    "Key",
    "KeyDecodeError",
    "KeyGenerationError",
    "KeyParseError",
    "UnsupportedAlgorithmError",
    "adopt",
    "create_module",
    "export_key_set",
    "generate",
    "parse",
    "parse_key_set",
]
