class JWKError(Exception):
    """Base exception for jwk-module errors."""


class UnsupportedAlgorithmError(JWKError):
    def __init__(self, algorithm):
        self.algorithm = algorithm
        super().__init__(f"unsupported algorithm: {algorithm}")


class ConversionError(JWKError):
    """Value could not be converted to bytes"""


class KeyDecodeError(JWKError):
    """JSON is not a valid JWK / JWK-Set document"""


class KeyParseError(JWKError):
    """Raw key bytes do not match the expected key structure"""


class KeyGenerationError(JWKError):
    """The key primitive rejected the generation input"""


class InvalidKeyError(JWKError):
    """Key has no material for the requested operation"""
