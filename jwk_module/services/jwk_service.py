from typing import Any, List, Optional

from jwk_module.models.key import Key
from jwk_module.services import adopters, generator, parser
from jwk_module.utils.env import Settings, get_settings
from jwk_module.utils.log import get_logger


class JWKModule:
    """Entry object bundling the generate / adopt / parse operations."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger = get_logger()

    def parse(self, source: str) -> Key:
        return parser.parse(source)

    def parse_key_set(self, source: str) -> List[Key]:
        return parser.parse_key_set(source)

    def generate(self, algorithm: str, seed: Any = None) -> Key:
        key = generator.generate(algorithm, seed)
        self.logger.info("generated key kid=%s alg=%s", key.key_id, key.algorithm)
        return key

    def adopt(self, algorithm: str, key: Any, is_public: bool = False) -> Key:
        adopted = adopters.adopt(algorithm, key, is_public)
        self.logger.info("adopted key kid=%s alg=%s", adopted.key_id, adopted.algorithm)
        return adopted

    def export_key_set(self, keys: List[Key], private_key: Optional[bool] = None) -> str:
        if private_key is None:
            private_key = self.settings.export_private
        return parser.export_key_set(keys, private_key)
