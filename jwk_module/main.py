from dotenv import load_dotenv

from jwk_module.services.jwk_service import JWKModule
from jwk_module.utils.env import Settings
from jwk_module.utils.log import setup_logging


def create_module() -> JWKModule:
    load_dotenv()
    settings = Settings()
    setup_logging(settings)
    return JWKModule(settings)
