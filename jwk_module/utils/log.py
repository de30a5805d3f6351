import logging

from jwk_module.utils.env import Settings

LOGGER_NAME = "jwk-module"


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def setup_logging(settings: Settings) -> logging.Logger:
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
    logger = get_logger()
    logger.setLevel(settings.log_level.upper())
    return logger
