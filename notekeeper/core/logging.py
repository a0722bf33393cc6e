import logging


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера приложения"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("notekeeper").setLevel(level.upper())
