import logging

from qazaq.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = None) -> None:
    """Configure the root logger once for the whole process."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # passlib logs a noisy traceback while probing the bcrypt version
    logging.getLogger("passlib").setLevel(logging.ERROR)
