import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_configured = False


def setup_logging(level: str = "INFO", force: bool = False):
    """Install a single stderr sink. Streamlit reruns the script on every
    interaction, so repeated calls are no-ops unless ``force`` is set."""
    global _configured
    if _configured and not force:
        return
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level.upper(),
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
    _configured = True
