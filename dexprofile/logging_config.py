"""Process-wide logging setup shared by the web UI and the tool server."""

import logging
from typing import Optional

from . import config


def setup_logging(level: Optional[str] = None) -> None:
    """Configure global logging for the web UI and the tool server.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting.
    """
    log_level = (level or config.settings.log_level).upper()

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from overly chatty libraries
    for noisy in ("urllib3", "httpx", "gradio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
