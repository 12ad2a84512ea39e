"""
Logging setup for scripts and embedding services.

Library modules only ever call `logging.getLogger(__name__)`; the process
entry point calls configure_logging() once.
"""

import logging
from typing import Optional

from provider_directory.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the shared log format at `level` (defaults to settings.log_level)."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
