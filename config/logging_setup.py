"""
Logging setup shared by the Streamlit entry points.

Streamlit reruns page scripts on every interaction, so the root handler is
installed only once per process.
"""

import logging

from config.settings import get_settings

_configured = False


def configure_logging(level: str | None = None):
    """Configure root logging from settings (idempotent)."""
    global _configured
    if _configured:
        return

    level_name = (level or get_settings().log_level or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True
