"""
utils/helpers.py
Shared utility functions used across services.
"""
import logging
import re

from ocw_certificates.core.config import settings

# Configure module logger
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def get_logger(name: str) -> logging.Logger:
    """Return a named logger."""
    return logging.getLogger(name)


def certificate_filename(student_name: str) -> str:
    """Build the download filename for a student's certificate."""
    stem = _UNSAFE_FILENAME_CHARS.sub("_", "_".join(student_name.split()))
    return f"certificate_{stem.strip('_') or 'student'}.pdf"
