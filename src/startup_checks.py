"""Startup validation — catch misconfigurations before the app serves traffic."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from config.settings import DEFAULT_JWT_SECRET, settings

logger = logging.getLogger(__name__)


def validate_settings() -> list[str]:
    """Validate configuration. Returns list of warnings (empty = all good).

    Raises SystemExit for critical misconfigurations in production.
    """
    warnings: list[str] = []
    is_prod = bool(settings.DATABASE_URL) and "sqlite" not in settings.DATABASE_URL

    if is_prod and settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.critical("JWT_SECRET is still the default! Set a real secret for production.")
        sys.exit(1)

    if is_prod and "*" in settings.CORS_ORIGINS:
        warnings.append("CORS_ORIGINS is set to * — restrict in production")

    if settings.MAX_UPLOAD_BYTES <= 0:
        warnings.append("MAX_UPLOAD_BYTES must be positive — uploads will be rejected")

    upload_root = Path(settings.UPLOAD_DIR)
    try:
        for kind in ("images", "videos"):
            (upload_root / kind).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        warnings.append(f"Upload directory {upload_root} is not writable: {exc}")

    for w in warnings:
        logger.warning("%s", w)

    if not warnings:
        logger.info("All startup checks passed")

    return warnings
