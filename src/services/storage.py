"""Media storage — uploaded images and videos on the local filesystem.

Files land in ``<UPLOAD_DIR>/images`` or ``<UPLOAD_DIR>/videos`` as
``<uuid4>_<original name>`` and are addressed by ``/uploads/<kind>/<name>``
URLs, which is what posts and events store.
"""
from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Iterable, Optional

from fastapi import HTTPException, UploadFile

from config.settings import settings

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads/"
KINDS = ("images", "videos")
_CHUNK = 1024 * 1024


class MediaStorage:
    def __init__(self, root: str | Path, max_bytes: int):
        self.root = Path(root)
        self.max_bytes = max_bytes

    def ensure_dirs(self) -> None:
        for kind in KINDS:
            (self.root / kind).mkdir(parents=True, exist_ok=True)

    # ── Writes ────────────────────────────────────────────────────────────

    async def save(self, upload: UploadFile, kind: str) -> str:
        """Store an upload and return its public URL."""
        if kind not in KINDS:
            raise ValueError(f"unknown media kind: {kind}")
        original = Path(upload.filename or "").name or "upload"
        filename = f"{uuid.uuid4()}_{original}"
        target = self.root / kind / filename

        written = 0
        try:
            self.ensure_dirs()
            with open(target, "wb") as fh:
                while chunk := await upload.read(_CHUNK):
                    written += len(chunk)
                    if written > self.max_bytes:
                        break
                    fh.write(chunk)
        except OSError as exc:
            logger.error("Failed to store upload %s: %s", original, exc)
            target.unlink(missing_ok=True)
            raise HTTPException(500, f"Failed to store file: {exc}")

        if written > self.max_bytes:
            target.unlink(missing_ok=True)
            raise HTTPException(
                400, f"File too large. Max size: {self.max_bytes / 1024 / 1024:.1f}MB"
            )

        logger.info("Stored %s upload %s (%d bytes)", kind, filename, written)
        return f"{URL_PREFIX}{kind}/{filename}"

    def path_for(self, url: Optional[str]) -> Optional[Path]:
        """Map an /uploads/... URL to a path under the storage root."""
        if not url or not url.startswith(URL_PREFIX):
            return None
        relative = Path(url[len(URL_PREFIX):])
        if relative.is_absolute() or ".." in relative.parts or len(relative.parts) != 2:
            return None
        if relative.parts[0] not in KINDS:
            return None
        return self.root / relative

    def delete(self, url: Optional[str]) -> bool:
        """Best-effort removal. Returns True only when a file was deleted."""
        path = self.path_for(url)
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning("Upload already gone: %s", url)
            return False
        except OSError as exc:
            logger.warning("Could not delete upload %s: %s", url, exc)
            return False
        logger.info("Deleted upload %s", url)
        return True

    # ── Maintenance ───────────────────────────────────────────────────────

    def _files(self, kind: str) -> list[Path]:
        directory = self.root / kind
        if not directory.is_dir():
            return []
        return sorted(p for p in directory.iterdir() if p.is_file())

    def sweep_orphans(self, referenced: Iterable[Optional[str]]) -> dict[str, int]:
        """Delete stored files whose URL is not in ``referenced``."""
        keep = {url for url in referenced if url}
        removed = {kind: 0 for kind in KINDS}
        for kind in KINDS:
            for path in self._files(kind):
                url = f"{URL_PREFIX}{kind}/{path.name}"
                if url in keep:
                    continue
                if self.delete(url):
                    removed[kind] += 1
        logger.info(
            "Orphan sweep removed %d images, %d videos",
            removed["images"], removed["videos"],
        )
        return removed

    def status(self, sample_size: int = 5) -> dict:
        report: dict = {"root": str(self.root), "root_exists": self.root.is_dir()}
        for kind in KINDS:
            files = self._files(kind)
            report[kind] = {
                "exists": (self.root / kind).is_dir(),
                "count": len(files),
                "samples": [f"{URL_PREFIX}{kind}/{p.name}" for p in files[:sample_size]],
            }
        return report


def get_storage() -> MediaStorage:
    """Dependency for FastAPI — storage configured from settings."""
    return MediaStorage(settings.UPLOAD_DIR, settings.MAX_UPLOAD_BYTES)
