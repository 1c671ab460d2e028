"""
Directory cache store — keyed tarballs in a local cache directory.

Stands in for the hosted archive cache when the action runs on a
self-hosted runner or locally. Each key maps to one ``.tar.gz`` file;
every cached path is stored under its own top-level member so it can
be restored to the exact location it was saved from.
"""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
import tarfile
import tempfile
from collections.abc import Sequence
from pathlib import Path

from src.adapters.base import CacheStore

logger = logging.getLogger(__name__)

# Default cache directory, overridable with QIA_CACHE_DIR
_DEFAULT_CACHE_DIR = Path.home() / ".cache" / "install-qt-action"


def get_cache_dir() -> Path:
    """Return (and create if needed) the local cache directory."""
    cache = Path(os.environ.get("QIA_CACHE_DIR", str(_DEFAULT_CACHE_DIR)))
    cache.mkdir(parents=True, exist_ok=True)
    return cache


class DirectoryCacheStore(CacheStore):
    """Cache entries stored as tarballs under ``cache_dir``."""

    def __init__(self, cache_dir: Path | None = None):
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> Path:
        if self._cache_dir is None:
            self._cache_dir = get_cache_dir()
        else:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
        return self._cache_dir

    def archive_path(self, key: str) -> Path:
        """Tarball location for ``key``; keys may contain path separators."""
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{digest}.tar.gz"

    def restore(self, paths: Sequence[str], key: str) -> str | None:
        try:
            archive = self.archive_path(key)
            if not archive.is_file():
                logger.debug("No cache entry at %s", archive)
                return None

            with tempfile.TemporaryDirectory() as tmp:
                with tarfile.open(archive, "r:gz") as tar:
                    tar.extractall(tmp, filter="data")
                for index, path in enumerate(paths):
                    member = Path(tmp) / str(index)
                    if member.is_dir():
                        shutil.copytree(member, path, symlinks=True, dirs_exist_ok=True)
                    elif member.is_file():
                        Path(path).parent.mkdir(parents=True, exist_ok=True)
                        shutil.copy2(member, path)
        except (OSError, EOFError, tarfile.TarError) as e:
            # a broken entry is a miss, not a failed run
            logger.warning("Failed to restore cache entry for %s: %s", key, e)
            return None

        logger.debug("Restored %d path(s) from %s", len(paths), archive)
        return key

    def save(self, paths: Sequence[str], key: str) -> str | None:
        partial: Path | None = None
        try:
            archive = self.archive_path(key)
            partial = archive.with_name(archive.name + ".partial")
            with tarfile.open(partial, "w:gz") as tar:
                for index, path in enumerate(paths):
                    if os.path.exists(path):
                        tar.add(path, arcname=str(index))
                    else:
                        logger.warning("Cache path does not exist, skipping: %s", path)
            # rename last so a crashed save never looks like a hit
            partial.replace(archive)
        except (OSError, tarfile.TarError) as e:
            if partial is not None:
                partial.unlink(missing_ok=True)
            logger.warning("Failed to save cache entry for %s: %s", key, e)
            return None
        return archive.name
