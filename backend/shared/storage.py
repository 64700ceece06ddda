"""Key-value blob storage for local game data.

Each key maps to one file under the storage directory. Files are written
atomically (temp file, fsync, rename) with owner-only permissions (0o600)
inside an owner-only directory (0o700), so readers never observe a partially
written blob.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()

# Owner-only directory permissions for blob storage.
_BLOB_DIR_MODE = 0o700

# Owner-only file permissions for blob files.
_BLOB_FILE_MODE = 0o600


class BlobStorage(Protocol):
    """Protocol for a key-value store of opaque byte blobs."""

    def read(self, key: str) -> bytes | None: ...

    def write(self, key: str, content: bytes) -> None: ...


class InMemoryBlobStorage:
    """Dictionary-backed blob storage for tests and ephemeral sessions."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    def read(self, key: str) -> bytes | None:
        return self._blobs.get(key)

    def write(self, key: str, content: bytes) -> None:
        self._blobs[key] = bytes(content)


class LocalBlobStorage:
    """Stores blobs as files on the local filesystem.

    Files are created with owner-only read/write (0o600) inside an
    owner-only directory (0o700) as a filesystem hygiene measure.
    """

    def __init__(self, storage_dir: str | Path) -> None:
        self._storage_dir = Path(storage_dir).resolve()

    def _path_for(self, key: str) -> Path:
        target = (self._storage_dir / f"{key}.blob").resolve()
        if not target.is_relative_to(self._storage_dir):
            raise ValueError(f"Path traversal rejected: '{key}' resolves outside storage directory")
        return target

    def read(self, key: str) -> bytes | None:
        """Return the blob stored under key, or None when nothing was written yet."""
        target = self._path_for(key)
        if not target.exists():
            return None
        return target.read_bytes()

    def write(self, key: str, content: bytes) -> None:
        """Atomically replace the blob stored under key.

        Creates the directory lazily on first write with owner-only permissions
        (0o700). Rejects keys that would place the file outside the storage root.
        """
        target = self._path_for(key)

        self._storage_dir.mkdir(mode=_BLOB_DIR_MODE, parents=True, exist_ok=True)
        self._storage_dir.chmod(_BLOB_DIR_MODE)

        fd, tmp_path = tempfile.mkstemp(dir=str(self._storage_dir), suffix=".tmp", prefix=".blob_")
        fd_owned = True
        try:
            with os.fdopen(fd, "wb") as f:
                fd_owned = False  # os.fdopen took ownership; it will close fd
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _BLOB_FILE_MODE)  # noqa: PTH101
            Path(tmp_path).replace(target)
        except BaseException:
            if fd_owned:
                with contextlib.suppress(OSError):
                    os.close(fd)
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        logger.debug("saved blob", key=key, path=str(target), size=len(content))
