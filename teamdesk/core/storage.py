"""
File storage for uploaded documents.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from teamdesk.core.config import settings


class StorageError(RuntimeError):
    pass


class Storage:
    def put_bytes(self, key: str, data: bytes) -> str:
        """Store ``data`` under ``key`` and return its location."""
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class LocalStorage(Storage):
    root: Path

    def _path(self, key: str) -> Path:
        safe_key = Path(key.replace("\\", "/")).name
        if not safe_key or safe_key in (".", ".."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.root / safe_key

    def put_bytes(self, key: str, data: bytes) -> str:
        p = self._path(key)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return str(p)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def get_upload_storage() -> Storage:
    return LocalStorage(root=Path(settings.UPLOAD_DIR))
