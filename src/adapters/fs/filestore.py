import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSystemStore:
    """Rendered chart cache on local disk, rooted at ``base_path``."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path).resolve()
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def save(self, name: str, data: bytes) -> str:
        """Save rendered bytes and return the path relative to the base."""
        target = self._safe_path(name)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug("Stored %d bytes at %s", len(data), name)
        return str(target.relative_to(self.base_path))

    def get(self, path: str) -> bytes:
        """Retrieve rendered bytes by path. Raises FileNotFoundError."""
        target = self._safe_path(path)
        if not target.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return target.read_bytes()

    def delete(self, path: str) -> None:
        target = self._safe_path(path)
        if target.exists():
            os.remove(target)
