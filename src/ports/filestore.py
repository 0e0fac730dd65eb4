from typing import Protocol


class FileStorePort(Protocol):
    def save(self, name: str, data: bytes) -> str:
        """Save rendered bytes and return the stored path."""
        ...

    def get(self, path: str) -> bytes:
        """Retrieve rendered bytes by path. Raises FileNotFoundError."""
        ...

    def delete(self, path: str) -> None: ...
