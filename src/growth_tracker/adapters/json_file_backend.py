"""Key-value backend that keeps one JSON file per key."""

from dataclasses import dataclass
from pathlib import Path

from growth_tracker.services.store import KeyValueBackend


@dataclass
class JsonFileBackend(KeyValueBackend):
    """Stores each key as ``<directory>/<key>.json``."""

    directory: Path

    def load(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def save(self, key: str, data: bytes) -> None:
        """Write through a temp file, then rename over the target."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_name(f"{path.name}.tmp")
        tmp_path.write_bytes(data)
        tmp_path.replace(path)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
