# namecraft/storage/store.py
import re
import logging
from pathlib import Path
from typing import List, Optional

class JsonFileStore:
    """Local key-value store keeping each value as a UTF-8 text file"""

    KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.logger = logging.getLogger(__name__)

    def _path(self, key: str) -> Path:
        if not self.KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        """Return the stored text for key, or None if nothing was stored yet"""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Error reading {path}: {e}")
            raise

    def set(self, key: str, text: str):
        """Replace the whole value stored under key"""
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)

            # Write to a temporary file first, then rename (atomic write)
            temp_path = path.with_suffix(".tmp")
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            self.logger.error(f"Error writing {path}: {e}")
            raise

    def delete(self, key: str) -> bool:
        path = self._path(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def keys(self) -> List[str]:
        if not self.directory.exists():
            return []
        return sorted(path.stem for path in self.directory.glob("*.json"))
