"""
Persistent key-value storage for client state.

A single JSON file holding string entries (token, user, theme), the
equivalent of a browser's local storage.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class FileStorage:
    """String key-value store persisted to a JSON file"""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Storage file {self.path} does not hold an object, ignoring it")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.chmod(0o600)  # rw-------
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        self.update({key: value})

    def update(self, values: Dict[str, str]) -> None:
        """Write several entries in one file write."""
        data = self._read()
        data.update(values)
        self._write(data)

    def remove_item(self, *keys: str) -> None:
        data = self._read()
        if not any(key in data for key in keys):
            return
        for key in keys:
            data.pop(key, None)
        self._write(data)
