"""JSON file storage for local preferences."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from hydration_tracker.services.goals import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Key-value store persisted as a single JSON object on disk."""

    path: Path

    def get(self, key: str) -> object | None:
        """Return the stored value for a key."""
        return self._load().get(key)

    def set(self, key: str, value: object) -> None:
        """Persist a value, replacing the file atomically."""
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self.path)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            logger.warning("Cannot read preferences file %s", self.path)
            return {}
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt preferences file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}
