# Standard Library
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_PATH = Path.home() / ".sculpture_shop" / "storage.json"


class MemoryStorage:
    """String key/value storage with the browser localStorage interface."""

    def __init__(self, items=None):
        self._items = dict(items or {})

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)
        self._save()

    def remove_item(self, key):
        if self._items.pop(key, None) is not None:
            self._save()

    def clear(self):
        self._items.clear()
        self._save()

    def keys(self):
        return list(self._items)

    def _save(self):
        pass


class LocalStorage(MemoryStorage):
    """MemoryStorage backed by a JSON file, rewritten on every change."""

    def __init__(self, path=None):
        self.path = Path(path or os.environ.get("SHOP_CLIENT_STORAGE") or DEFAULT_STORAGE_PATH)
        super().__init__(self._load())

    def _load(self):
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(self._items, fh, indent=2, sort_keys=True)
        os.replace(tmp, self.path)
