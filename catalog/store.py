import json
import logging
import os
import tempfile
import threading
import time

logger = logging.getLogger(__name__)


class ProductStore:
    """Capability the routes depend on: read the whole collection, replace it.

    ``lock`` must be held around a read-modify-write cycle.
    """

    def __init__(self):
        self.lock = threading.RLock()

    def list(self):
        raise NotImplementedError

    def save_all(self, items):
        raise NotImplementedError


class JsonFileStore(ProductStore):
    """A JSON array in a single file, rewritten wholesale on every save."""

    def __init__(self, path):
        super().__init__()
        self.path = path

    def list(self):
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            items = json.load(f)
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise ValueError(f"{self.path} does not hold an array of objects")
        return items

    def save_all(self, items):
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2)
            os.replace(tmp_path, self.path)
            return True
        except (OSError, TypeError, ValueError):
            logger.exception("Error saving %s", self.path)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False


def new_id(prefix, taken):
    """Return ``<prefix><millis>``, advancing the clock value past ids in use."""
    millis = int(time.time() * 1000)
    while f"{prefix}{millis}" in taken:
        millis += 1
    return f"{prefix}{millis}"
