import threading
from typing import Dict

from bytediff.repositories.base import SideStore, check_key_parts


class MemorySideStore(SideStore):
    """Process-local store; the default backend and the one tests run against."""

    def __init__(self):
        self._diffs: Dict[str, Dict[str, bytes]] = {}
        self._lock = threading.Lock()

    def save_side(self, identifier: str, side: str, data: bytes) -> None:
        check_key_parts(identifier, side)
        with self._lock:
            self._diffs.setdefault(identifier, {})[side] = bytes(data)

    def get_sides_by_identifier(self, identifier: str) -> Dict[str, bytes]:
        with self._lock:
            return dict(self._diffs.get(identifier, {}))
