import threading
from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from bytediff.main import app
from bytediff.repositories.base import SideStore
from bytediff.repositories.memory_store import MemorySideStore
from bytediff.routers.diff import get_diff_service
from bytediff.services.diff_service import DiffService


class ScriptedSideStore(SideStore):
    """
    Per-side store whose reads are driven by the test: each side can return
    bytes, None (absent) or raise, and can be held back until an event is set.
    """

    reads_per_side = True

    def __init__(self, results: Dict[str, object], gates: Optional[Dict[str, threading.Event]] = None):
        self.results = results
        self.gates = gates or {}
        self.finished = []
        self.saved = {}
        self._lock = threading.Lock()

    def save_side(self, identifier, side, data):
        self.saved[(identifier, side)] = data

    def get_sides_by_identifier(self, identifier):
        raise AssertionError("per-side stores are read through get_side")

    def get_side(self, identifier, side):
        gate = self.gates.get(side)
        if gate is not None:
            assert gate.wait(timeout=5), f"gate for {side} never opened"
        try:
            result = self.results.get(side)
            if isinstance(result, BaseException):
                raise result
            return result
        finally:
            with self._lock:
                self.finished.append(side)


@pytest.fixture
def store():
    return MemorySideStore()


@pytest.fixture
def service(store):
    return DiffService(store)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_diff_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def scripted_store():
    return ScriptedSideStore
