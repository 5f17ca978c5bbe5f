import json
import os
import threading
from typing import Dict, Optional

from ..domain.repositories import SessionStore
from ...common.logging import setup_logger

logger = setup_logger(__name__)


class InMemorySessionStore(SessionStore):
    """
    Keeps the session in process memory. Lost on restart.
    """
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class JsonFileSessionStore(SessionStore):
    """
    Persists the session as a flat JSON object on disk.
    Every write rewrites the whole file.
    """
    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, mode='r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        with open(self.path, mode='w', encoding='utf-8') as f:
            json.dump(data, f)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    def clear(self) -> None:
        with self._lock:
            if os.path.exists(self.path):
                os.remove(self.path)


def create_session_store(backend: str, path: str = "data/session.json") -> SessionStore:
    if backend == "file":
        return JsonFileSessionStore(path)
    if backend == "memory":
        return InMemorySessionStore()
    raise ValueError(f"Unknown session backend: {backend}")
