"""
Completed-item store.

The whole state is one flat list of item ids. Every mutation loads the
full list, changes it in memory and writes it back; last write wins.
"""
import json
import logging
import os
from typing import List, Protocol

logger = logging.getLogger(__name__)


class ProgressStore(Protocol):
    def read(self) -> List[str]: ...

    def mark_done(self, item_id: str) -> None: ...

    def mark_undone(self, item_id: str) -> None: ...

    def toggle(self, item_id: str) -> bool: ...


class _ListBackedStore:
    """Shared mutation rules; subclasses supply _load and _save."""

    def _load(self) -> List[str]:
        raise NotImplementedError

    def _save(self, completed: List[str]) -> None:
        raise NotImplementedError

    def read(self) -> List[str]:
        return self._load()

    def mark_done(self, item_id: str) -> None:
        completed = self._load()
        # Duplicates are only prevented here, not on load
        if item_id not in completed:
            completed.append(item_id)
            self._save(completed)

    def mark_undone(self, item_id: str) -> None:
        completed = [i for i in self._load() if i != item_id]
        self._save(completed)

    def toggle(self, item_id: str) -> bool:
        """Flip membership of item_id. Returns True if it is now done."""
        if item_id in self._load():
            self.mark_undone(item_id)
            return False
        self.mark_done(item_id)
        return True


class JsonFileProgressStore(_ListBackedStore):
    """Stores `{"completed": [...]}` in a single JSON file."""

    def __init__(self, path: str):
        self.path = path

    def ensure(self) -> None:
        """Create the file with an empty list if it does not exist yet."""
        if not os.path.exists(self.path):
            self._save([])

    def _load(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning("Progress file %s unreadable, treating as empty: %s", self.path, e)
            return []

        completed = data.get("completed") if isinstance(data, dict) else None
        if not isinstance(completed, list):
            logger.warning("Progress file %s has no completed list, treating as empty", self.path)
            return []
        return completed

    def _save(self, completed: List[str]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"completed": completed}, f)


class InMemoryProgressStore(_ListBackedStore):
    def __init__(self, completed=None):
        self._completed = list(completed or [])

    def _load(self) -> List[str]:
        return list(self._completed)

    def _save(self, completed: List[str]) -> None:
        self._completed = list(completed)
