"""Append-only history of saved form states."""

import json
import logging
from typing import List, Optional

from ..config.settings import HISTORY_KEY
from .state import FormState
from .store import KeyValueStore, StoredStateError, coerce_record, dump_record

class HistoryManager:
    """
    Ordered list of past form states kept under one store key.

    Appends are read-modify-write with no locking: two writers sharing the
    same store can lose each other's entries.
    """

    def __init__(self, store: KeyValueStore, key: str = HISTORY_KEY):
        self.store = store
        self.key = key

    def get_history(self) -> List[FormState]:
        """Returns every entry in save order; an empty list when nothing is stored."""
        raw = self.store.get(self.key)
        if raw is None:
            return []

        data = json.loads(raw)
        if not isinstance(data, list):
            raise StoredStateError(f"Expected a JSON array for '{self.key}', got {type(data).__name__}")
        return [coerce_record(item) for item in data]

    def append_to_history(self, record: FormState) -> None:
        history = [dump_record(entry) for entry in self.get_history()]
        history.append(dump_record(record))
        self.store.set(self.key, json.dumps(history))
        logging.info(f"Appended entry {len(history) - 1} to '{self.key}'.")

    def get_history_entry(self, index: int) -> Optional[FormState]:
        """Returns the entry at a zero-based position, or None when out of range."""
        history = self.get_history()
        if 0 <= index < len(history):
            return history[index]
        return None
