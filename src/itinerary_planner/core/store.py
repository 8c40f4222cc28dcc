"""
Key/value persistence for the current form state.

Values are JSON text stored under string keys, the same layout the web
front end keeps in browser local storage.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ..config.settings import FORM_STATE_KEY
from .state import FORM_FIELDS, FormState

class StoredStateError(ValueError):
    """Raised when a stored value does not have the shape of a form state."""

class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

class MemoryStore:
    """In-process store, nothing survives the interpreter."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

class JsonFileStore:
    """Store backed by a single JSON object file mapping keys to text values."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        values = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(values, dict):
            raise StoredStateError(f"Store file {self.path} must hold a JSON object, got {type(values).__name__}")
        return values

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StoredStateError(f"Value for '{key}' in {self.path} must be a string, got {type(value).__name__}")
        return value

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Atomic swap, the file is never half-written
        temp_path = self.path.with_name(self.path.name + ".tmp")
        temp_path.write_text(
            json.dumps(values, ensure_ascii=False, indent=2),
            encoding="utf-8"
        )
        temp_path.replace(self.path)

def dump_record(record: FormState) -> Dict[str, Any]:
    """Copies the known fields of a record, in field order."""
    return {field: record[field] for field in FORM_FIELDS}

def coerce_record(data: Any) -> FormState:
    """Checks decoded JSON against the form state shape."""
    if not isinstance(data, dict):
        raise StoredStateError(f"Expected a JSON object, got {type(data).__name__}")

    missing = [field for field in FORM_FIELDS if field not in data]
    if missing:
        raise StoredStateError(f"Stored form state is missing fields: {', '.join(missing)}")

    for field in FORM_FIELDS:
        if not isinstance(data[field], str):
            raise StoredStateError(f"Field '{field}' must be a string, got {type(data[field]).__name__}")

    return FormState(**{field: data[field] for field in FORM_FIELDS})

class FormStateStore:
    """Single-slot persistence of the current form state."""

    def __init__(self, store: KeyValueStore, key: str = FORM_STATE_KEY):
        self.store = store
        self.key = key

    def save_form_state(self, record: FormState) -> None:
        """Overwrites the saved form state. Serialization errors propagate."""
        payload = json.dumps(dump_record(record))
        self.store.set(self.key, payload)
        logging.info(f"Saved form state under key '{self.key}'.")

    def load_form_state(self) -> Optional[FormState]:
        """
        Returns the saved form state, or None if nothing was saved.
        Malformed stored data raises ValueError (JSONDecodeError or StoredStateError).
        """
        raw = self.store.get(self.key)
        if raw is None:
            return None
        return coerce_record(json.loads(raw))
