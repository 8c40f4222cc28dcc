"""
Core components: form state, persistence, history and generation.
"""

from .state import FormState, ItineraryEntry, FORM_FIELDS, empty_form_state
from .store import KeyValueStore, MemoryStore, JsonFileStore, FormStateStore, StoredStateError
from .history import HistoryManager
from .generator import GenerationConfig, ContentGenerator, build_request_text

__all__ = [
    'FormState',
    'ItineraryEntry',
    'FORM_FIELDS',
    'empty_form_state',
    'KeyValueStore',
    'MemoryStore',
    'JsonFileStore',
    'FormStateStore',
    'StoredStateError',
    'HistoryManager',
    'GenerationConfig',
    'ContentGenerator',
    'build_request_text'
]
