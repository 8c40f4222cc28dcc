"""
Configuration settings and constants for the itinerary planner.
"""

from .settings import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    GENERATION_TIMEOUT_SECONDS,
    STORE_PATH,
    FORM_STATE_KEY,
    HISTORY_KEY,
    SYSTEM_PROMPT,
    ITINERARY_SCHEMA,
    validate_api_keys,
    default_generation_config
)

__all__ = [
    'GEMINI_API_KEY',
    'GEMINI_MODEL',
    'GENERATION_TIMEOUT_SECONDS',
    'STORE_PATH',
    'FORM_STATE_KEY',
    'HISTORY_KEY',
    'SYSTEM_PROMPT',
    'ITINERARY_SCHEMA',
    'validate_api_keys',
    'default_generation_config'
]
