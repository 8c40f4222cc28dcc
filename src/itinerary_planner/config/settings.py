"""
Configuration settings and constants for the itinerary planner.
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# API Keys
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY")

# Model / transport
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")
GENERATION_TIMEOUT_SECONDS = float(os.environ.get("GENERATION_TIMEOUT_SECONDS", "60"))

# Local state file used in place of browser storage
STORE_PATH = Path(
    os.environ.get("ITINERARY_STORE_PATH", Path.home() / ".itinerary_planner" / "store.json")
)

# Storage keys, shared with the web front end
FORM_STATE_KEY = "formState"
HISTORY_KEY = "history"

# System Prompt
SYSTEM_PROMPT = """You are a project planning assistant for university students working with a partner business.

You will receive the business name, the project name, the student's department and any additional context.
Produce a realistic day-by-day work plan for the project.

**Output rules:**

1.  Reply with a single JSON object only. No prose before or after it.
2.  The object must have a root key "entries" whose value is a list of daily plan objects.
3.  Each daily plan object must contain:
    *   `day`: Label for the day, e.g. "Day 1" (String)
    *   `date`: Calendar date or week reference, e.g. "Week 1 - Monday" (String)
    *   `activities`: What the student does that day, written as markdown bullet points (String)
4.  Tailor the activities to the student's department and to the business context.
5.  Keep the plan achievable. Do not invent facts about the business beyond what was given.
"""

# Response schema handed to the generation service
ITINERARY_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "entries": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "required": ["day", "date", "activities"],
                "properties": {
                    "day": {"type": "STRING"},
                    "date": {"type": "STRING"},
                    "activities": {"type": "STRING"},
                },
            },
        },
    },
    "required": ["entries"],
}

# LLM Configuration
GEMINI_MODEL_CONFIG = {
    "model": GEMINI_MODEL,
    "response_mime_type": "application/json",
    "timeout_seconds": GENERATION_TIMEOUT_SECONDS,
}

# Logging Configuration
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - [%(levelname)s] - %(message)s'
)

def validate_api_keys() -> bool:
    """Validate that all required API keys are present."""
    missing_keys = []

    if not GEMINI_API_KEY:
        missing_keys.append("GEMINI_API_KEY")
        logging.error("GEMINI_API_KEY not found. Generation will not function.")

    if missing_keys:
        logging.error(f"Missing required API keys: {', '.join(missing_keys)}")
        return False

    return True

def default_generation_config():
    """Builds the immutable generation config from the settings above."""
    from ..core.generator import GenerationConfig

    return GenerationConfig(
        model=GEMINI_MODEL_CONFIG["model"],
        system_instruction=SYSTEM_PROMPT,
        response_schema=ITINERARY_SCHEMA,
        response_mime_type=GEMINI_MODEL_CONFIG["response_mime_type"],
        timeout_seconds=GEMINI_MODEL_CONFIG["timeout_seconds"],
    )
