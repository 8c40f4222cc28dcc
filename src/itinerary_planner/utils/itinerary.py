"""
Parsing and formatting of generated work plans.
"""

import json
import logging
from typing import List

from ..core.state import ItineraryEntry

class ItineraryParseError(ValueError):
    """Raised when response text is not a plan with an 'entries' list."""

ENTRY_FIELDS = ("day", "date", "activities")

def _strip_fence(text: str) -> str:
    json_str = text.strip()
    if "```json" in json_str:
        json_str = json_str.split("```json")[1].split("```")[0].strip()
    elif not json_str.startswith('{'):
        start_index = json_str.find('{')
        end_index = json_str.rfind('}')
        if start_index != -1 and end_index != -1 and start_index < end_index:
            json_str = json_str[start_index:end_index + 1]
    return json_str

def parse_itinerary(text: str) -> List[ItineraryEntry]:
    """
    Parses generated response text into plan entries.
    Accepts a bare JSON object or one wrapped in a ```json fence.
    """
    try:
        parsed = json.loads(_strip_fence(text))
    except json.JSONDecodeError as e:
        raise ItineraryParseError(f"Failed to parse plan JSON: {e}") from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("entries"), list):
        raise ItineraryParseError("Parsed JSON has incorrect structure: expected an 'entries' list.")

    entries = []
    for position, item in enumerate(parsed["entries"]):
        if not isinstance(item, dict):
            raise ItineraryParseError(f"Entry {position} is not an object.")
        for name in ENTRY_FIELDS:
            if not isinstance(item.get(name), str):
                raise ItineraryParseError(f"Entry {position} is missing string field '{name}'.")
        entries.append(ItineraryEntry(day=item["day"], date=item["date"], activities=item["activities"]))

    logging.info(f"Parsed plan with {len(entries)} entries.")
    return entries

def itinerary_to_markdown(entries: List[ItineraryEntry]) -> str:
    """Formats plan entries as markdown, one section per day."""
    sections = []
    for entry in entries:
        heading = f"## {entry['day']}"
        if entry["date"]:
            heading += f" ({entry['date']})"
        sections.append(f"{heading}\n\n{entry['activities'].strip()}")
    return "\n\n".join(sections)
