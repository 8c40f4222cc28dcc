"""
Utility functions for the itinerary planner.
"""

from .markdown import render_markdown
from .itinerary import ItineraryParseError, parse_itinerary, itinerary_to_markdown

__all__ = ['render_markdown', 'ItineraryParseError', 'parse_itinerary', 'itinerary_to_markdown']
