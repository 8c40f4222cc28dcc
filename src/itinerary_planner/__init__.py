"""
Project itinerary planner: Gemini-backed plan generation, markdown rendering
and persisted form state with history.
"""

__version__ = "0.1.0"
