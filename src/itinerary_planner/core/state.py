"""State definitions for the itinerary planner."""

from typing import TypedDict

class FormState(TypedDict):
    """Snapshot of one planning session as entered in the form."""
    businessName: str
    projectName: str
    additionalContext: str
    studentDepartment: str

    # Generated plan, markdown formatted
    response: str

class ItineraryEntry(TypedDict):
    """One day of a generated plan."""
    day: str
    date: str
    activities: str

FORM_FIELDS = (
    "businessName",
    "projectName",
    "additionalContext",
    "studentDepartment",
    "response",
)

def empty_form_state() -> FormState:
    return FormState(
        businessName="",
        projectName="",
        additionalContext="",
        studentDepartment="",
        response="",
    )
