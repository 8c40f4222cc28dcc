from __future__ import annotations

import json

import pytest

from itinerary_planner.utils.itinerary import ItineraryParseError, itinerary_to_markdown, parse_itinerary
from itinerary_planner.utils.markdown import render_markdown


def test_heading_renders_h1():
    assert "<h1>Hello</h1>" in render_markdown("# Hello")


def test_bold_renders_strong():
    assert "<strong>bold</strong>" in render_markdown("**bold**")


def test_empty_input_renders_blank():
    assert render_markdown("").strip() == ""


def test_irregular_input_does_not_raise():
    html = render_markdown("**unclosed *emphasis\n\n<div>\n- item\n  1. nested")

    assert "item" in html


def test_parse_itinerary_returns_entries():
    text = json.dumps(
        {
            "entries": [
                {"day": "Day 1", "date": "Week 1 - Monday", "activities": "- Meet the client"},
                {"day": "Day 2", "date": "Week 1 - Tuesday", "activities": "- Draft scope"},
            ]
        }
    )

    entries = parse_itinerary(text)

    assert [entry["day"] for entry in entries] == ["Day 1", "Day 2"]
    assert entries[0]["activities"] == "- Meet the client"


def test_parse_itinerary_accepts_fenced_json():
    text = '```json\n{"entries": [{"day": "Day 1", "date": "", "activities": "x"}]}\n```'

    assert parse_itinerary(text) == [{"day": "Day 1", "date": "", "activities": "x"}]


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"itinerary": []}',
        '{"entries": {}}',
        '{"entries": ["Day 1"]}',
        '{"entries": [{"day": "Day 1", "date": "Mon"}]}',
        '{"entries": [{"day": 1, "date": "Mon", "activities": "x"}]}',
    ],
)
def test_parse_itinerary_rejects_bad_shapes(text):
    with pytest.raises(ItineraryParseError):
        parse_itinerary(text)


def test_itinerary_markdown_renders_one_section_per_day():
    entries = [
        {"day": "Day 1", "date": "Mon", "activities": "- Kickoff"},
        {"day": "Day 2", "date": "", "activities": "- Build"},
    ]

    markdown = itinerary_to_markdown(entries)
    html = render_markdown(markdown)

    assert "## Day 1 (Mon)" in markdown
    assert "## Day 2\n" in markdown
    assert html.count("<h2>") == 2
    assert "<li>Kickoff</li>" in html
