"""Flyer extraction prompt for Gemini.

The area and category lists are module constants so they can be edited
without touching the prompt text.
"""

from datetime import date

# Gemini model constant -- update here when stable version releases
GEMINI_MODEL = "gemini-3-flash-preview"

AREAS = ["San Francisco", "Oakland", "Berkeley", "Other"]

EVENT_TYPES = [
    "Multi Media", "Music", "Visual Art", "Theater", "Poetry/Lit", "Meetup",
    "Dance", "Workshop", "Open Mic", "Film", "Lecture", "Drag", "Festival",
    "Market", "Party", "Sound Bath", "Clothing Swap", "Food/Bev",
    "Something Else", "Fashion Show", "Comedy",
]

_PROMPT_TEMPLATE = """\
You are an expert event extractor. Given the attached image of a flyer, extract all event details.

Required Fields (use null if unavailable):
- title (string): Main event title, excluding date/time/location
- address (string): Physical address, or indicate virtual status ("Virtual", "Remote", "Zoom", or "Online")
- location (string): The city or geographical area. Must be one of: {areas}
- type (string): The type of event. Must be one of: {event_types}
- startDay (string | null): ISO date format (YYYY-MM-DD). Must be null if no date is found. Set the year to {year} if not specified.
- startTime (string | null): In hours and minutes (HH:mm, 24-hour). Must be null if no time is found
- description (string): A detailed description of the event, at minimum copied from the flyer.
- cost (string | null): The cost of the event in dollars, or "Free" ONLY if it is explicitly stated. Must be null if no cost is found.

Optional Fields (use null if unavailable):
- endDay (string | null): ISO date format (YYYY-MM-DD). Must be null if no end date is found. Set the year to {year} if not specified.
- endTime (string | null): In hours and minutes (HH:mm, 24-hour)

Special Cases:
- Virtual events: Recognize various indicators ("Virtual", "Remote", "Zoom", "Online", "Webinar") and standardize in location field as "Virtual"
- Recurring events: Extract only the next occurrence
- Hybrid events: Include both physical and virtual locations, separated by " & "
- Multi-venue events: List all venues, separated by " | "
- All-day events: Use null for startTime and endTime
- Multi-day events: Include both startDay and endDay
- Dates: Never infer or guess dates - if not explicitly stated, use null.

Return only valid JSON of the form {{"events": [...]}}. If no events are found, return {{"events": []}}.
"""


def build_extraction_prompt(default_year: int | None = None) -> str:
    """Return the extraction prompt, assuming default_year (or this year) for dates without one."""
    year = default_year or date.today().year
    return _PROMPT_TEMPLATE.format(
        areas=", ".join(AREAS),
        event_types=", ".join(EVENT_TYPES),
        year=year,
    )
