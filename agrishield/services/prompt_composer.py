from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate, PromptTemplate

from agrishield.models.chat import Location
from agrishield.prompts.farming_assistant_system_prompt import (
    FARMING_ASSISTANT_SYSTEM_PROMPT,
    LANGUAGE_ACKNOWLEDGEMENT,
    LANGUAGE_DECLARATION,
)

DATE_NOT_AVAILABLE = "Not available"
LOCATION_NOT_AVAILABLE = "User's location is not available."
LOCATION_LABEL = "User's Approximate Location (Latitude, Longitude)"

DateInput = Union[str, date, datetime, None]
LocationInput = Union[Location, Mapping[str, Any], None]

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


# Non-ISO layouts commonly produced by browsers and spreadsheets.
_FALLBACK_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%A, %B %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a, %d %b %Y %H:%M:%S GMT",
)


def _parse_date(value: DateInput) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text).date()
    except ValueError:
        pass

    for date_format in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, date_format).date()
        except ValueError:
            continue
    return None


def format_prompt_date(value: DateInput) -> str:
    """Long English calendar date, e.g. ``Saturday, June 1, 2024``.

    Accepts ISO-8601 strings (trailing ``Z`` allowed) and a few common
    non-ISO layouts such as ``2024/06/01``, ``06/01/2024`` (month first) and
    ``June 1, 2024``. The calendar day of the timestamp is used as given; no
    timezone shift is applied. Missing or unparseable input yields
    ``Not available``.
    """
    parsed = _parse_date(value)
    if parsed is None:
        return DATE_NOT_AVAILABLE
    return (
        f"{_WEEKDAYS[parsed.weekday()]}, "
        f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"
    )


def _coerce_location(value: LocationInput) -> Optional[Location]:
    if value is None or isinstance(value, Location):
        return value
    if isinstance(value, Mapping):
        return Location.model_validate(dict(value))
    return None


def _format_coordinate(value: float, positive: str, negative: str) -> str:
    # Whole seconds keep the position approximate.
    total_seconds = round(abs(value) * 3600)
    degrees, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    hemisphere = positive if value >= 0 else negative
    return f"{degrees}°{minutes:02d}'{seconds:02d}\"{hemisphere}"


def format_location_info(value: LocationInput) -> str:
    location = _coerce_location(value)
    if not location or not location.lat or not location.lon:
        return LOCATION_NOT_AVAILABLE

    latitude = _format_coordinate(location.lat, "N", "S")
    longitude = _format_coordinate(location.lon, "E", "W")
    return f"{LOCATION_LABEL}: {latitude}, {longitude}"


def create_system_prompt(location: LocationInput, date_value: DateInput) -> str:
    prompt = PromptTemplate.from_template(FARMING_ASSISTANT_SYSTEM_PROMPT)
    return prompt.format(
        formatted_date=format_prompt_date(date_value),
        location_info=format_location_info(location),
    )


def build_model_messages(
    message: str,
    language: str,
    location: LocationInput = None,
    date_value: DateInput = None,
) -> list[BaseMessage]:
    """Messages submitted upstream: system prompt, language scaffold, user turn.

    Earlier turns of the conversation are not included.
    """
    prompt = ChatPromptTemplate.from_messages(
        [
            ("system", "{system_prompt}"),
            ("human", LANGUAGE_DECLARATION),
            ("ai", LANGUAGE_ACKNOWLEDGEMENT),
            ("human", "{message}"),
        ]
    )
    return prompt.format_messages(
        system_prompt=create_system_prompt(location, date_value),
        language=language,
        message=message,
    )
