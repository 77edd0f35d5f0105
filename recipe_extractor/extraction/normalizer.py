"""
Text Normalization Module
=========================

Pure text helpers shared by every extractor: whitespace collapsing,
delimiter splitting, ISO-8601 durations, fractions and recipe yields.
"""

from __future__ import annotations

import math
import re
from typing import Any

WHITESPACE_RE = re.compile(r"\s+")

# ISO-8601 duration, e.g. "PT1H30M", "P1DT2H", "P2W"
DURATION_RE = re.compile(
    r"^P(?!$)"
    r"(?:(?P<years>\d+(?:[.,]\d+)?)Y)?"
    r"(?:(?P<months>\d+(?:[.,]\d+)?)M)?"
    r"(?:(?P<weeks>\d+(?:[.,]\d+)?)W)?"
    r"(?:(?P<days>\d+(?:[.,]\d+)?)D)?"
    r"(?:T(?=\d)"
    r"(?:(?P<hours>\d+(?:[.,]\d+)?)H)?"
    r"(?:(?P<minutes>\d+(?:[.,]\d+)?)M)?"
    r"(?:(?P<seconds>\d+(?:[.,]\d+)?)S)?"
    r")?$",
    re.I,
)

DURATION_SECONDS: dict[str, float] = {
    "years": 365 * 86400,
    "months": 30 * 86400,
    "weeks": 7 * 86400,
    "days": 86400,
    "hours": 3600,
    "minutes": 60,
    "seconds": 1,
}

FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

# Headings sometimes left at the start of an instructions blob
INSTRUCTION_HEADINGS: list[str] = [
    "Preparation",
    "Directions",
    "Instructions",
    "Method",
    "Steps",
]

# Yield units as (singular, plural); the longest matching keyword wins
RECIPE_YIELD_TYPES: list[tuple[str, str]] = [
    ("dozen", "dozen"),
    ("batch", "batches"),
    ("cake", "cakes"),
    ("sandwich", "sandwiches"),
    ("bun", "buns"),
    ("cookie", "cookies"),
    ("muffin", "muffins"),
    ("cupcake", "cupcakes"),
    ("loaf", "loaves"),
    ("pie", "pies"),
    ("cup", "cups"),
    ("pint", "pints"),
    ("gallon", "gallons"),
    ("ounce", "ounces"),
    ("pound", "pounds"),
    ("gram", "grams"),
    ("liter", "liters"),
    ("piece", "pieces"),
    ("layer", "layers"),
    ("scoop", "scoops"),
    ("bar", "bars"),
    ("patty", "patties"),
    ("hamburger bun", "hamburger buns"),
    ("pancake", "pancakes"),
    ("item", "items"),
]

YIELD_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?")
YIELD_RANGE_RE = re.compile(r"(\d+(?:\.\d*)?)\s*(?:to|-|–)\s*\d+(?:\.\d*)?", re.I)
YIELD_ITEMS_RE = re.compile(
    r"\bsandwiches\b|\btacquitos\b|\bmakes\b|\bcups\b|\bappetizer\b|\bporzioni\b|\bcookies\b|\b(?:large |small )?buns\b",
    re.I,
)


def normalize_string(value: Any) -> str:
    """
    Trim a string and collapse internal whitespace runs to single spaces.

    None becomes an empty string.
    """
    if value is None:
        return ""
    return WHITESPACE_RE.sub(" ", str(value)).strip()


def split_to_list(value: str | None, separator: str | re.Pattern[str] = ",") -> list[str]:
    """
    Split a string on a separator, normalizing items and dropping empties.

    Args:
        value: The string to split
        separator: A literal separator or a compiled regex

    Returns:
        List of non-empty normalized items
    """
    if not value:
        return []

    if isinstance(separator, re.Pattern):
        parts = separator.split(value)
    else:
        parts = value.split(separator)

    items = []
    for part in parts:
        item = normalize_string(part)
        if item:
            items.append(item)
    return items


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def parse_minutes(value: str) -> int:
    """
    Convert an ISO-8601 duration to whole minutes (rounded).

    Args:
        value: Duration text, e.g. "PT1H30M"

    Returns:
        Duration in minutes

    Raises:
        ValueError: If the value is empty or not an ISO-8601 duration
    """
    text = normalize_string(value)
    match = DURATION_RE.match(text)
    if not text or match is None:
        raise ValueError(f"Invalid ISO-8601 duration: {value!r}")

    total_seconds = 0.0
    for unit, seconds in DURATION_SECONDS.items():
        amount = match.group(unit)
        if amount:
            total_seconds += float(amount.replace(",", ".")) * seconds

    return round_half_up(total_seconds / 60)


def parse_fraction(value: str) -> float:
    """
    Parse a quantity that may contain a fraction.

    Handles unicode fractions ("½", "1⅔"), mixed numbers ("1 1/2"),
    simple fractions ("3/4") and decimals.

    Raises:
        ValueError: If the text is not a recognized quantity
    """
    text = value.strip()

    for symbol, fraction in FRACTIONS.items():
        if symbol in text:
            whole = text.split(symbol, 1)[0].strip()
            return (float(whole) if whole else 0.0) + fraction

    mixed = re.fullmatch(r"(\d+)\s+(\d+)\s*/\s*(\d+)", text)
    if mixed:
        whole, numerator, denominator = mixed.groups()
        return int(whole) + _divide(numerator, denominator, text)

    simple = re.fullmatch(r"(\d+)\s*/\s*(\d+)", text)
    if simple:
        return _divide(*simple.groups(), text)

    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Unrecognized fraction format: {text}") from None


def _divide(numerator: str, denominator: str, text: str) -> float:
    if int(denominator) == 0:
        raise ValueError(f"Fraction has zero denominator: {text}")
    return int(numerator) / int(denominator)


def parse_yields(value: str) -> str:
    """
    Parse a yield string into "<n> <unit>".

    A range ("4-6", "4 to 6") collapses to its first number. When the text
    names a known unit, the longest matching unit keyword wins; otherwise
    the yield is reported in items (for item-like words) or servings.

    Examples:
        "4 servings" -> "4 servings"
        "4-6 servings" -> "4 servings"
        "1 loaf" -> "1 loaf"

    Raises:
        ValueError: If the value is empty
    """
    text = normalize_string(value)
    if not text:
        raise ValueError("Yield value is required")

    text = YIELD_RANGE_RE.sub(r"\1", text)
    number_match = YIELD_NUMBER_RE.search(text)
    amount = number_match.group() if number_match else "0"
    quantity = float(amount)

    lowered = text.lower()
    best_match: str | None = None
    best_length = 0
    for singular, plural in RECIPE_YIELD_TYPES:
        for keyword in (singular, plural):
            if len(keyword) <= best_length:
                continue
            if re.search(rf"\b{re.escape(keyword)}\b", lowered):
                best_length = len(keyword)
                best_match = f"{amount} {singular if quantity == 1 else plural}"

    if best_match:
        return best_match

    suffix = "s" if quantity > 1 or quantity == 0 else ""
    if YIELD_ITEMS_RE.search(text):
        return f"{amount} item{suffix}"
    return f"{amount} serving{suffix}"


def remove_instruction_heading(value: str) -> str:
    """Remove a leading "Directions:"-style heading from instructions text."""
    for heading in INSTRUCTION_HEADINGS:
        pattern = re.compile(rf"^\s*{heading}\s*:?\s*", re.I)
        if pattern.match(value):
            return pattern.sub("", value, count=1)
    return value


def split_instructions(value: str) -> list[str]:
    """
    Split an instructions blob into steps.

    Splits on blank lines first, then on sentence boundaries when the
    text turns out to be a single paragraph.
    """
    if not value:
        return []

    cleaned = remove_instruction_heading(value).strip()
    steps = split_to_list(cleaned, re.compile(r"\n\s*\n+"))

    if len(steps) == 1:
        steps = split_to_list(cleaned, re.compile(r"(?<=\.)\s+(?=[A-Z])"))

    return steps
