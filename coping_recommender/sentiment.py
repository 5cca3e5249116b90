"""
Keyword-based sentiment detection for chat text.

Three fixed keyword categories are scanned independently. Within a category
only the first matching term (in declared order) is recorded, so a text
yields at most one keyword per category.
"""

from enum import Enum

from .models import CopingCategory, SentimentResult

# Panic indicators, favour breathing and grounding
CRISIS_KEYWORDS: tuple[str, ...] = (
    "panic",
    "overwhelmed",
    "heart racing",
    "can't breathe",
    "scared",
    "terrified",
    "anxiety attack",
    "out of control",
    "dizzy",
    "shaking",
)

# Low mood indicators, favour reflection and cognitive work
LOW_MOOD_KEYWORDS: tuple[str, ...] = (
    "tired",
    "hopeless",
    "alone",
    "sad",
    "depressed",
    "empty",
    "worthless",
    "numb",
    "crying",
    "heavy",
    "dark",
)

# Stress indicators, favour movement and body-based work
STRESS_KEYWORDS: tuple[str, ...] = (
    "stressed",
    "overloaded",
    "too much",
    "pressure",
    "deadline",
    "exhausted",
    "tense",
    "tight",
    "sore",
    "headache",
)


def _first_match(text: str, keywords: tuple[str, ...]) -> str | None:
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def analyze_sentiment(text: str) -> SentimentResult:
    """
    Detect crisis, low-mood and stress keywords in text.

    Matching is case-insensitive substring matching. Keywords are reported
    in category order: crisis, then low mood, then stress.

    Args:
        text: Free text, typically the recent chat summary

    Returns:
        SentimentResult with the matched keywords and category flags
    """
    lower = text.lower()
    crisis = _first_match(lower, CRISIS_KEYWORDS)
    low_mood = _first_match(lower, LOW_MOOD_KEYWORDS)
    stress = _first_match(lower, STRESS_KEYWORDS)

    return SentimentResult(
        keywords=tuple(kw for kw in (crisis, low_mood, stress) if kw is not None),
        has_crisis=crisis is not None,
        has_low_mood=low_mood is not None,
        has_stress=stress is not None,
    )


class SentimentSignal(str, Enum):
    """Keyword category that drives sentiment-based ranking."""

    CRISIS = "crisis"
    LOW_MOOD = "low_mood"
    STRESS = "stress"


# Categories that answer each signal
SIGNAL_CATEGORIES: dict[SentimentSignal, frozenset[CopingCategory]] = {
    SentimentSignal.CRISIS: frozenset({CopingCategory.BREATHING, CopingCategory.GROUNDING}),
    SentimentSignal.LOW_MOOD: frozenset({CopingCategory.REFLECTION, CopingCategory.COGNITIVE}),
    SentimentSignal.STRESS: frozenset({CopingCategory.MOVEMENT, CopingCategory.GROUNDING}),
}


def dominant_signal(result: SentimentResult) -> SentimentSignal | None:
    """
    Pick the one signal that counts for ranking: crisis, then low mood, then stress.

    Lower-priority flags are ignored once a higher one is set, even when the
    tool being ranked would only match the lower one.
    """
    if result.has_crisis:
        return SentimentSignal.CRISIS
    if result.has_low_mood:
        return SentimentSignal.LOW_MOOD
    if result.has_stress:
        return SentimentSignal.STRESS
    return None


def matched_signal(category: CopingCategory, result: SentimentResult) -> SentimentSignal | None:
    """Return the dominant signal if tools of this category answer it."""
    signal = dominant_signal(result)
    if signal is not None and category in SIGNAL_CATEGORIES[signal]:
        return signal
    return None
