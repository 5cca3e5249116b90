"""
Mood to urgency mapping.
"""

from .errors import InvalidInputError
from .models import Mood

DEFAULT_INTENSITY = 5

# Higher intensity means a more urgent need for intervention
MOOD_INTENSITY: dict[Mood, int] = {
    Mood.ANXIOUS: 8,
    Mood.FRUSTRATED: 7,
    Mood.SAD: 6,
    Mood.NEUTRAL: 4,
    Mood.CALM: 3,
    Mood.HAPPY: 2,
}


def resolve_mood_intensity(mood: Mood | str | None) -> int:
    """
    Map a mood to its urgency on a 1-10 scale.

    Args:
        mood: A Mood, its label, or None when no mood was reported today

    Returns:
        The mood's intensity, or DEFAULT_INTENSITY when mood is None

    Raises:
        InvalidInputError: If mood is not one of the known mood labels
    """
    if mood is None:
        return DEFAULT_INTENSITY

    try:
        return MOOD_INTENSITY[Mood(mood)]
    except ValueError as e:
        raise InvalidInputError(f"Unknown mood: {mood!r}") from e
