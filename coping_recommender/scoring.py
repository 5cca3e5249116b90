"""
Additive relevance scoring for coping tools.

A tool's score is the sum of four independent components, capped at 100:

1. Mood compatibility (0-40)
2. Chat sentiment alignment (0-30)
3. Intensity matching (0-20)
4. Duration preference (0-10)
"""

from typing import Protocol

from .models import (
    CopingTool,
    IntensityLevel,
    Mood,
    RecommendationContext,
    ScoreBreakdown,
)
from .sentiment import analyze_sentiment, matched_signal

MAX_SCORE = 100

MOOD_MATCH_POINTS = 40
MOOD_PARTIAL_POINTS = 20
SENTIMENT_POINTS = 30

# (minimum mood intensity, points per tool intensity), checked top down
INTENSITY_TIERS: tuple[tuple[int, dict[IntensityLevel, int]], ...] = (
    (7, {IntensityLevel.HIGH: 20, IntensityLevel.MEDIUM: 10, IntensityLevel.LOW: 0}),
    (4, {IntensityLevel.MEDIUM: 20, IntensityLevel.LOW: 15, IntensityLevel.HIGH: 0}),
    (0, {IntensityLevel.LOW: 20, IntensityLevel.MEDIUM: 10, IntensityLevel.HIGH: 0}),
)


class Scorer(Protocol):
    """Anything that can rate a tool's relevance to a context on a 0-100 scale."""

    def score(self, tool: CopingTool, context: RecommendationContext) -> int: ...


def mood_points(tool: CopingTool, context: RecommendationContext) -> int:
    """Points for how well the tool fits today's mood."""
    if context.current_mood is None:
        return 0
    if context.current_mood in tool.supported_moods:
        return MOOD_MATCH_POINTS
    # Partial credit for general applicability
    return MOOD_PARTIAL_POINTS


def sentiment_points(tool: CopingTool, context: RecommendationContext) -> int:
    """Points when the tool's category answers the dominant chat signal."""
    sentiment = analyze_sentiment(context.recent_chat_summary)
    if matched_signal(tool.category, sentiment) is None:
        return 0
    return SENTIMENT_POINTS


def intensity_points(tool: CopingTool, context: RecommendationContext) -> int:
    """Points for matching the tool's demand to the mood's urgency."""
    for threshold, points in INTENSITY_TIERS:
        if context.mood_intensity >= threshold:
            return points[tool.intensity_level]
    return 0


def duration_points(tool: CopingTool, context: RecommendationContext) -> int:
    """Points for short tools when no mood, or a neutral one, was reported."""
    # Short tools only get a boost when the user is unsure how they feel
    if context.current_mood not in (None, Mood.NEUTRAL):
        return 0
    if tool.duration_minutes <= 3:
        return 10
    if tool.duration_minutes <= 5:
        return 5
    return 0


class HeuristicScorer:
    """Deterministic rule-based scorer."""

    def breakdown(self, tool: CopingTool, context: RecommendationContext) -> ScoreBreakdown:
        """Score a tool and keep each component for inspection."""
        mood = mood_points(tool, context)
        sentiment = sentiment_points(tool, context)
        intensity = intensity_points(tool, context)
        duration = duration_points(tool, context)

        return ScoreBreakdown(
            mood=mood,
            sentiment=sentiment,
            intensity=intensity,
            duration=duration,
            total=min(mood + sentiment + intensity + duration, MAX_SCORE),
        )

    def score(self, tool: CopingTool, context: RecommendationContext) -> int:
        return self.breakdown(tool, context).total
