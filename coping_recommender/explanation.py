"""
Plain-language explanations for recommendations.
"""

from .models import CopingTool, IntensityLevel, RecommendationContext
from .sentiment import SentimentSignal, analyze_sentiment, matched_signal

SENTIMENT_REASONS: dict[SentimentSignal, str] = {
    SentimentSignal.CRISIS: "you mentioned feeling overwhelmed",
    SentimentSignal.LOW_MOOD: "you expressed feelings of sadness or hopelessness",
    SentimentSignal.STRESS: "you mentioned feeling stressed or tense",
}


def explain(tool: CopingTool, context: RecommendationContext) -> str:
    """
    Explain why a tool suits the context.

    Reasons are collected in a fixed order (today's mood, chat sentiment,
    quick relief) and joined into one sentence. A tool with no reasons gets
    a generic sentence naming its category.

    Args:
        tool: The tool being explained
        context: The context it was scored against

    Returns:
        A single sentence ending in a period
    """
    reasons: list[str] = []

    if context.current_mood is not None:
        reasons.append(f"you felt {context.current_mood.value} today")

    signal = matched_signal(tool.category, analyze_sentiment(context.recent_chat_summary))
    if signal is not None:
        reasons.append(SENTIMENT_REASONS[signal])

    if context.mood_intensity >= 7 and tool.intensity_level is IntensityLevel.HIGH:
        reasons.append("this offers quick relief")

    if not reasons:
        return f"This {tool.category.value} technique is gentle and effective."

    return f"This technique is suggested because {' and '.join(reasons)}."
