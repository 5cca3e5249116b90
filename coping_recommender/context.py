"""
Recommendation context construction.

Callers own recency ordering: check-ins and chat messages are consumed in
the order given, and "first" is treated as "most recent". Nothing here
sorts by timestamp.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from .errors import InvalidInputError
from .intensity import resolve_mood_intensity
from .models import ChatMessage, CheckIn, RecommendationContext
from .sentiment import analyze_sentiment

logger = logging.getLogger(__name__)

# Number of leading chat messages folded into the summary
CHAT_WINDOW = 5


def _local_date(moment: datetime) -> date:
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone().date()


def _coerce_check_in(item: CheckIn | Mapping[str, Any]) -> CheckIn:
    try:
        return CheckIn.model_validate(item)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid check-in: {e}") from e


def _coerce_message(item: ChatMessage | Mapping[str, Any]) -> ChatMessage:
    try:
        return ChatMessage.model_validate(item)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid chat message: {e}") from e


def build_context(
    check_ins: Iterable[CheckIn | Mapping[str, Any]],
    chat_messages: Iterable[ChatMessage | Mapping[str, Any]] | None = None,
    today: date | None = None,
) -> RecommendationContext:
    """
    Assemble a recommendation context from raw journal and chat records.

    Args:
        check_ins: Mood check-ins, most recent first
        chat_messages: Chat messages, most recent first
        today: Calendar date to treat as today (defaults to the local date)

    Returns:
        A fresh RecommendationContext

    Raises:
        InvalidInputError: If any record is malformed or names an unknown mood
    """
    today = today or date.today()
    records = [_coerce_check_in(item) for item in check_ins]
    messages = [_coerce_message(item) for item in (chat_messages or ())]

    todays = [record for record in records if _local_date(record.created_at) == today]
    current_mood = todays[0].mood if todays else None

    summary = " ".join(message.text for message in messages[:CHAT_WINDOW])
    sentiment = analyze_sentiment(summary)

    context = RecommendationContext(
        current_mood=current_mood,
        mood_intensity=resolve_mood_intensity(current_mood),
        recent_chat_summary=summary,
        chat_keywords=sentiment.keywords,
    )
    logger.debug(
        "Built context: mood=%s intensity=%d keywords=%s",
        current_mood.value if current_mood else None,
        context.mood_intensity,
        list(context.chat_keywords),
    )
    return context
